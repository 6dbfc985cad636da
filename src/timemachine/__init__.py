"""
TimeMachine
Deterministic control over "the current time" for automated tests
"""

from .api import (
    instant_of_now,
    local_date_of_now,
    local_datetime_of_now,
    local_time_of_now,
    offset_datetime_of_now,
    offset_time_of_now,
    reset,
    snapshot,
    travel_at,
    traveling,
    zoned_datetime_of_now,
)
from .clock import Clock, TimeMachineClock
from .clock_state import ClockMode, ClockState, TemporalSnapshot
from .config import TimeMachineConfig
from .errors import (
    InvalidTemporalValue,
    TimeMachineConfigError,
    TimeMachineError,
    UnsupportedOverrideError,
)
from .instant import Instant
from .overrides import OverrideKind, classify_override
from .registry import TimeOverrideRegistry, get_registry, set_registry

__all__ = [
    'travel_at', 'traveling', 'reset', 'snapshot',
    'instant_of_now', 'zoned_datetime_of_now', 'offset_datetime_of_now', 'offset_time_of_now',
    'local_datetime_of_now', 'local_date_of_now', 'local_time_of_now',
    'Clock', 'TimeMachineClock',
    'ClockMode', 'ClockState', 'TemporalSnapshot',
    'TimeMachineConfig',
    'TimeMachineError', 'InvalidTemporalValue', 'UnsupportedOverrideError', 'TimeMachineConfigError',
    'Instant',
    'OverrideKind', 'classify_override',
    'TimeOverrideRegistry', 'get_registry', 'set_registry',
]
