"""
TimeMachine Override Registry
Process-wide slot holding the clock state every "now" query reads through
"""

import logging
from contextlib import contextmanager
from datetime import date, datetime, time
from typing import Iterator, Optional

from .clock_state import ClockState, TemporalSnapshot
from .config import TimeMachineConfig
from .instant import Instant
from .overrides import OverrideValue

logger = logging.getLogger(__name__)


class TimeOverrideRegistry:
    """
    Holds exactly one ClockState and swaps it whole on every override

    Without an override the state is live in the configured default zone,
    so queries delegate to the real system clock. The registry is meant for
    serialized test execution and does no locking of its own.
    """

    def __init__(self, config: Optional[TimeMachineConfig] = None):
        self.config = config or TimeMachineConfig()
        self.config.validate()
        self._state = ClockState.live(self.config.default_zone)

    @property
    def state(self) -> ClockState:
        """Currently effective clock state"""
        return self._state

    @property
    def is_overridden(self) -> bool:
        """Whether the state differs from the initial live state"""
        return self._state != ClockState.live(self.config.default_zone)

    def travel_at(self, value: OverrideValue) -> OverrideValue:
        """
        Move the effective "now" to value

        Args:
            value: Instant, datetime, date, time, tzinfo or IANA zone key

        Returns:
            The value passed in

        Raises:
            InvalidTemporalValue: If value cannot be placed on the time-line;
                the previous state is kept
        """
        new_state = self._state.derive(value, fold=self.config.fold)
        self._state = new_state
        logger.debug(f"Traveled at {value!r}: mode={new_state.mode.value}, zone={new_state.zone}")
        return value

    def reset(self) -> None:
        """Return to the real clock in the configured default zone"""
        if self.is_overridden:
            logger.info("Time machine reset to the real system clock")
        self._state = ClockState.live(self.config.default_zone)

    @contextmanager
    def traveling(self, value: OverrideValue) -> Iterator[OverrideValue]:
        """
        Travel at value for the duration of a with block

        The state in effect before entering is restored on exit, whether the
        block completes or raises.

        Usage:
            with registry.traveling(date(2024, 2, 29)):
                assert registry.local_date_of_now() == date(2024, 2, 29)
        """
        previous = self._state
        self.travel_at(value)
        try:
            yield value
        finally:
            self._state = previous
            logger.debug(f"Returned from {value!r}: mode={previous.mode.value}, zone={previous.zone}")

    def snapshot(self) -> TemporalSnapshot:
        return self._state.now()

    def instant_of_now(self) -> Instant:
        return self._state.instant_of_now()

    def zoned_datetime_of_now(self) -> datetime:
        return self._state.zoned_datetime_of_now()

    def offset_datetime_of_now(self) -> datetime:
        return self._state.offset_datetime_of_now()

    def offset_time_of_now(self) -> time:
        return self._state.offset_time_of_now()

    def local_datetime_of_now(self) -> datetime:
        return self._state.local_datetime_of_now()

    def local_date_of_now(self) -> date:
        return self._state.local_date_of_now()

    def local_time_of_now(self) -> time:
        return self._state.local_time_of_now()


# Global registry instance
_registry_instance: Optional[TimeOverrideRegistry] = None


def get_registry() -> TimeOverrideRegistry:
    """Get the process-wide registry instance"""
    global _registry_instance
    if _registry_instance is None:
        _registry_instance = TimeOverrideRegistry()
    return _registry_instance


def set_registry(registry: TimeOverrideRegistry) -> None:
    """Replace the process-wide registry instance"""
    global _registry_instance
    _registry_instance = registry
    logger.info(f"Process-wide time registry replaced (default zone: {registry.config.default_zone})")
