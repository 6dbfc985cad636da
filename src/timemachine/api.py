"""
TimeMachine Module API
Module-level entry points delegating to the process-wide registry
"""

from contextlib import contextmanager
from datetime import date, datetime, time
from typing import Iterator

from .clock_state import TemporalSnapshot
from .instant import Instant
from .overrides import OverrideValue
from .registry import get_registry


def travel_at(value: OverrideValue) -> OverrideValue:
    """
    Travel at a point in time, a civil date or time, or a zone

    Instant, local and zone overrides keep the previously set zone or
    instant respectively; zoned and offset values replace both.

    Returns:
        The value passed in
    """
    return get_registry().travel_at(value)


@contextmanager
def traveling(value: OverrideValue) -> Iterator[OverrideValue]:
    """Travel at value inside a with block, restoring the prior state on exit"""
    with get_registry().traveling(value) as traveled:
        yield traveled


def reset() -> None:
    """Reset time of now to the real world"""
    get_registry().reset()


def snapshot() -> TemporalSnapshot:
    return get_registry().snapshot()


def instant_of_now() -> Instant:
    return get_registry().instant_of_now()


def zoned_datetime_of_now() -> datetime:
    return get_registry().zoned_datetime_of_now()


def offset_datetime_of_now() -> datetime:
    return get_registry().offset_datetime_of_now()


def offset_time_of_now() -> time:
    return get_registry().offset_time_of_now()


def local_datetime_of_now() -> datetime:
    return get_registry().local_datetime_of_now()


def local_date_of_now() -> date:
    return get_registry().local_date_of_now()


def local_time_of_now() -> time:
    return get_registry().local_time_of_now()
