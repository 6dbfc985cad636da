"""
TimeMachine Override Values
Classifies the temporal shapes accepted by travel_at
"""

from datetime import date, datetime, time, timezone, tzinfo
from enum import Enum
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import InvalidTemporalValue, UnsupportedOverrideError
from .instant import Instant


class OverrideKind(str, Enum):
    """Temporal shapes an override can take"""
    INSTANT = "instant"
    ZONED_DATETIME = "zoned_datetime"
    OFFSET_DATETIME = "offset_datetime"
    OFFSET_TIME = "offset_time"
    LOCAL_DATETIME = "local_datetime"
    LOCAL_DATE = "local_date"
    LOCAL_TIME = "local_time"
    ZONE = "zone"


OverrideValue = Union[Instant, datetime, date, time, tzinfo, str]


def classify_override(value: OverrideValue) -> OverrideKind:
    """
    Determine the override kind of a value

    Args:
        value: Instant, datetime, date, time, tzinfo or IANA zone key

    Returns:
        The matching OverrideKind

    Raises:
        UnsupportedOverrideError: If the value has no temporal meaning
    """
    if isinstance(value, Instant):
        return OverrideKind.INSTANT
    if isinstance(value, (tzinfo, str)):
        return OverrideKind.ZONE
    # datetime subclasses date, so it must be checked first
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return OverrideKind.LOCAL_DATETIME
        if isinstance(value.tzinfo, timezone):
            return OverrideKind.OFFSET_DATETIME
        return OverrideKind.ZONED_DATETIME
    if isinstance(value, date):
        return OverrideKind.LOCAL_DATE
    if isinstance(value, time):
        return OverrideKind.LOCAL_TIME if value.tzinfo is None else OverrideKind.OFFSET_TIME
    raise UnsupportedOverrideError(f"Cannot travel at a value of type {type(value).__name__}")


def resolve_zone(value: Union[tzinfo, str]) -> tzinfo:
    """Turn a zone override into a tzinfo, loading IANA keys through zoneinfo"""
    if isinstance(value, tzinfo):
        return value
    try:
        return ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidTemporalValue(f"Unknown time zone: {value!r}") from e


def fixed_offset_of(value: time) -> timezone:
    """Fixed offset carried by an aware time-of-day"""
    offset = value.utcoffset()
    if offset is None:
        raise InvalidTemporalValue(
            f"Time-of-day {value.isoformat()} needs a fixed UTC offset, not zone {value.tzinfo}"
        )
    return value.tzinfo if isinstance(value.tzinfo, timezone) else timezone(offset)
