"""
TimeMachine Instant
Absolute point in time, independent of any calendar or zone
"""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import InvalidTemporalValue


class Instant(BaseModel):
    """Point on the UTC time-line with microsecond precision"""
    model_config = ConfigDict(extra="forbid", frozen=True)

    moment: datetime = Field(description="Aware UTC datetime")

    @field_validator('moment')
    @classmethod
    def validate_utc_moment(cls, v):
        """Normalize to UTC; naive values are read as UTC"""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        if v.tzinfo is not timezone.utc:
            return v.astimezone(timezone.utc)
        return v

    @classmethod
    def now(cls) -> 'Instant':
        """Current instant of the real system clock"""
        return cls(moment=datetime.now(timezone.utc))

    @classmethod
    def of(cls, value: datetime) -> 'Instant':
        """Instant of a datetime"""
        return cls(moment=value)

    @classmethod
    def parse(cls, text: str) -> 'Instant':
        """
        Parse an ISO 8601 timestamp

        Args:
            text: Timestamp such as "2024-01-01T11:00:00Z"

        Raises:
            InvalidTemporalValue: If the text is not a valid timestamp
        """
        try:
            moment = datetime.fromisoformat(text.replace('Z', '+00:00'))
        except (AttributeError, ValueError) as e:
            raise InvalidTemporalValue(f"Not an ISO 8601 instant: {text!r}") from e
        return cls(moment=moment)

    @classmethod
    def from_epoch_seconds(cls, seconds: float) -> 'Instant':
        """Instant at the given number of seconds since 1970-01-01T00:00:00Z"""
        try:
            return cls(moment=datetime.fromtimestamp(seconds, tz=timezone.utc))
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidTemporalValue(f"Epoch seconds out of range: {seconds!r}") from e

    @property
    def epoch_seconds(self) -> float:
        return self.moment.timestamp()

    def to_datetime(self, tz: Optional[tzinfo] = None) -> datetime:
        """Aware datetime in tz (UTC by default)"""
        if tz is None:
            return self.moment
        return self.moment.astimezone(tz)

    def __add__(self, other: timedelta) -> 'Instant':
        if not isinstance(other, timedelta):
            return NotImplemented
        return Instant(moment=self.moment + other)

    def __sub__(self, other: Union[timedelta, 'Instant']):
        if isinstance(other, Instant):
            return self.moment - other.moment
        if isinstance(other, timedelta):
            return Instant(moment=self.moment - other)
        return NotImplemented

    def __lt__(self, other: 'Instant') -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.moment < other.moment

    def __le__(self, other: 'Instant') -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.moment <= other.moment

    def __gt__(self, other: 'Instant') -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.moment > other.moment

    def __ge__(self, other: 'Instant') -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.moment >= other.moment

    def __str__(self) -> str:
        return self.moment.isoformat().replace('+00:00', 'Z')
