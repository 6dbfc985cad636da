"""
TimeMachine Clock State
Immutable reference instant plus zone, projected into seven views of "now"
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timezone, tzinfo
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import InvalidTemporalValue, TimeMachineError
from .instant import Instant
from .overrides import OverrideKind, OverrideValue, classify_override, fixed_offset_of, resolve_zone

logger = logging.getLogger(__name__)


class ClockMode(str, Enum):
    """Operating mode of a clock state"""
    LIVE = "live"      # tracks the real system clock
    FROZEN = "frozen"  # pinned to a fixed reference instant


@dataclass(frozen=True)
class TemporalSnapshot:
    """All seven projections of a single sampled moment"""
    instant: Instant
    zoned_datetime: datetime
    offset_datetime: datetime
    offset_time: time
    local_datetime: datetime
    local_date: date
    local_time: time


class ClockState(BaseModel):
    """
    Effective clock: a reference instant viewed through a zone

    A LIVE state samples the system clock on every query, a FROZEN state
    always answers with its reference instant. A zone of None follows the
    operating system's local zone and its DST rules.

    States are never mutated. derive() returns the state that results from
    an override and leaves the receiver untouched.
    """
    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    mode: ClockMode = Field(description="LIVE or FROZEN")
    reference: Optional[datetime] = Field(default=None, description="Pinned UTC instant of a FROZEN state")
    zone: Optional[tzinfo] = Field(default=None, description="Zone or fixed offset; None is the system zone")

    @field_validator('reference')
    @classmethod
    def validate_utc_reference(cls, v):
        """Ensure the reference is an aware datetime in UTC"""
        if v is None:
            return v
        if v.tzinfo is None:
            raise ValueError("reference must be timezone aware")
        return v.astimezone(timezone.utc)

    @model_validator(mode='after')
    def validate_mode_reference(self) -> 'ClockState':
        """A reference is present exactly when the state is frozen"""
        if self.mode is ClockMode.FROZEN and self.reference is None:
            raise ValueError("frozen clock state requires a reference instant")
        if self.mode is ClockMode.LIVE and self.reference is not None:
            raise ValueError("live clock state cannot carry a reference instant")
        return self

    @classmethod
    def live(cls, zone: Optional[tzinfo] = None) -> 'ClockState':
        return cls(mode=ClockMode.LIVE, zone=zone)

    @classmethod
    def frozen(cls, reference: datetime, zone: Optional[tzinfo] = None) -> 'ClockState':
        return cls(mode=ClockMode.FROZEN, reference=reference, zone=zone)

    @property
    def is_live(self) -> bool:
        return self.mode is ClockMode.LIVE

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    def _sample(self) -> datetime:
        moment = datetime.now(timezone.utc) if self.mode is ClockMode.LIVE else self.reference
        return moment.astimezone(self.zone)

    def now(self) -> TemporalSnapshot:
        """
        Sample the clock once and derive every projection from that sample

        Returns:
            Snapshot whose projections agree on instant and offset
        """
        zoned = self._sample()
        offset = zoned.astimezone(timezone(zoned.utcoffset()))
        return TemporalSnapshot(
            instant=Instant(moment=zoned),
            zoned_datetime=zoned,
            offset_datetime=offset,
            offset_time=offset.timetz(),
            local_datetime=zoned.replace(tzinfo=None),
            local_date=zoned.date(),
            local_time=zoned.time(),
        )

    def instant_of_now(self) -> Instant:
        return self.now().instant

    def zoned_datetime_of_now(self) -> datetime:
        return self.now().zoned_datetime

    def offset_datetime_of_now(self) -> datetime:
        return self.now().offset_datetime

    def offset_time_of_now(self) -> time:
        return self.now().offset_time

    def local_datetime_of_now(self) -> datetime:
        return self.now().local_datetime

    def local_date_of_now(self) -> date:
        return self.now().local_date

    def local_time_of_now(self) -> time:
        return self.now().local_time

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def derive(self, value: OverrideValue, fold: int = 0) -> 'ClockState':
        """
        Compute the state that results from traveling at value

        Args:
            value: Override value of any OverrideKind
            fold: Disambiguation for repeated or skipped wall times

        Returns:
            New clock state; the receiver is unchanged

        Raises:
            InvalidTemporalValue: If value cannot be placed on the time-line
        """
        kind = classify_override(value)
        derivation = getattr(self, _DERIVATIONS[kind])
        try:
            return derivation(value, fold)
        except TimeMachineError:
            raise
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidTemporalValue(f"Cannot travel at {kind.value} {value!r}: {e}") from e

    def _at_instant(self, value: Instant, fold: int) -> 'ClockState':
        return ClockState.frozen(value.moment, self.zone)

    def _at_zoned_datetime(self, value: datetime, fold: int) -> 'ClockState':
        return ClockState.frozen(value, value.tzinfo)

    def _at_offset_datetime(self, value: datetime, fold: int) -> 'ClockState':
        return ClockState.frozen(value, value.tzinfo)

    def _at_offset_time(self, value: time, fold: int) -> 'ClockState':
        offset = fixed_offset_of(value)
        moment = datetime.combine(self.local_date_of_now(), value.replace(tzinfo=offset))
        return ClockState.frozen(moment, offset)

    def _at_local_datetime(self, value: datetime, fold: int) -> 'ClockState':
        return ClockState.frozen(self._attach_zone(value, fold), self.zone)

    def _at_local_date(self, value: date, fold: int) -> 'ClockState':
        # start of day is the earliest valid instant on value, whatever fold is configured
        return self._at_local_datetime(datetime.combine(value, time.min), 0)

    def _at_local_time(self, value: time, fold: int) -> 'ClockState':
        return self._at_local_datetime(datetime.combine(self.local_date_of_now(), value), fold)

    def _at_zone(self, value, fold: int) -> 'ClockState':
        return ClockState(mode=self.mode, reference=self.reference, zone=resolve_zone(value))

    def _attach_zone(self, civil: datetime, fold: int) -> datetime:
        """Interpret a naive wall-clock datetime in this state's zone"""
        earlier, later = (self._localize(civil.replace(fold=f)) for f in (0, 1))
        if earlier.utcoffset() != later.utcoffset():
            logger.debug(
                f"Wall time {civil.isoformat()} is repeated or skipped in "
                f"{self.zone or 'system zone'}, resolving with fold={fold}"
            )
        return later if fold else earlier

    def _localize(self, civil: datetime) -> datetime:
        if self.zone is None:
            return civil.astimezone()
        return civil.replace(tzinfo=self.zone)


_DERIVATIONS = {
    OverrideKind.INSTANT: '_at_instant',
    OverrideKind.ZONED_DATETIME: '_at_zoned_datetime',
    OverrideKind.OFFSET_DATETIME: '_at_offset_datetime',
    OverrideKind.OFFSET_TIME: '_at_offset_time',
    OverrideKind.LOCAL_DATETIME: '_at_local_datetime',
    OverrideKind.LOCAL_DATE: '_at_local_date',
    OverrideKind.LOCAL_TIME: '_at_local_time',
    OverrideKind.ZONE: '_at_zone',
}
