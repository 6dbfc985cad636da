"""
TimeMachine Clock Interface
Injectable clock that reads through a time override registry
"""

from datetime import date, datetime
from typing import Optional, Protocol

from .registry import TimeOverrideRegistry, get_registry


class Clock(Protocol):
    """Clock interface for deterministic time handling"""

    def now(self) -> datetime:
        """Get current time in the effective zone"""
        ...

    def utc_now(self) -> datetime:
        """Get current UTC time"""
        ...

    def today(self) -> date:
        """Get current civil date in the effective zone"""
        ...


class TimeMachineClock:
    """
    Clock backed by a TimeOverrideRegistry

    Without an explicit registry every call reads the process-wide one, so a
    clock created before set_registry() follows the replacement.
    """

    def __init__(self, registry: Optional[TimeOverrideRegistry] = None):
        self._registry = registry

    @property
    def registry(self) -> TimeOverrideRegistry:
        return self._registry if self._registry is not None else get_registry()

    def now(self) -> datetime:
        return self.registry.zoned_datetime_of_now()

    def utc_now(self) -> datetime:
        return self.registry.instant_of_now().to_datetime()

    def today(self) -> date:
        return self.registry.local_date_of_now()
