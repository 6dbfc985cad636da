"""
TimeMachine Error Taxonomy
Exceptions raised while overriding or configuring the current time
"""


class TimeMachineError(Exception):
    """Base class for all time machine errors"""
    pass


class InvalidTemporalValue(TimeMachineError, ValueError):
    """Raised when an override value is not a well-formed point in time"""
    pass


class UnsupportedOverrideError(InvalidTemporalValue, TypeError):
    """Raised when an override value is of no recognized temporal kind"""
    pass


class TimeMachineConfigError(TimeMachineError, ValueError):
    """Raised when a TimeMachineConfig fails validation"""
    pass
