"""
TimeMachine Configuration
Defaults applied by a registry when it is created or reset
"""

import logging
from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from .errors import TimeMachineConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeMachineConfig:
    """
    Registry configuration

    default_zone: zone of the live clock; None follows the operating system
    fold: PEP 495 disambiguation for wall times repeated or skipped by a
          DST transition (0 = earlier occurrence, 1 = later occurrence)
    """
    default_zone: Optional[tzinfo] = None
    fold: int = 0

    def validate(self) -> None:
        """Validate configuration values"""
        if self.fold not in (0, 1):
            raise TimeMachineConfigError(f"TimeMachineConfig: fold must be 0 or 1, got {self.fold!r}")
        if self.default_zone is not None and not isinstance(self.default_zone, tzinfo):
            raise TimeMachineConfigError(
                f"TimeMachineConfig: default_zone must be a tzinfo, got {type(self.default_zone).__name__}"
            )
        logger.debug(f"TimeMachineConfig validated: zone={self.default_zone}, fold={self.fold}")
