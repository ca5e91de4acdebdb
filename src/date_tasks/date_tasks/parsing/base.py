from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import ClassVar, Optional

from ..common.datetime_utils import as_aware
from ..core.enums import DateFormat

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateParser(ABC):
    """Strategy Pattern: turn one textual date format into an aware datetime.

    Malformed input never raises; `parse` returns None instead so callers
    check the result the same way for every format.
    """

    date_format: ClassVar[DateFormat]

    local_tz: Optional[tzinfo] = None

    def parse(self, value: object) -> Optional[datetime]:
        if not isinstance(value, str) or not value.strip():
            logger.debug("Ignoring non-text %s input: %r", self.date_format.value, value)
            return None

        text = value.strip()
        try:
            parsed = self._parse(text)
        except (ValueError, TypeError, OverflowError) as exc:
            logger.debug("Failed to parse %s date %r: %s", self.date_format.value, text, exc)
            return None
        return as_aware(parsed, self.local_tz)

    @abstractmethod
    def _parse(self, text: str) -> datetime:
        """Parse stripped text; raise ValueError when it is not a date."""
        raise NotImplementedError
