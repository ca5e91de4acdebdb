from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from ..core.enums import DateFormat
from ..core.exceptions import ValidationError
from .base import DateParser
from .iso8601_parser import Iso8601Parser
from .rfc2822_parser import Rfc2822Parser


@dataclass
class DateParserFactory:
    """Factory Pattern: choose the parser for a date format."""

    local_tz: Optional[tzinfo] = None

    def for_format(self, date_format: DateFormat) -> DateParser:
        if date_format == DateFormat.RFC_2822:
            return Rfc2822Parser(local_tz=self.local_tz)
        if date_format == DateFormat.ISO_8601:
            return Iso8601Parser(local_tz=self.local_tz)
        raise ValidationError(f"Định dạng ngày không được hỗ trợ: {date_format}")
