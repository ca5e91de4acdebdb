from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Optional

from ..core.enums import DateFormat
from .factory import DateParserFactory


def parse_rfc2822(value: str, *, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Parse an RFC 2822 date string; None when the string is not a date.

    `tz` is the zone for strings without zone information (default: local).
    """
    return DateParserFactory(local_tz=tz).for_format(DateFormat.RFC_2822).parse(value)


def parse_iso8601(value: str, *, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Parse an ISO 8601 date string; None when the string is not a date."""
    return DateParserFactory(local_tz=tz).for_format(DateFormat.ISO_8601).parse(value)
