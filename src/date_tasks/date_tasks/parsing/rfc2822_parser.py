from __future__ import annotations

import re
from datetime import datetime
from email.utils import parsedate_to_datetime

from dateutil import parser as date_parser
from dateutil import tz

from ..core.enums import DateFormat
from .base import DateParser

# 'GMT+01', 'UT-0530', 'UTC+02:00': +01 means one hour ahead of UTC
_GMT_OFFSET = re.compile(r"\s(?:GMT|UTC|UT)([+-])(\d{1,2})(?::?(\d{2}))?$", re.IGNORECASE)

# Missing fields never come from the current date
_DEFAULT = datetime(2001, 1, 1)


class Rfc2822Parser(DateParser):
    """RFC 2822 section 3.3 dates, e.g. 'Tue, 26 Jan 2016 13:48:02 GMT'.

    The strict grammar (with obsolete zone names like EST) is tried first;
    looser forms such as 'December 17, 1995 03:24:00' fall back to dateutil.
    """

    date_format = DateFormat.RFC_2822

    def _parse(self, text: str) -> datetime:
        match = _GMT_OFFSET.search(text)
        if not match:
            return self._parse_without_suffix(text)

        sign, hours, minutes = match.groups()
        offset = int(hours) * 3600 + int(minutes or 0) * 60
        parsed = self._parse_without_suffix(text[: match.start()])
        return parsed.replace(tzinfo=tz.tzoffset(None, -offset if sign == "-" else offset))

    def _parse_without_suffix(self, text: str) -> datetime:
        try:
            parsed = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError):
            # Python < 3.10 raises TypeError instead of ValueError
            return date_parser.parse(text, default=_DEFAULT)

        # -0000 is UTC with the sender's local offset unknown
        if parsed.tzinfo is None and text.split()[-1] == "-0000":
            return parsed.replace(tzinfo=tz.UTC)
        return parsed
