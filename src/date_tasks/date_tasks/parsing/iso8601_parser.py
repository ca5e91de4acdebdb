from __future__ import annotations

from datetime import datetime

from dateutil import parser as date_parser
from dateutil import tz

from ..core.enums import DateFormat
from .base import DateParser

_isoparser = date_parser.isoparser()


class Iso8601Parser(DateParser):
    """ISO 8601 dates, e.g. '2016-01-19T08:07:37Z'.

    Date-only forms are UTC midnight; date-times without an offset are local.
    """

    date_format = DateFormat.ISO_8601

    def _parse(self, text: str) -> datetime:
        try:
            day = _isoparser.parse_isodate(text)
        except ValueError:
            return _isoparser.isoparse(text)
        return datetime(day.year, day.month, day.day, tzinfo=tz.UTC)
