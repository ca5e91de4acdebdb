from __future__ import annotations

from datetime import datetime, timedelta, tzinfo
from typing import Optional

from ..common.datetime_utils import to_utc
from ..common.validators import require_datetime
from .model import TimeSpan


def time_span_between(start: datetime, end: datetime, *, tz: Optional[tzinfo] = None) -> TimeSpan:
    """Absolute span between two instants; naive values are read as local time."""
    start_utc = to_utc(require_datetime(start, "start"), tz)
    end_utc = to_utc(require_datetime(end, "end"), tz)
    return TimeSpan.from_milliseconds(abs(end_utc - start_utc) // timedelta(milliseconds=1))


def time_span_to_string(start: datetime, end: datetime, *, tz: Optional[tzinfo] = None) -> str:
    """Format the span between two instants as 'HH:mm:ss.sss', in either order."""
    return str(time_span_between(start, end, tz=tz))
