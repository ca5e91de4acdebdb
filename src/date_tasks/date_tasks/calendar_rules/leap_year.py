from __future__ import annotations

from datetime import date, tzinfo
from typing import Optional

from ..common.datetime_utils import local_year
from ..common.validators import require_date


def is_leap_year(value: date, *, tz: Optional[tzinfo] = None) -> bool:
    """Gregorian rule: every 4th year, except centuries not divisible by 400.

    An aware datetime is read in the local zone before taking its year.
    """
    year = local_year(require_date(value, "value"), tz)
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
