from __future__ import annotations

import math
from datetime import datetime, tzinfo
from typing import Optional

from ..common.datetime_utils import to_local, to_utc
from ..common.validators import require_datetime
from ..core.constants import CLOCK_HOURS, FULL_TURN_DEGREES, HALF_TURN_DEGREES


def hands_angle_degrees(hour: int, minute: int) -> float:
    """Shorter angle between the hands, in degrees within [0, 180]."""
    if hour > CLOCK_HOURS:
        hour -= CLOCK_HOURS
    degrees = abs(0.5 * (60 * hour - 11 * minute))
    if degrees > HALF_TURN_DEGREES:
        degrees = FULL_TURN_DEGREES - degrees
    return degrees


def angle_between_clock_hands(value: datetime, *, tz: Optional[tzinfo] = None) -> float:
    """Angle in radians between the hour and minute hands, within [0, pi].

    Note: the hour is read in UTC but the minute in the local zone. The two
    only disagree for zones with a non-whole-hour offset.
    """
    value = require_datetime(value, "value")
    hour = to_utc(value, tz).hour
    minute = to_local(value, tz).minute
    # Convert once, at the end
    return hands_angle_degrees(hour, minute) / HALF_TURN_DEGREES * math.pi
