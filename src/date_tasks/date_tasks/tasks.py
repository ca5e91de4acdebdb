"""Public date task functions."""

from .calendar_rules.leap_year import is_leap_year
from .clock.service import angle_between_clock_hands
from .parsing.service import parse_iso8601, parse_rfc2822
from .timespan.service import time_span_to_string

__all__ = [
    "parse_rfc2822",
    "parse_iso8601",
    "is_leap_year",
    "time_span_to_string",
    "angle_between_clock_hands",
]
