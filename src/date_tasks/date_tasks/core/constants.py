"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

CLOCK_HOURS = 12
HALF_TURN_DEGREES = 180
FULL_TURN_DEGREES = 360

TIME_SPAN_FORMAT = "{hours:02d}:{minutes:02d}:{seconds:02d}.{milliseconds:03d}"
