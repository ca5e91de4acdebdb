from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND, TIME_SPAN_FORMAT


@dataclass(frozen=True)
class TimeSpan:
    """Giá trị (value object): Khoảng thời gian không âm, độ chính xác mili giây."""

    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    @classmethod
    def from_milliseconds(cls, total: int) -> "TimeSpan":
        hours, rest = divmod(abs(total), MS_PER_HOUR)
        minutes, rest = divmod(rest, MS_PER_MINUTE)
        seconds, milliseconds = divmod(rest, MS_PER_SECOND)
        return cls(hours=hours, minutes=minutes, seconds=seconds, milliseconds=milliseconds)

    def __str__(self) -> str:
        # HH has no upper bound: 100+ hours render with more digits
        return TIME_SPAN_FORMAT.format(
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
            milliseconds=self.milliseconds,
        )
