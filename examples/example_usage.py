"""Ví dụ: gọi trực tiếp các hàm ngày giờ (không qua lớp nào khác).

Run from the repository root: `python -m examples.example_usage`
"""

import logging
from datetime import timedelta

from src.date_tasks.date_tasks.common.datetime_utils import now_local
from src.date_tasks.date_tasks.core.settings import configure_logging, get_settings
from src.date_tasks.date_tasks.tasks import (
    angle_between_clock_hands,
    is_leap_year,
    parse_iso8601,
    parse_rfc2822,
    time_span_to_string,
)

logger = logging.getLogger(__name__)


def main():
    configure_logging()
    logger.info("settings=%s", get_settings().module)

    started = parse_rfc2822("Tue, 26 Jan 2016 13:48:02 GMT")
    finished = parse_iso8601("2016-01-26T15:20:10.453Z")
    print("rfc2822:", started.isoformat())
    print("iso8601:", finished.isoformat())
    print("invalid:", parse_rfc2822("not a date"))

    print("leap 2016:", is_leap_year(started))
    print("span:", time_span_to_string(started, finished))
    print("angle:", angle_between_clock_hands(started))

    now = now_local()
    print("last 90s:", time_span_to_string(now, now - timedelta(seconds=90)))


if __name__ == "__main__":
    main()
