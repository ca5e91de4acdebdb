from datetime import datetime

import pytest
from dateutil import tz

from src.date_tasks.date_tasks.parsing.service import parse_iso8601


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2016-01-19T16:07:37+00:00", datetime(2016, 1, 19, 16, 7, 37, tzinfo=tz.UTC)),
        ("2016-01-19T08:07:37Z", datetime(2016, 1, 19, 8, 7, 37, tzinfo=tz.UTC)),
        ("2016-01-19T10:07:37+02:00", datetime(2016, 1, 19, 8, 7, 37, tzinfo=tz.UTC)),
        ("2016-01-19T08:07:37.123Z", datetime(2016, 1, 19, 8, 7, 37, 123000, tzinfo=tz.UTC)),
    ],
)
def test_parse_iso_strings(value, expected):
    assert parse_iso8601(value) == expected


def test_date_only_is_utc_midnight():
    tokyo = tz.gettz("Asia/Tokyo")

    parsed = parse_iso8601("2016-01-19", tz=tokyo)

    assert parsed == datetime(2016, 1, 19, tzinfo=tz.UTC)


def test_datetime_without_offset_is_local_time():
    tokyo = tz.gettz("Asia/Tokyo")

    parsed = parse_iso8601("2016-01-19T08:07:37", tz=tokyo)

    assert parsed == datetime(2016, 1, 18, 23, 7, 37, tzinfo=tz.UTC)


@pytest.mark.parametrize(
    "value",
    ["not a date", "2016-13-45T00:00:00Z", "Tue, 26 Jan 2016 13:48:02 GMT", "", None],
)
def test_malformed_input_returns_none(value):
    assert parse_iso8601(value) is None
    assert parse_iso8601(value) is None
