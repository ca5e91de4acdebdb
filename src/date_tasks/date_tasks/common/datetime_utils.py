from __future__ import annotations

from datetime import date, datetime, timedelta, tzinfo
from typing import Optional

from dateutil import tz

from ..core.exceptions import ValidationError
from ..core.settings import get_settings

EPOCH = datetime(1970, 1, 1, tzinfo=tz.UTC)


def local_timezone() -> tzinfo:
    """Zone used as "local time": LOCAL_TIMEZONE if set, else the system zone."""
    name = get_settings().local_timezone
    if not name:
        return tz.tzlocal()

    zone = tz.gettz(name)
    if zone is None:
        raise ValidationError(f"Múi giờ không hợp lệ: {name}")
    return zone


def as_aware(value: datetime, zone: Optional[tzinfo] = None) -> datetime:
    """Attach the local zone to a naive datetime; aware values pass through."""
    if value.tzinfo is not None and value.utcoffset() is not None:
        return value
    return value.replace(tzinfo=zone or local_timezone())


def to_local(value: datetime, zone: Optional[tzinfo] = None) -> datetime:
    zone = zone or local_timezone()
    return as_aware(value, zone).astimezone(zone)


def to_utc(value: datetime, zone: Optional[tzinfo] = None) -> datetime:
    return as_aware(value, zone).astimezone(tz.UTC)


def to_epoch_millis(value: datetime, zone: Optional[tzinfo] = None) -> int:
    """Whole milliseconds since 1970-01-01T00:00:00Z."""
    return (to_utc(value, zone) - EPOCH) // timedelta(milliseconds=1)


def local_year(value: date, zone: Optional[tzinfo] = None) -> int:
    if isinstance(value, datetime) and value.tzinfo is not None:
        return to_local(value, zone).year
    return value.year


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(local_timezone())
