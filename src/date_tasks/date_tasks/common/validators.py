from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def require_date(value: date, field_name: str) -> date:
    if not isinstance(value, date):
        raise ValidationError(f"{field_name} không hợp lệ")
    return value


def require_datetime(value: datetime, field_name: str) -> datetime:
    if not isinstance(value, datetime):
        raise ValidationError(f"{field_name} phải là datetime")
    return value
