from __future__ import annotations

from enum import Enum


class DateFormat(str, Enum):
    """Định dạng chuỗi ngày giờ được hỗ trợ khi phân tích."""

    RFC_2822 = "RFC_2822"
    ISO_8601 = "ISO_8601"
