from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.constants import MAX_CALENDAR_DAYS
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_date(value: Optional[str], field_name: str) -> date:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD") from None


def require_range(start: date, end: date, *, max_days: int = MAX_CALENDAR_DAYS) -> None:
    if start > end:
        raise ValidationError("start must not be after end")
    if (end - start).days + 1 > max_days:
        raise ValidationError(f"range is limited to {max_days} days")
