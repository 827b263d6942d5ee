"""Shift deadline rules.

Every caller (calendar grid, blocking checks, messaging) must go through this
module so the deadline rule lives in exactly one place.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Optional

from ..common.datetime_utils import now_local, to_local_naive
from ..core.constants import MORNING_DEADLINE, OVERNIGHT_DEADLINE
from ..core.enums import Shift


def shift_deadline(rent_date: date, shift: Any) -> Optional[datetime]:
    """Instant after which a missing/pending report for rent_date is overdue.

    - morning: 17:00 the same day
    - night / 24hr: 05:00 the next day (the shift spans midnight)
    - none or unknown: no deadline
    """

    shift = Shift.parse(shift)
    if shift == Shift.MORNING:
        return datetime.combine(rent_date, MORNING_DEADLINE)
    if shift in (Shift.NIGHT, Shift.FULL_DAY):
        return datetime.combine(rent_date + timedelta(days=1), OVERNIGHT_DEADLINE)
    return None


def is_deadline_passed(rent_date: date, shift: Any, *, now: Optional[datetime] = None) -> bool:
    deadline = shift_deadline(rent_date, shift)
    if deadline is None:
        return False
    now = to_local_naive(now or now_local())
    return now >= deadline


def deadline_label(shift: Any) -> str:
    shift = Shift.parse(shift)
    if shift == Shift.MORNING:
        return "5:00 PM same day"
    if shift in (Shift.NIGHT, Shift.FULL_DAY):
        return "5:00 AM next day"
    return "No deadline"
