from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ...core.enums import DayStatus
from ...drivers.model import DriverLifecycle
from ...reports.model import ReportRecord
from ..deadline import is_deadline_passed, shift_deadline
from .base import ClassificationStrategy, StatusDecision


class MissingReportStrategy(ClassificationStrategy):
    """No report for the day: offline window first, then the shift deadline."""

    def decide(
        self,
        *,
        day: date,
        driver: DriverLifecycle,
        report: Optional[ReportRecord],
        has_adjustment: bool,
        now: datetime,
    ) -> StatusDecision:
        if driver.in_offline_window(day):
            return StatusDecision(
                status=DayStatus.OFFLINE,
                note=f"Offline since {driver.offline_from_date.isoformat()}",
            )

        if is_deadline_passed(day, driver.shift, now=now):
            deadline = shift_deadline(day, driver.shift)
            return StatusDecision(status=DayStatus.OVERDUE, note=f"Deadline {deadline:%Y-%m-%d %H:%M} passed")

        return StatusDecision(status=DayStatus.PENDING)
