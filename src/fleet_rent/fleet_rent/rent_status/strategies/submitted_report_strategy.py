from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ...core.enums import DayStatus, ReportStatus
from ...drivers.model import DriverLifecycle
from ...reports.model import ReportRecord
from ..deadline import is_deadline_passed, shift_deadline
from .base import ClassificationStrategy, StatusDecision

_DIRECT = {
    ReportStatus.LEAVE: DayStatus.LEAVE,
    ReportStatus.REJECTED: DayStatus.REJECTED,
    ReportStatus.PENDING_VERIFICATION: DayStatus.PENDING_VERIFICATION,
}


class SubmittedReportStrategy(ClassificationStrategy):
    """A report exists for the day; its stored status drives the result."""

    def decide(
        self,
        *,
        day: date,
        driver: DriverLifecycle,
        report: Optional[ReportRecord],
        has_adjustment: bool,
        now: datetime,
    ) -> StatusDecision:
        status = report.status if report else ReportStatus.PENDING

        if status in _DIRECT:
            return StatusDecision(status=_DIRECT[status], note=report.remarks if report else None)

        if status == ReportStatus.PAID:
            if has_adjustment:
                return StatusDecision(status=DayStatus.PAID_WITH_ADJUSTMENT, note="Approved adjustment linked")
            return StatusDecision(status=DayStatus.PAID)

        # Unresolved pending submission.
        if is_deadline_passed(day, driver.shift, now=now):
            deadline = shift_deadline(day, driver.shift)
            return StatusDecision(
                status=DayStatus.OVERDUE,
                note=f"Pending past deadline {deadline:%Y-%m-%d %H:%M}",
            )
        return StatusDecision(status=DayStatus.PENDING, note="Awaiting verification")
