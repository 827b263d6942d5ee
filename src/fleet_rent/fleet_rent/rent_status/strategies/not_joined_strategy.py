from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ...core.enums import DayStatus
from ...drivers.model import DriverLifecycle
from ...reports.model import ReportRecord
from .base import ClassificationStrategy, StatusDecision


class NotJoinedStrategy(ClassificationStrategy):
    """Day before the driver's joining date."""

    def decide(
        self,
        *,
        day: date,
        driver: DriverLifecycle,
        report: Optional[ReportRecord],
        has_adjustment: bool,
        now: datetime,
    ) -> StatusDecision:
        return StatusDecision(status=DayStatus.NOT_JOINED, note=f"Joins on {driver.joining_date.isoformat()}")
