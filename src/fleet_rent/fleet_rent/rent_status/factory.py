from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..drivers.model import DriverLifecycle
from ..reports.model import ReportRecord
from .strategies.base import ClassificationStrategy
from .strategies.missing_report_strategy import MissingReportStrategy
from .strategies.not_joined_strategy import NotJoinedStrategy
from .strategies.submitted_report_strategy import SubmittedReportStrategy


@dataclass
class ClassificationStrategyFactory:
    """Factory Pattern: choose the strategy for one driver-day.

    Order matters: pre-joining days win over everything, then a submitted
    report, then the missing-report rules.
    """

    def for_day(self, *, day: date, driver: DriverLifecycle, report: Optional[ReportRecord]) -> ClassificationStrategy:
        if not driver.has_joined_by(day):
            return NotJoinedStrategy()
        if report is not None:
            return SubmittedReportStrategy()
        return MissingReportStrategy()
