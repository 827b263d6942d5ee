from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ...core.enums import DayStatus
from ...drivers.model import DriverLifecycle
from ...reports.model import ReportRecord


@dataclass(frozen=True)
class StatusDecision:
    status: DayStatus
    note: Optional[str] = None


class ClassificationStrategy(ABC):
    """Strategy Pattern: encapsulate how one driver-day is classified."""

    @abstractmethod
    def decide(
        self,
        *,
        day: date,
        driver: DriverLifecycle,
        report: Optional[ReportRecord],
        has_adjustment: bool,
        now: datetime,
    ) -> StatusDecision:
        raise NotImplementedError
