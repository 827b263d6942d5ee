from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Optional, Tuple

from ..core.enums import DayStatus, Shift
from ..reports.model import ReportRecord


@dataclass(frozen=True)
class DayStatusRecord:
    day: date
    status: DayStatus
    note: Optional[str] = None
    report: Optional[ReportRecord] = None

    def to_dict(self) -> dict:
        return {
            "date": self.day.strftime("%Y-%m-%d"),
            "status": self.status.value,
            "note": self.note or "",
            "report_id": self.report.report_id if self.report else None,
            "amount": self.report.rent_paid_amount if self.report else None,
        }


@dataclass(frozen=True)
class RentRangeResult:
    """Ordered per-day statuses for one driver plus blocking counters."""

    driver_id: str
    start: date
    end: date
    shift: Shift = Shift.NONE
    driver_name: str = ""
    vehicle_number: str = ""
    days: Tuple[DayStatusRecord, ...] = field(default_factory=tuple)
    overdue_count: int = 0
    rejected_count: int = 0

    def counts(self) -> Dict[DayStatus, int]:
        return dict(Counter(d.status for d in self.days))

    def status_on(self, day: date) -> Optional[DayStatus]:
        for d in self.days:
            if d.day == day:
                return d.status
        return None


@dataclass(frozen=True)
class BlockingIssues:
    overdue_count: int = 0
    rejected_count: int = 0

    @property
    def is_blocked(self) -> bool:
        return self.overdue_count > 0 or self.rejected_count > 0

    def to_dict(self) -> dict:
        return {
            "overdue_count": self.overdue_count,
            "rejected_count": self.rejected_count,
            "is_blocked": self.is_blocked,
        }


@dataclass(frozen=True)
class FleetDayStats:
    """Dashboard summary for a single day across the fleet."""

    day: date
    online_drivers: int
    shift_distribution: Dict[str, int]
    status_counts: Dict[str, int]

    def to_dict(self) -> dict:
        return {
            "date": self.day.strftime("%Y-%m-%d"),
            "online_drivers": self.online_drivers,
            "shift_distribution": dict(self.shift_distribution),
            "status_counts": dict(self.status_counts),
        }
