from __future__ import annotations

import logging
from datetime import date, datetime
from typing import AbstractSet, Dict, Iterable, List, Optional

from ..common.datetime_utils import iter_days, now_local, to_local_naive
from ..core.enums import DayStatus
from ..drivers.model import DriverLifecycle
from ..reports.model import ReportRecord
from .classifier import classify_day
from .model import DayStatusRecord, RentRangeResult

logger = logging.getLogger(__name__)


def _submitted_key(report: ReportRecord) -> datetime:
    if report.submitted_at is None:
        return datetime.min
    return to_local_naive(report.submitted_at)


def pick_latest_report(reports: Iterable[ReportRecord]) -> Optional[ReportRecord]:
    """Latest submitted_at wins; reports without a timestamp sort oldest."""
    latest: Optional[ReportRecord] = None
    for r in reports:
        if latest is None or _submitted_key(r) >= _submitted_key(latest):
            latest = r
    return latest


def index_reports_by_date(
    reports: Iterable[ReportRecord],
    *,
    driver_id: str,
    start: date,
    end: date,
) -> Dict[date, ReportRecord]:
    grouped: Dict[date, List[ReportRecord]] = {}
    for r in reports:
        if r.driver_id != driver_id or not (start <= r.rent_date <= end):
            continue
        grouped.setdefault(r.rent_date, []).append(r)

    out: Dict[date, ReportRecord] = {}
    for day, items in grouped.items():
        if len(items) > 1:
            logger.warning("driver %s has %d reports for %s; using the latest", driver_id, len(items), day)
        out[day] = pick_latest_report(items)
    return out


def aggregate_range(
    driver: DriverLifecycle,
    start: date,
    end: date,
    reports: Iterable[ReportRecord],
    *,
    now: Optional[datetime] = None,
    adjusted_dates: Optional[AbstractSet[date]] = None,
    clamp_to_joining: bool = True,
) -> RentRangeResult:
    """Walk [start, end] day by day and classify each driver-day.

    The end is clamped to today (no future days). With clamp_to_joining the start
    moves up to the joining date, otherwise pre-joining days come out as not_joined.
    """

    now = to_local_naive(now or now_local())
    end = min(end, now.date())
    if clamp_to_joining and driver.joining_date and driver.joining_date > start:
        start = driver.joining_date

    by_date = index_reports_by_date(reports, driver_id=driver.driver_id, start=start, end=end)
    adjusted = adjusted_dates or frozenset()

    days: List[DayStatusRecord] = []
    overdue = 0
    rejected = 0
    for day in iter_days(start, end):
        report = by_date.get(day)
        has_adjustment = day in adjusted or bool(report and report.has_adjustment)
        decision = classify_day(day, driver, report, has_adjustment=has_adjustment, now=now)

        days.append(DayStatusRecord(day=day, status=decision.status, note=decision.note, report=report))
        if decision.status == DayStatus.OVERDUE:
            overdue += 1
        elif decision.status == DayStatus.REJECTED:
            rejected += 1

    logger.debug(
        "aggregated driver=%s %s..%s days=%d overdue=%d rejected=%d",
        driver.driver_id, start, end, len(days), overdue, rejected,
    )
    return RentRangeResult(
        driver_id=driver.driver_id,
        start=start,
        end=end,
        shift=driver.shift,
        driver_name=driver.name,
        vehicle_number=driver.vehicle_number,
        days=tuple(days),
        overdue_count=overdue,
        rejected_count=rejected,
    )
