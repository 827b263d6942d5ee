from __future__ import annotations

import logging
from collections import Counter
from datetime import date, datetime, timedelta
from typing import List, Optional

from ..adjustments.repository import AdjustmentRepository
from ..common.datetime_utils import now_local, to_local_naive
from ..core.constants import DEFAULT_BLOCKING_LOOKBACK_DAYS
from ..core.enums import Shift
from ..core.exceptions import NotFoundError
from ..drivers.model import DriverLifecycle
from ..drivers.repository import DriverRepository
from ..reports.repository import ReportRepository
from .aggregator import aggregate_range, index_reports_by_date
from .classifier import classify_day
from .model import BlockingIssues, FleetDayStats, RentRangeResult
from .strategies.base import StatusDecision

logger = logging.getLogger(__name__)


class RentStatusService:
    """Fetches driver/report rows and routes them through the status engine.

    The engine itself is pure; this service owns the I/O and lets repository
    errors propagate to the caller.
    """

    def __init__(
        self,
        drivers: DriverRepository,
        reports: ReportRepository,
        adjustments: Optional[AdjustmentRepository] = None,
        *,
        lookback_days: int = DEFAULT_BLOCKING_LOOKBACK_DAYS,
    ):
        self._drivers = drivers
        self._reports = reports
        self._adjustments = adjustments
        self._lookback_days = int(lookback_days)

    def _get_driver(self, driver_id: str) -> DriverLifecycle:
        driver = self._drivers.get_by_id(driver_id)
        if not driver:
            raise NotFoundError(f"Driver {driver_id} not found")
        return driver

    def _adjusted_dates(self, driver_id: str, start: date, end: date) -> set[date]:
        if not self._adjustments or start > end:
            return set()
        return set(self._adjustments.approved_dates_for_driver(driver_id, start=start, end=end))

    def _range_for(
        self,
        driver: DriverLifecycle,
        *,
        start: date,
        end: date,
        now: datetime,
        reports=None,
        clamp_to_joining: bool,
    ) -> RentRangeResult:
        if reports is None:
            reports = self._reports.list_for_driver(driver.driver_id, start=start, end=end)
        return aggregate_range(
            driver,
            start,
            end,
            reports,
            now=now,
            adjusted_dates=self._adjusted_dates(driver.driver_id, start, end),
            clamp_to_joining=clamp_to_joining,
        )

    def driver_calendar(self, driver_id: str, *, start: date, end: date, now: Optional[datetime] = None) -> RentRangeResult:
        now = to_local_naive(now or now_local())
        driver = self._get_driver(driver_id)
        return self._range_for(driver, start=start, end=end, now=now, clamp_to_joining=False)

    def fleet_calendar(
        self,
        *,
        start: date,
        end: date,
        now: Optional[datetime] = None,
        online_only: bool = True,
    ) -> List[RentRangeResult]:
        now = to_local_naive(now or now_local())
        drivers = self._drivers.list_all(online_only=online_only)
        reports = self._reports.list_for_range(start=start, end=end)

        out: List[RentRangeResult] = []
        for driver in drivers:
            out.append(
                self._range_for(driver, start=start, end=end, now=now, reports=reports, clamp_to_joining=False)
            )
        logger.debug("fleet calendar %s..%s drivers=%d reports=%d", start, end, len(out), len(reports))
        return out

    def day_status(self, driver_id: str, day: date, *, now: Optional[datetime] = None) -> StatusDecision:
        now = to_local_naive(now or now_local())
        driver = self._get_driver(driver_id)
        reports = self._reports.list_for_driver(driver_id, start=day, end=day)
        report = index_reports_by_date(reports, driver_id=driver.driver_id, start=day, end=day).get(day)
        has_adjustment = day in self._adjusted_dates(driver_id, day, day) or bool(report and report.has_adjustment)
        return classify_day(day, driver, report, has_adjustment=has_adjustment, now=now)

    def blocking_issues(self, driver_id: str, *, now: Optional[datetime] = None) -> BlockingIssues:
        """Overdue/rejected totals over the lookback window (clamped to joining date)."""

        now = to_local_naive(now or now_local())
        driver = self._get_driver(driver_id)
        today = now.date()
        start = today - timedelta(days=self._lookback_days)

        result = self._range_for(driver, start=start, end=today, now=now, clamp_to_joining=True)
        issues = BlockingIssues(overdue_count=result.overdue_count, rejected_count=result.rejected_count)
        if issues.is_blocked:
            logger.info(
                "driver %s blocked: overdue=%d rejected=%d",
                driver_id, issues.overdue_count, issues.rejected_count,
            )
        return issues

    def today_stats(self, *, now: Optional[datetime] = None) -> FleetDayStats:
        now = to_local_naive(now or now_local())
        today = now.date()
        drivers = self._drivers.list_all(online_only=True)
        reports = self._reports.list_for_range(start=today, end=today)

        shifts = Counter(d.shift.value for d in drivers if d.shift != Shift.NONE)
        statuses: Counter = Counter()
        for driver in drivers:
            result = self._range_for(driver, start=today, end=today, now=now, reports=reports, clamp_to_joining=False)
            for day in result.days:
                statuses[day.status.value] += 1

        return FleetDayStats(
            day=today,
            online_drivers=len(drivers),
            shift_distribution={s.value: shifts.get(s.value, 0) for s in (Shift.MORNING, Shift.NIGHT, Shift.FULL_DAY)},
            status_counts=dict(statuses),
        )
