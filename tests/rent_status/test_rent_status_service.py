from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

import pytest

from src.fleet_rent.fleet_rent.core.enums import DayStatus, ReportStatus, Shift
from src.fleet_rent.fleet_rent.core.exceptions import NotFoundError
from src.fleet_rent.fleet_rent.drivers.model import DriverLifecycle
from src.fleet_rent.fleet_rent.rent_status.service import RentStatusService
from src.fleet_rent.fleet_rent.reports.model import ReportRecord

NOW = datetime(2024, 6, 10, 18, 0)


@dataclass
class InMemoryDrivers:
    drivers: dict[str, DriverLifecycle]

    def get_by_id(self, driver_id: str) -> Optional[DriverLifecycle]:
        return self.drivers.get(driver_id)

    def list_all(self, *, online_only: bool = False):
        items = list(self.drivers.values())
        if online_only:
            items = [d for d in items if d.is_online]
        return items


@dataclass
class InMemoryReports:
    reports: list[ReportRecord] = field(default_factory=list)

    def list_for_driver(self, driver_id: str, *, start: date, end: date):
        return [r for r in self.reports if r.driver_id == driver_id and start <= r.rent_date <= end]

    def list_for_range(self, *, start: date, end: date):
        return [r for r in self.reports if start <= r.rent_date <= end]


@dataclass
class InMemoryAdjustments:
    approved: set[tuple[str, date]] = field(default_factory=set)

    def approved_dates_for_driver(self, driver_id: str, *, start: date, end: date):
        return {d for (drv, d) in self.approved if drv == driver_id and start <= d <= end}


def _service(drivers, reports=(), approved=(), **kwargs) -> RentStatusService:
    return RentStatusService(
        InMemoryDrivers({d.driver_id: d for d in drivers}),
        InMemoryReports(list(reports)),
        InMemoryAdjustments(set(approved)),
        **kwargs,
    )


def test_blocking_issues_counts_overdue_and_rejected_since_joining():
    driver = DriverLifecycle(driver_id="d1", shift=Shift.MORNING, joining_date=date(2024, 6, 8))
    reports = [ReportRecord(driver_id="d1", rent_date=date(2024, 6, 8), status=ReportStatus.REJECTED)]

    issues = _service([driver], reports).blocking_issues("d1", now=NOW)

    assert issues.overdue_count == 2
    assert issues.rejected_count == 1
    assert issues.is_blocked


def test_blocking_issues_respects_lookback_window():
    driver = DriverLifecycle(driver_id="d1", shift=Shift.MORNING, joining_date=None)

    issues = _service([driver], lookback_days=5).blocking_issues("d1", now=NOW)

    # 2024-06-05 .. 2024-06-10 inclusive, all past their 17:00 deadline.
    assert issues.overdue_count == 6
    assert issues.rejected_count == 0


def test_offline_driver_is_not_blocked():
    driver = DriverLifecycle(
        driver_id="d1",
        shift=Shift.NIGHT,
        joining_date=date(2024, 6, 1),
        is_online=False,
        offline_from_date=date(2024, 6, 1),
    )

    issues = _service([driver]).blocking_issues("d1", now=NOW)

    assert not issues.is_blocked


def test_unknown_driver_raises_not_found():
    with pytest.raises(NotFoundError):
        _service([]).blocking_issues("missing", now=NOW)
    with pytest.raises(NotFoundError):
        _service([]).day_status("missing", date(2024, 6, 10), now=NOW)


def test_day_status_uses_adjustment_linkage():
    driver = DriverLifecycle(driver_id="d1", shift=Shift.NIGHT, joining_date=date(2024, 1, 1))
    reports = [ReportRecord(driver_id="d1", rent_date=date(2024, 6, 10), status=ReportStatus.PAID)]

    plain = _service([driver], reports).day_status("d1", date(2024, 6, 10), now=NOW)
    adjusted = _service([driver], reports, approved={("d1", date(2024, 6, 10))}).day_status(
        "d1", date(2024, 6, 10), now=NOW
    )

    assert plain.status == DayStatus.PAID
    assert adjusted.status == DayStatus.PAID_WITH_ADJUSTMENT


def test_driver_calendar_shows_pre_joining_days():
    driver = DriverLifecycle(driver_id="d1", shift=Shift.MORNING, joining_date=date(2024, 6, 9))

    result = _service([driver]).driver_calendar("d1", start=date(2024, 6, 7), end=date(2024, 6, 10), now=NOW)

    assert [d.status for d in result.days] == [
        DayStatus.NOT_JOINED,
        DayStatus.NOT_JOINED,
        DayStatus.OVERDUE,
        DayStatus.OVERDUE,
    ]


def test_fleet_calendar_only_online_drivers_by_default():
    online = DriverLifecycle(driver_id="d1", shift=Shift.MORNING)
    offline = DriverLifecycle(driver_id="d2", shift=Shift.MORNING, is_online=False, offline_from_date=date(2024, 6, 1))
    reports = [
        ReportRecord(driver_id="d1", rent_date=date(2024, 6, 10), status=ReportStatus.PAID),
        ReportRecord(driver_id="d2", rent_date=date(2024, 6, 10), status=ReportStatus.PAID),
    ]
    svc = _service([online, offline], reports)

    results = svc.fleet_calendar(start=date(2024, 6, 9), end=date(2024, 6, 10), now=NOW)
    assert [r.driver_id for r in results] == ["d1"]
    assert [d.status for d in results[0].days] == [DayStatus.OVERDUE, DayStatus.PAID]

    everyone = svc.fleet_calendar(start=date(2024, 6, 9), end=date(2024, 6, 10), now=NOW, online_only=False)
    assert [r.driver_id for r in everyone] == ["d1", "d2"]
    assert [d.status for d in everyone[1].days] == [DayStatus.OFFLINE, DayStatus.PAID]


def test_today_stats_summarises_online_fleet():
    drivers = [
        DriverLifecycle(driver_id="d1", shift=Shift.MORNING),
        DriverLifecycle(driver_id="d2", shift=Shift.NIGHT),
        DriverLifecycle(driver_id="d3", shift=Shift.FULL_DAY, is_online=False, offline_from_date=date(2024, 6, 1)),
    ]

    stats = _service(drivers).today_stats(now=NOW)

    assert stats.day == date(2024, 6, 10)
    assert stats.online_drivers == 2
    assert stats.shift_distribution == {"morning": 1, "night": 1, "24hr": 0}
    assert stats.status_counts == {"overdue": 1, "pending": 1}
