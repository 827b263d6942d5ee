from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

import pytest

from src.fleet_rent.fleet_rent.container import Container
from src.fleet_rent.fleet_rent.core.enums import ReportStatus, Shift
from src.fleet_rent.fleet_rent.drivers.model import DriverLifecycle
from src.fleet_rent.fleet_rent.main import create_app
from src.fleet_rent.fleet_rent.rent_status import controller as controller_module
from src.fleet_rent.fleet_rent.rent_status import service as service_module
from src.fleet_rent.fleet_rent.rent_status.service import RentStatusService
from src.fleet_rent.fleet_rent.reports.model import ReportRecord


@dataclass
class InMemoryDrivers:
    drivers: dict[str, DriverLifecycle]

    def get_by_id(self, driver_id: str) -> Optional[DriverLifecycle]:
        return self.drivers.get(driver_id)

    def list_all(self, *, online_only: bool = False):
        return [d for d in self.drivers.values() if d.is_online or not online_only]


@dataclass
class InMemoryReports:
    reports: list[ReportRecord] = field(default_factory=list)

    def list_for_driver(self, driver_id: str, *, start: date, end: date):
        return [r for r in self.reports if r.driver_id == driver_id and start <= r.rent_date <= end]

    def list_for_range(self, *, start: date, end: date):
        return [r for r in self.reports if start <= r.rent_date <= end]


class NoAdjustments:
    def approved_dates_for_driver(self, driver_id: str, *, start: date, end: date):
        return set()


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    drivers = InMemoryDrivers(
        {
            "drv-1": DriverLifecycle(
                driver_id="drv-1",
                shift=Shift.MORNING,
                joining_date=date(2024, 1, 1),
                name="Ravi Kumar",
                vehicle_number="KA01AB1234",
            ),
            "drv-2": DriverLifecycle(driver_id="drv-2", shift=Shift.NONE, joining_date=date.today()),
        }
    )
    reports = InMemoryReports(
        [
            ReportRecord(
                driver_id="drv-1", rent_date=date(2024, 6, 10), status=ReportStatus.PAID, rent_paid_amount=750.0
            )
        ]
    )
    adjustments = NoAdjustments()
    container = Container(
        drivers_repo=drivers,
        reports_repo=reports,
        adjustments_repo=adjustments,
        rent_status_service=RentStatusService(drivers, reports, adjustments),
    )

    app = create_app(container=container)
    return app.test_client()


def test_driver_calendar_json(client):
    resp = client.get("/api/drivers/drv-1/rent-calendar?start=2024-06-08&end=2024-06-10")
    assert resp.status_code == 200

    body = resp.get_json()
    assert body["success"] is True
    assert [d["date"] for d in body["days"]] == ["2024-06-08", "2024-06-09", "2024-06-10"]
    assert [d["status"] for d in body["days"]] == ["overdue", "overdue", "paid"]
    assert body["days"][2]["label"] == "Paid"
    assert body["overdue_count"] == 2
    assert body["rejected_count"] == 0
    assert body["driver_name"] == "Ravi Kumar"
    assert body["vehicle_number"] == "KA01AB1234"
    assert body["days"][2]["amount"] == 750.0


def test_single_day_status_includes_deadline(client):
    resp = client.get("/api/drivers/drv-1/rent-status?date=2024-06-10")
    assert resp.status_code == 200

    body = resp.get_json()
    assert body["status"] == "paid"
    assert body["deadline"] == "2024-06-10T17:00:00"
    assert body["deadline_label"] == "5:00 PM same day"


def test_blocking_issues_for_driver_without_shift(client):
    resp = client.get("/api/drivers/drv-2/blocking-issues")
    assert resp.status_code == 200
    assert resp.get_json() == {
        "success": True,
        "driver_id": "drv-2",
        "overdue_count": 0,
        "rejected_count": 0,
        "is_blocked": False,
    }


def test_unknown_driver_is_404(client):
    resp = client.get("/api/drivers/nope/blocking-issues")
    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


@pytest.mark.parametrize(
    "query",
    [
        "start=2024-13-01&end=2024-06-10",
        "start=2024-06-10&end=2024-06-01",
        "start=2024-01-01&end=2024-06-10",
    ],
)
def test_bad_ranges_are_400(client, query):
    resp = client.get(f"/api/drivers/drv-1/rent-calendar?{query}")
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_fleet_calendar_csv_export(client):
    resp = client.get("/api/rent-calendar.csv?start=2024-06-09&end=2024-06-10")
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"

    lines = resp.data.decode("utf-8-sig").splitlines()
    assert lines[0] == "driver_id,driver_name,vehicle_number,date,status,note"
    assert any(line.startswith("drv-1,Ravi Kumar,KA01AB1234,2024-06-10,paid") for line in lines[1:])


def test_fleet_stats(client):
    resp = client.get("/api/rent-calendar/stats")
    assert resp.status_code == 200

    body = resp.get_json()
    assert body["online_drivers"] == 2
    assert body["shift_distribution"]["morning"] == 1


def test_unknown_route_stays_404(client):
    assert client.get("/api/nowhere").status_code == 404


def test_default_range_follows_local_clock(client, monkeypatch):
    def fixed():
        return datetime(2024, 6, 10, 18, 0)

    monkeypatch.setattr(controller_module, "now_local", fixed)
    monkeypatch.setattr(service_module, "now_local", fixed)

    body = client.get("/api/drivers/drv-1/rent-calendar").get_json()
    assert body["start"] == "2024-06-04"
    assert body["end"] == "2024-06-10"
    assert body["days"][-1]["status"] == "paid"

    status = client.get("/api/drivers/drv-1/rent-status").get_json()
    assert status["date"] == "2024-06-10"
    assert status["status"] == "paid"
