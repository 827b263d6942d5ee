"""Example: use the status engine directly (no Flask, no database).

Controllers are a thin layer; the rules live in rent_status.
"""

from datetime import date, datetime

from src.fleet_rent.fleet_rent.core.enums import ReportStatus, Shift
from src.fleet_rent.fleet_rent.drivers.model import DriverLifecycle
from src.fleet_rent.fleet_rent.rent_status.aggregator import aggregate_range
from src.fleet_rent.fleet_rent.rent_status.display import status_display
from src.fleet_rent.fleet_rent.reports.model import ReportRecord


def main():
    driver = DriverLifecycle(driver_id="drv-001", shift=Shift.MORNING, joining_date=date(2024, 6, 5))
    reports = [
        ReportRecord(driver_id="drv-001", rent_date=date(2024, 6, 6), status=ReportStatus.PAID),
        ReportRecord(driver_id="drv-001", rent_date=date(2024, 6, 8), status=ReportStatus.REJECTED),
    ]
    result = aggregate_range(
        driver,
        date(2024, 6, 1),
        date(2024, 6, 10),
        reports,
        now=datetime(2024, 6, 10, 18, 0),
        clamp_to_joining=False,
    )
    for d in result.days:
        print(d.day, status_display(d.status)["label"], d.note or "")
    print("overdue:", result.overdue_count, "rejected:", result.rejected_count)


if __name__ == "__main__":
    main()
