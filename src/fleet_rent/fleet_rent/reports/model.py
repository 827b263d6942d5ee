from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_date, coerce_datetime
from ..core.enums import ReportStatus

_STATUS_ALIASES = {
    "approved": ReportStatus.PAID,
    "verified": ReportStatus.PAID,
}


@dataclass(frozen=True)
class ReportRecord:
    """Domain entity: a driver's rent report for one calendar day."""

    driver_id: str
    rent_date: date
    status: ReportStatus
    submitted_at: Optional[datetime] = None
    report_id: Optional[str] = None
    has_adjustment: bool = False
    rent_paid_amount: Optional[float] = None
    remarks: Optional[str] = None


def parse_report_status(value: Any, *, remarks: Optional[str] = None) -> ReportStatus:
    """Normalize a stored status string.

    Leave requests were historically recorded as a remark on a plain report, so a
    remark mentioning leave wins over the stored status.
    """

    if remarks and "leave" in remarks.lower():
        return ReportStatus.LEAVE

    text = str(value or "").strip().lower()
    if text in _STATUS_ALIASES:
        return _STATUS_ALIASES[text]
    try:
        return ReportStatus(text)
    except ValueError:
        return ReportStatus.PENDING


def report_from_row(row: Mapping[str, Any]) -> Optional[ReportRecord]:
    """Map a raw `fleet_reports` row. Rows without a usable rent_date are dropped."""

    rent_date = coerce_date(row.get("rent_date"))
    if rent_date is None:
        return None

    remarks = row.get("remarks")
    amount = row.get("rent_paid_amount")
    report_id = row.get("report_id") or row.get("id")
    return ReportRecord(
        driver_id=str(row.get("driver_id") or row.get("user_id") or ""),
        rent_date=rent_date,
        status=parse_report_status(row.get("status"), remarks=remarks),
        submitted_at=coerce_datetime(row.get("submitted_at") or row.get("created_at")),
        report_id=str(report_id) if report_id is not None else None,
        has_adjustment=bool(row.get("has_adjustment") or False),
        rent_paid_amount=float(amount) if amount is not None else None,
        remarks=remarks,
    )
