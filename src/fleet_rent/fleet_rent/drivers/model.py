from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_date
from ..core.enums import Shift


@dataclass(frozen=True)
class DriverLifecycle:
    """Domain entity: the window during which a driver owes rent reports.

    Note: read-only for the status engine; only admin online/offline toggles mutate
    the underlying driver row.
    """

    driver_id: str
    shift: Shift = Shift.NONE
    joining_date: Optional[date] = None
    is_online: bool = True
    offline_from_date: Optional[date] = None
    online_from_date: Optional[date] = None
    name: str = ""
    vehicle_number: str = ""

    def has_joined_by(self, day: date) -> bool:
        return self.joining_date is None or day >= self.joining_date

    def in_offline_window(self, day: date) -> bool:
        if self.offline_from_date is None or day < self.offline_from_date:
            return False
        return self.online_from_date is None or day < self.online_from_date


def driver_from_row(row: Mapping[str, Any]) -> DriverLifecycle:
    """Map a raw `drivers` row (DB or JSON) into a DriverLifecycle."""

    online = row.get("online")
    return DriverLifecycle(
        driver_id=str(row.get("driver_id") or row.get("id") or ""),
        shift=Shift.parse(row.get("shift")),
        joining_date=coerce_date(row.get("joining_date")),
        is_online=True if online is None else bool(online),
        offline_from_date=coerce_date(row.get("offline_from_date")),
        online_from_date=coerce_date(row.get("online_from_date")),
        name=str(row.get("name") or ""),
        vehicle_number=str(row.get("vehicle_number") or ""),
    )
