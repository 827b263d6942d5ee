from __future__ import annotations

from datetime import date
from typing import Protocol, Set


class AdjustmentRepository(Protocol):
    def approved_dates_for_driver(self, driver_id: str, *, start: date, end: date) -> Set[date]:
        """Dates in [start, end] that carry at least one approved adjustment."""
        raise NotImplementedError
