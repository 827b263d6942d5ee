from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import ReportRecord


class ReportRepository(Protocol):
    def list_for_driver(self, driver_id: str, *, start: date, end: date) -> Sequence[ReportRecord]:
        """Reports with start <= rent_date <= end, ordered by rent_date ascending."""
        raise NotImplementedError

    def list_for_range(self, *, start: date, end: date) -> Sequence[ReportRecord]:
        raise NotImplementedError
