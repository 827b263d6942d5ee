from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import ReportRecord, report_from_row
from .repository import ReportRepository

_COLUMNS = """
    report_id, driver_id, rent_date, status, remarks,
    rent_paid_amount, submitted_at, created_at
"""


class MySQLReportRepository(ReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_driver(self, driver_id: str, *, start: date, end: date) -> Sequence[ReportRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM fleet_reports
                WHERE driver_id=%s AND rent_date BETWEEN %s AND %s
                ORDER BY rent_date ASC, submitted_at ASC
                """,
                (driver_id, start, end),
            )
            return self._map(fetchall(cur))

    def list_for_range(self, *, start: date, end: date) -> Sequence[ReportRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM fleet_reports
                WHERE rent_date BETWEEN %s AND %s
                ORDER BY driver_id ASC, rent_date ASC, submitted_at ASC
                """,
                (start, end),
            )
            return self._map(fetchall(cur))

    @staticmethod
    def _map(rows) -> list[ReportRecord]:
        out: list[ReportRecord] = []
        for r in rows:
            rec = report_from_row(r)
            if rec is not None:
                out.append(rec)
        return out
