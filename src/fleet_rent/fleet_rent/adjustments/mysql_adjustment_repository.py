from __future__ import annotations

from datetime import date
from typing import Set

from ..common.datetime_utils import coerce_date
from ..core.enums import AdjustmentStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .repository import AdjustmentRepository


class MySQLAdjustmentRepository(AdjustmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def approved_dates_for_driver(self, driver_id: str, *, start: date, end: date) -> Set[date]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT DISTINCT adjustment_date
                FROM common_adjustments
                WHERE driver_id=%s AND status=%s AND adjustment_date BETWEEN %s AND %s
                """,
                (driver_id, AdjustmentStatus.APPROVED.value, start, end),
            )
            out: Set[date] = set()
            for r in fetchall(cur):
                d = coerce_date(r.get("adjustment_date"))
                if d is not None:
                    out.add(d)
            return out
