from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import DriverLifecycle, driver_from_row
from .repository import DriverRepository

_COLUMNS = """
    driver_id, name, vehicle_number, shift, joining_date,
    online, offline_from_date, online_from_date
"""


class MySQLDriverRepository(DriverRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, driver_id: str) -> Optional[DriverLifecycle]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM drivers WHERE driver_id=%s", (driver_id,))
            row = fetchone(cur)
            if not row:
                return None
            return driver_from_row(row)

    def list_all(self, *, online_only: bool = False) -> Sequence[DriverLifecycle]:
        sql = f"SELECT {_COLUMNS} FROM drivers"
        if online_only:
            sql += " WHERE online=1"
        sql += " ORDER BY name ASC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql)
            return [driver_from_row(r) for r in fetchall(cur)]
