from __future__ import annotations

from dataclasses import dataclass

from .adjustments.mysql_adjustment_repository import MySQLAdjustmentRepository
from .adjustments.repository import AdjustmentRepository
from .core.constants import DEFAULT_BLOCKING_LOOKBACK_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .drivers.mysql_driver_repository import MySQLDriverRepository
from .drivers.repository import DriverRepository
from .reports.mysql_report_repository import MySQLReportRepository
from .reports.repository import ReportRepository
from .rent_status.service import RentStatusService


@dataclass(frozen=True)
class Container:
    drivers_repo: DriverRepository
    reports_repo: ReportRepository
    adjustments_repo: AdjustmentRepository

    rent_status_service: RentStatusService


def build_container(*, db_config: dict, lookback_days: int = DEFAULT_BLOCKING_LOOKBACK_DAYS) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    drivers_repo = MySQLDriverRepository(conn)
    reports_repo = MySQLReportRepository(conn)
    adjustments_repo = MySQLAdjustmentRepository(conn)

    rent_status_service = RentStatusService(
        drivers_repo,
        reports_repo,
        adjustments_repo,
        lookback_days=lookback_days,
    )

    return Container(
        drivers_repo=drivers_repo,
        reports_repo=reports_repo,
        adjustments_repo=adjustments_repo,
        rent_status_service=rent_status_service,
    )
