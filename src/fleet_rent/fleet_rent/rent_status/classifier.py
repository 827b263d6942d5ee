from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import now_local, to_local_naive
from ..drivers.model import DriverLifecycle
from ..reports.model import ReportRecord
from .factory import ClassificationStrategyFactory
from .strategies.base import StatusDecision

_factory = ClassificationStrategyFactory()


def classify_day(
    day: date,
    driver: DriverLifecycle,
    report: Optional[ReportRecord] = None,
    *,
    has_adjustment: Optional[bool] = None,
    now: Optional[datetime] = None,
    factory: Optional[ClassificationStrategyFactory] = None,
) -> StatusDecision:
    """Classify one driver-day into exactly one DayStatus.

    `has_adjustment` is supplied by the adjustments collaborator; when omitted the
    flag carried on the report (if any) is used. Never raises for documented inputs.
    """

    now = to_local_naive(now or now_local())
    if has_adjustment is None:
        has_adjustment = bool(report.has_adjustment) if report else False

    strategy = (factory or _factory).for_day(day=day, driver=driver, report=report)
    return strategy.decide(day=day, driver=driver, report=report, has_adjustment=has_adjustment, now=now)
