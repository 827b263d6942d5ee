from __future__ import annotations

import csv
import io
import logging
from datetime import date, timedelta

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..common.datetime_utils import now_local
from ..common.validators import require_date, require_range
from ..core.constants import DEFAULT_CALENDAR_DAYS
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from .deadline import deadline_label, shift_deadline
from .display import shift_badge_class, status_display

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _error(message: str, code: int):
        return jsonify({"success": False, "message": message}), code

    def _range_from_args() -> tuple[date, date]:
        today = now_local().date()
        end = require_date(request.args.get("end"), "end") if request.args.get("end") else today
        if request.args.get("start"):
            start = require_date(request.args.get("start"), "start")
        else:
            start = end - timedelta(days=DEFAULT_CALENDAR_DAYS - 1)
        require_range(start, end)
        return start, end

    def _result_json(result) -> dict:
        return {
            "driver_id": result.driver_id,
            "driver_name": result.driver_name,
            "vehicle_number": result.vehicle_number,
            "shift": result.shift.value,
            "shift_badge": shift_badge_class(result.shift),
            "start": result.start.strftime("%Y-%m-%d"),
            "end": result.end.strftime("%Y-%m-%d"),
            "days": [{**d.to_dict(), **status_display(d.status)} for d in result.days],
            "overdue_count": result.overdue_count,
            "rejected_count": result.rejected_count,
        }

    @app.errorhandler(ValidationError)
    def _on_validation_error(e: ValidationError):
        return _error(str(e), 400)

    @app.errorhandler(NotFoundError)
    def _on_not_found(e: NotFoundError):
        return _error(str(e), 404)

    @app.route("/api/drivers/<driver_id>/rent-calendar", methods=["GET"], endpoint="driver_rent_calendar")
    def driver_rent_calendar(driver_id: str):
        start, end = _range_from_args()
        result = container.rent_status_service.driver_calendar(driver_id, start=start, end=end)
        return jsonify({"success": True, **_result_json(result)})

    @app.route("/api/drivers/<driver_id>/rent-status", methods=["GET"], endpoint="driver_rent_status")
    def driver_rent_status(driver_id: str):
        day_s = request.args.get("date")
        day = require_date(day_s, "date") if day_s else now_local().date()

        decision = container.rent_status_service.day_status(driver_id, day)
        driver = container.drivers_repo.get_by_id(driver_id)
        shift = driver.shift if driver else None
        deadline = shift_deadline(day, shift)
        return jsonify(
            {
                "success": True,
                "driver_id": driver_id,
                "date": day.strftime("%Y-%m-%d"),
                "status": decision.status.value,
                "note": decision.note or "",
                "deadline": deadline.strftime("%Y-%m-%dT%H:%M:%S") if deadline else None,
                "deadline_label": deadline_label(shift),
                **status_display(decision.status),
            }
        )

    @app.route("/api/drivers/<driver_id>/blocking-issues", methods=["GET"], endpoint="driver_blocking_issues")
    def driver_blocking_issues(driver_id: str):
        issues = container.rent_status_service.blocking_issues(driver_id)
        return jsonify({"success": True, "driver_id": driver_id, **issues.to_dict()})

    @app.route("/api/rent-calendar", methods=["GET"], endpoint="fleet_rent_calendar")
    def fleet_rent_calendar():
        start, end = _range_from_args()
        online_only = request.args.get("all") not in {"1", "true", "yes"}
        results = container.rent_status_service.fleet_calendar(start=start, end=end, online_only=online_only)
        return jsonify(
            {
                "success": True,
                "start": start.strftime("%Y-%m-%d"),
                "end": end.strftime("%Y-%m-%d"),
                "drivers": [_result_json(r) for r in results],
            }
        )

    @app.route("/api/rent-calendar.csv", methods=["GET"], endpoint="fleet_rent_calendar_csv")
    def fleet_rent_calendar_csv():
        start, end = _range_from_args()
        results = container.rent_status_service.fleet_calendar(start=start, end=end)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=["driver_id", "driver_name", "vehicle_number", "date", "status", "note"])
        writer.writeheader()
        for r in results:
            for d in r.days:
                writer.writerow(
                    {
                        "driver_id": r.driver_id,
                        "driver_name": r.driver_name,
                        "vehicle_number": r.vehicle_number,
                        "date": d.day.strftime("%Y-%m-%d"),
                        "status": d.status.value,
                        "note": d.note or "",
                    }
                )

        filename = f"rent_calendar_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/rent-calendar/stats", methods=["GET"], endpoint="fleet_rent_stats")
    def fleet_rent_stats():
        stats = container.rent_status_service.today_stats()
        return jsonify({"success": True, **stats.to_dict()})

    @app.errorhandler(Exception)
    def _on_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("unhandled error on %s", request.path)
        return _error("Internal server error", 500)
