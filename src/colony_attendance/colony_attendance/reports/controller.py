from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.exceptions import InvalidRangeError, PeriodNotFoundError, ValidationError
from .exporter import STATUS_LABELS, report_filename
from .model import PeriodReport

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "si", "sí"}
_FALSE_VALUES = {"0", "false", "no"}


def report_to_dict(report: PeriodReport) -> dict:
    period = report.period
    return {
        "period": {
            "group_id": period.group_id,
            "period_number": period.period_number,
            "start_date": period.start_date.isoformat(),
            "end_date": period.end_date.isoformat(),
            "season_label": period.season_label,
        },
        "dates": [d.isoformat() for d in report.date_sequence],
        "students": [
            {
                "student_id": s.student_id,
                "display_name": s.display_name,
                "external_id": s.external_id,
                "statuses": [st.value for st in report.status_map.row(s.student_id)],
                "days_present": report.summaries[s.student_id].days_present,
                "total_days": report.summaries[s.student_id].total_days,
                "percentage": report.summaries[s.student_id].percentage,
                "level": report.summaries[s.student_id].level.value,
            }
            for s in report.roster
        ],
        "labels": {k.value: v for k, v in STATUS_LABELS.items()},
    }


def register(app: Flask, container: Container) -> None:
    def _weekdays_flag():
        value = request.args.get("weekdays")
        if value is None or value == "":
            return None
        flag = value.strip().lower()
        if flag in _TRUE_VALUES:
            return True
        if flag in _FALSE_VALUES:
            return False
        raise ValidationError(f"Valor no válido para weekdays: {value!r}")

    def _csv_response(text: str, filename: str):
        # text already carries the BOM
        return app.response_class(
            text.encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    def _error(exc: Exception):
        logger.info("Report request rejected (%s): %s", type(exc).__name__, exc)
        if isinstance(exc, PeriodNotFoundError):
            return jsonify({"success": False, "message": str(exc)}), 404
        if isinstance(exc, InvalidRangeError):
            return jsonify({"success": False, "message": str(exc)}), 422
        return jsonify({"success": False, "message": str(exc)}), 400

    @app.route("/colonies/<group_id>/periods", methods=["GET"], endpoint="colony_periods")
    def colony_periods(group_id: str):
        try:
            periods = container.period_service.list_periods(group_id)
        except ValidationError as e:
            return _error(e)
        return jsonify(
            {
                "success": True,
                "periods": [
                    {
                        "period_number": p.period_number,
                        "start_date": p.start_date.isoformat(),
                        "end_date": p.end_date.isoformat(),
                        "season_label": p.season_label,
                    }
                    for p in periods
                ],
            }
        )

    @app.route("/colonies/<group_id>/periods/<int:period_number>/report", methods=["GET"], endpoint="period_report")
    def period_report(group_id: str, period_number: int):
        try:
            report = container.report_service.build_report(group_id, period_number, weekdays_only=_weekdays_flag())
        except (ValidationError, PeriodNotFoundError) as e:
            return _error(e)
        return jsonify({"success": True, "report": report_to_dict(report)})

    @app.route("/colonies/<group_id>/periods/<int:period_number>/report.csv", methods=["GET"], endpoint="period_report_csv")
    def period_report_csv(group_id: str, period_number: int):
        try:
            report = container.report_service.build_report(group_id, period_number, weekdays_only=_weekdays_flag())
        except (ValidationError, PeriodNotFoundError) as e:
            return _error(e)

        text = container.report_service.export_report_as_text(report)
        return _csv_response(text, report_filename(f"{group_id}_periodo_{period_number}"))

    @app.route("/colonies/<group_id>/periods/<int:period_number>/week", methods=["GET"], endpoint="period_week")
    def period_week(group_id: str, period_number: int):
        try:
            day = request.args.get("day")
            day = parse_iso_date(day) if day else None
            report = container.report_service.build_week_report(group_id, period_number, day)
        except (ValidationError, PeriodNotFoundError) as e:
            return _error(e)
        return jsonify({"success": True, "report": report_to_dict(report)})

    @app.route(
        "/colonies/<group_id>/periods/<int:period_number>/students/<student_id>/report.csv",
        methods=["GET"],
        endpoint="student_report_csv",
    )
    def student_report_csv(group_id: str, period_number: int, student_id: str):
        try:
            report = container.report_service.build_report(group_id, period_number, weekdays_only=_weekdays_flag())
            text = container.report_service.export_student_report(report, student_id)
            name = report.student(student_id).display_name
        except (ValidationError, PeriodNotFoundError) as e:
            return _error(e)
        return _csv_response(text, report_filename(name))

    @app.route(
        "/colonies/<group_id>/periods/<int:period_number>/attendance/<day>.csv",
        methods=["GET"],
        endpoint="day_sheet_csv",
    )
    def day_sheet_csv(group_id: str, period_number: int, day: str):
        try:
            attendance_date = parse_iso_date(day)
            text = container.report_service.export_day_sheet(group_id, period_number, attendance_date)
        except (ValidationError, PeriodNotFoundError) as e:
            return _error(e)
        return _csv_response(text, f"asistencia_{attendance_date.isoformat()}.csv")
