from __future__ import annotations

import csv
import io
import logging

import pandas as pd
from flask import Flask, Response, jsonify, request, send_file

from ..attendance.parser import read_attendance_rows
from ..common.datetime_utils import format_date, parse_date
from ..common.week_keys import WeekKey
from ..container import Container
from ..core.exceptions import DomainError, NoAttendanceDataError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<employee_id>/hours", methods=["GET"], endpoint="api_employee_hours")
    def api_employee_hours(employee_id: str):
        """Weekly and monthly buckets for the week containing ?date=MM/dd/yyyy."""
        try:
            any_date = parse_date(request.args.get("date", ""))
            weekly = container.salary_service.weekly_hours(employee_id, any_date)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except NoAttendanceDataError as e:
            return jsonify({"success": False, "message": str(e)}), 404

        try:
            monthly = container.salary_service.monthly_hours_for_week(weekly).to_dict()
        except NoAttendanceDataError:
            monthly = None

        return jsonify({"success": True, "weekly": weekly.to_dict(), "monthly": monthly}), 200

    @app.route("/api/hours/weeks/<path:key>", methods=["GET"], endpoint="api_week_by_key")
    def api_week_by_key(key: str):
        """Look up a week by its text key, e.g. 10001_12/25/2023."""
        try:
            week = WeekKey.parse(key)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        summary = container.aggregator.weekly_hours(week)
        if summary is None:
            return jsonify({"success": False, "message": f"No attendance data for {week}"}), 404
        return jsonify({"success": True, "weekly": summary.to_dict()}), 200

    @app.route("/api/reports/weekly.csv", methods=["GET"], endpoint="weekly_report_csv")
    def weekly_report_csv():
        out = io.StringIO()
        writer = csv.writer(out)
        writer.writerow(["employee_id", "week_start", "regular", "overtime", "undertime", "late"])
        for s in container.aggregator.iter_weekly():
            writer.writerow([
                s.key.employee_id,
                format_date(s.key.anchor),
                f"{s.regular:.2f}",
                f"{s.overtime:.2f}",
                f"{s.undertime:.2f}",
                f"{s.late:.2f}",
            ])

        return Response(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=weekly_hours.csv"},
        )

    @app.route("/api/reports/weekly.xlsx", methods=["GET"], endpoint="weekly_report_xlsx")
    def weekly_report_xlsx():
        df = pd.DataFrame(
            [
                [s.key.employee_id, format_date(s.key.anchor), s.regular, s.overtime, s.undertime, s.late]
                for s in container.aggregator.iter_weekly()
            ],
            columns=["Employee #", "Week Of", "Regular", "Overtime", "Under Time", "Late"],
        ).round(2)

        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name="Weekly Hours")
        out.seek(0)
        return send_file(
            out,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            as_attachment=True,
            download_name="weekly_hours.xlsx",
        )

    @app.route("/api/attendance/reload", methods=["POST"], endpoint="api_attendance_reload")
    def api_attendance_reload():
        try:
            report = container.reload_attendance()
        except OSError as e:
            logger.error("Cannot read attendance export: %s", e)
            return jsonify({"success": False, "message": "Attendance export is not readable"}), 500
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "report": report.to_dict()}), 200

    @app.route("/api/attendance/upload", methods=["POST"], endpoint="api_attendance_upload")
    def api_attendance_upload():
        """Add rows from an uploaded attendance CSV (multipart field `file`, or the raw body)."""
        upload = request.files.get("file")
        payload = upload.read() if upload else request.get_data()
        if not payload:
            return jsonify({"success": False, "message": "Attendance file is empty"}), 400

        rows = read_attendance_rows(payload.decode("utf-8-sig", errors="replace").splitlines())
        report = container.processing_service.ingest(rows)
        return jsonify({"success": True, "report": report.to_dict()}), 200
