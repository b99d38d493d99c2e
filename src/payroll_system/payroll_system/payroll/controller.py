from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_date
from ..container import Container
from ..core.exceptions import EmployeeNotFoundError, NoAttendanceDataError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<employee_id>/salary", methods=["GET"], endpoint="api_employee_salary")
    def api_employee_salary(employee_id: str):
        """Weekly salary for the week containing ?date=MM/dd/yyyy."""
        try:
            any_date = parse_date(request.args.get("date", ""))
            breakdown = container.salary_service.weekly_salary(employee_id, any_date)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except (EmployeeNotFoundError, NoAttendanceDataError) as e:
            return jsonify({"success": False, "message": str(e)}), 404

        return jsonify({"success": True, "salary": breakdown.to_dict()}), 200
