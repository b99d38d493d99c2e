from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..core.exceptions import EmployeeNotFoundError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="api_employee_details")
    def api_employee_details(employee_id: str):
        try:
            employee = container.salary_service.get_employee(employee_id)
        except EmployeeNotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404

        return jsonify({
            "success": True,
            "employee": dict(employee.details()),
        }), 200
