from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.auth import login_required
from ..common.http import error_response, request_payload
from ..common.serialization import to_json, to_json_list
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    employees = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @login_required
    def list_employees():
        try:
            return jsonify(to_json_list(employees.list_employees()))
        except Exception:
            logger.exception("list employees failed")
            return error_response("Failed to fetch employees", 500)

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    @login_required
    def get_employee(employee_id: int):
        try:
            employee = employees.get_employee(employee_id)
        except Exception:
            logger.exception("get employee %s failed", employee_id)
            return error_response("Failed to fetch employee", 500)
        if not employee:
            return error_response("Employee not found", 404)
        return jsonify(to_json(employee))

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @login_required
    def create_employee():
        try:
            employee = employees.create_employee(request_payload())
            return jsonify(to_json(employee)), 201
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("create employee failed")
            return error_response("Failed to create employee", 500)

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    @login_required
    def update_employee(employee_id: int):
        try:
            return jsonify(to_json(employees.update_employee(employee_id, request_payload())))
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("update employee %s failed", employee_id)
            return error_response("Failed to update employee", 500)

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @login_required
    def delete_employee(employee_id: int):
        try:
            employees.delete_employee(employee_id)
            return "", 204
        except Exception:
            logger.exception("delete employee %s failed", employee_id)
            return error_response("Failed to delete employee", 500)

    @app.route("/api/employees/<int:employee_id>/attendance", methods=["GET"], endpoint="employee_attendance")
    @login_required
    def employee_attendance(employee_id: int):
        try:
            return jsonify(to_json_list(container.attendance_service.list_for_employee(employee_id)))
        except Exception:
            logger.exception("list attendance of employee %s failed", employee_id)
            return error_response("Failed to fetch attendance", 500)

    @app.route("/api/employees/<int:employee_id>/leaves", methods=["GET"], endpoint="employee_leaves")
    @login_required
    def employee_leaves(employee_id: int):
        try:
            return jsonify(to_json_list(container.leave_service.list_for_employee(employee_id)))
        except Exception:
            logger.exception("list leaves of employee %s failed", employee_id)
            return error_response("Failed to fetch leaves", 500)
