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
    attendance = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    @login_required
    def list_attendance():
        try:
            return jsonify(to_json_list(attendance.list_attendance()))
        except Exception:
            logger.exception("list attendance failed")
            return error_response("Failed to fetch attendance", 500)

    @app.route("/api/attendance/<int:attendance_id>", methods=["GET"], endpoint="get_attendance")
    @login_required
    def get_attendance(attendance_id: int):
        try:
            record = attendance.get_record(attendance_id)
        except Exception:
            logger.exception("get attendance %s failed", attendance_id)
            return error_response("Failed to fetch attendance", 500)
        if not record:
            return error_response("Attendance not found", 404)
        return jsonify(to_json(record))

    @app.route("/api/attendance", methods=["POST"], endpoint="create_attendance")
    @login_required
    def create_attendance():
        try:
            return jsonify(to_json(attendance.record_attendance(request_payload()))), 201
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("create attendance failed")
            return error_response("Failed to create attendance", 500)

    @app.route("/api/attendance/<int:attendance_id>", methods=["PUT"], endpoint="update_attendance")
    @login_required
    def update_attendance(attendance_id: int):
        try:
            return jsonify(to_json(attendance.update_record(attendance_id, request_payload())))
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("update attendance %s failed", attendance_id)
            return error_response("Failed to update attendance", 500)

    @app.route("/api/attendance/<int:attendance_id>", methods=["DELETE"], endpoint="delete_attendance")
    @login_required
    def delete_attendance(attendance_id: int):
        try:
            attendance.delete_record(attendance_id)
            return "", 204
        except Exception:
            logger.exception("delete attendance %s failed", attendance_id)
            return error_response("Failed to delete attendance", 500)
