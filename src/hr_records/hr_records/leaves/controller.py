from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.auth import login_required
from ..common.http import error_response, request_payload, uploaded_file
from ..common.serialization import to_json, to_json_list
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    leaves = container.leave_service

    @app.route("/api/leaves", methods=["GET"], endpoint="list_leaves")
    @login_required
    def list_leaves():
        try:
            return jsonify(to_json_list(leaves.list_leaves()))
        except Exception:
            logger.exception("list leaves failed")
            return error_response("Failed to fetch leaves", 500)

    @app.route("/api/leaves/approved", methods=["GET"], endpoint="list_approved_leaves")
    @login_required
    def list_approved_leaves():
        try:
            return jsonify(to_json_list(leaves.list_approved()))
        except Exception:
            logger.exception("list approved leaves failed")
            return error_response("Failed to fetch approved leaves", 500)

    @app.route("/api/leaves/<int:leave_id>", methods=["GET"], endpoint="get_leave")
    @login_required
    def get_leave(leave_id: int):
        try:
            leave = leaves.get_leave(leave_id)
        except Exception:
            logger.exception("get leave %s failed", leave_id)
            return error_response("Failed to fetch leave", 500)
        if not leave:
            return error_response("Leave not found", 404)
        return jsonify(to_json(leave))

    @app.route("/api/leaves", methods=["POST"], endpoint="create_leave")
    @login_required
    def create_leave():
        try:
            documents = uploaded_file("documents")
            leave = leaves.request_leave(request_payload(), documents=documents)
            return jsonify(to_json(leave)), 201
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("create leave failed")
            return error_response("Failed to create leave", 500)

    @app.route("/api/leaves/<int:leave_id>", methods=["PUT"], endpoint="update_leave")
    @login_required
    def update_leave(leave_id: int):
        try:
            return jsonify(to_json(leaves.update_leave(leave_id, request_payload())))
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("update leave %s failed", leave_id)
            return error_response("Failed to update leave", 500)

    @app.route("/api/leaves/<int:leave_id>", methods=["DELETE"], endpoint="delete_leave")
    @login_required
    def delete_leave(leave_id: int):
        try:
            leaves.delete_leave(leave_id)
            return "", 204
        except Exception:
            logger.exception("delete leave %s failed", leave_id)
            return error_response("Failed to delete leave", 500)
