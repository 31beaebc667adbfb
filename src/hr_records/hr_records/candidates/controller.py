from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.auth import login_required
from ..common.http import error_response, request_payload, uploaded_file
from ..common.serialization import to_json, to_json_list
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    candidates = container.candidate_service

    @app.route("/api/candidates", methods=["GET"], endpoint="list_candidates")
    @login_required
    def list_candidates():
        try:
            return jsonify(to_json_list(candidates.list_candidates()))
        except Exception:
            logger.exception("list candidates failed")
            return error_response("Failed to fetch candidates", 500)

    @app.route("/api/candidates/<int:candidate_id>", methods=["GET"], endpoint="get_candidate")
    @login_required
    def get_candidate(candidate_id: int):
        try:
            candidate = candidates.get_candidate(candidate_id)
        except Exception:
            logger.exception("get candidate %s failed", candidate_id)
            return error_response("Failed to fetch candidate", 500)
        if not candidate:
            return error_response("Candidate not found", 404)
        return jsonify(to_json(candidate))

    @app.route("/api/candidates", methods=["POST"], endpoint="create_candidate")
    @login_required
    def create_candidate():
        try:
            resume = uploaded_file("resume")
            candidate = candidates.create_candidate(request_payload(), resume=resume)
            return jsonify(to_json(candidate)), 201
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("create candidate failed")
            return error_response("Failed to create candidate", 500)

    @app.route("/api/candidates/<int:candidate_id>", methods=["PUT"], endpoint="update_candidate")
    @login_required
    def update_candidate(candidate_id: int):
        try:
            resume = uploaded_file("resume")
            candidate = candidates.update_candidate(candidate_id, request_payload(), resume=resume)
            return jsonify(to_json(candidate))
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("update candidate %s failed", candidate_id)
            return error_response("Failed to update candidate", 500)

    @app.route("/api/candidates/<int:candidate_id>", methods=["DELETE"], endpoint="delete_candidate")
    @login_required
    def delete_candidate(candidate_id: int):
        try:
            candidates.delete_candidate(candidate_id)
            return "", 204
        except Exception:
            logger.exception("delete candidate %s failed", candidate_id)
            return error_response("Failed to delete candidate", 500)

    @app.route("/api/candidates/<int:candidate_id>/promote", methods=["POST"], endpoint="promote_candidate")
    @login_required
    def promote_candidate(candidate_id: int):
        try:
            employee = container.employee_service.promote_candidate(candidate_id, request_payload())
            return jsonify(to_json(employee)), 201
        except NotFoundError:
            return error_response("Candidate not found", 404)
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("promote candidate %s failed", candidate_id)
            return error_response("Failed to promote candidate", 500)
