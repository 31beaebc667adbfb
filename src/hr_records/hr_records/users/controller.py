from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.auth import login_required
from ..common.http import error_response, request_payload
from ..common.serialization import to_json
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container
from .model import User

logger = logging.getLogger(__name__)


def _start_session(user: User) -> None:
    session.regenerate()
    session.clear()
    session.permanent = True
    session["user_id"] = user.id
    session["username"] = user.username
    session["role"] = user.role


def register(app: Flask, container: Container) -> None:
    auth = container.auth_service

    @app.route("/api/register", methods=["POST"], endpoint="register")
    def register_user():
        try:
            user = auth.register(request_payload())
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("register failed")
            return error_response("Failed to register", 500)

        _start_session(user)
        return jsonify(to_json(user)), 201

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        payload = request_payload()
        try:
            user = auth.authenticate(str(payload.get("username") or ""), str(payload.get("password") or ""))
        except AuthenticationError as e:
            return error_response(str(e), 401)
        except Exception:
            logger.exception("login failed")
            return error_response("Failed to log in", 500)

        _start_session(user)
        return jsonify(to_json(user))

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"message": "Logged out"})

    @app.route("/api/user", methods=["GET"], endpoint="current_user")
    @login_required
    def current_user():
        try:
            user = auth.get_user(int(session["user_id"]))
        except Exception:
            logger.exception("load current user failed")
            return error_response("Failed to fetch user", 500)
        if not user:
            session.clear()
            return error_response("Unauthorized", 401)
        return jsonify(to_json(user))
