from __future__ import annotations

from functools import wraps

from flask import jsonify, session


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"message": "Unauthorized"}), 401
        return view(*args, **kwargs)

    return wrapper
