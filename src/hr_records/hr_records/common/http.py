from __future__ import annotations

from typing import Any, Dict, Optional

from flask import jsonify, request
from werkzeug.datastructures import FileStorage
from werkzeug.exceptions import RequestEntityTooLarge

from ..core.exceptions import UploadError


def request_payload() -> Dict[str, Any]:
    """JSON body, or the form fields of a multipart/urlencoded post."""
    try:
        data = request.get_json(silent=True)
        if isinstance(data, dict):
            return data
        return request.form.to_dict()
    except RequestEntityTooLarge:
        raise UploadError("File too large")


def uploaded_file(field: str) -> Optional[FileStorage]:
    try:
        file = request.files.get(field)
    except RequestEntityTooLarge:
        raise UploadError("File too large")
    if file is None or not file.filename:
        return None
    return file


def error_response(message: str, status: int):
    return jsonify({"message": message}), status
