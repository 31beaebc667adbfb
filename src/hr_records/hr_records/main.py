from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, send_from_directory
from werkzeug.exceptions import RequestEntityTooLarge

from config import get_settings_module

from .attachments.store import AttachmentStore
from .common.auth import login_required
from .common.datetime_utils import now_local
from .common.log import setup_logging
from .core.constants import DEFAULT_DB_POOL_SIZE, DEFAULT_MAX_UPLOAD_MB, DEFAULT_SESSION_DAYS
from .database.bootstrap import apply_schema, ensure_default_user, list_tables
from .sessions.interface import ServerSideSessionInterface

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .candidates.controller import register as register_candidates
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS)))

    max_upload_mb = int(getattr(settings, "MAX_UPLOAD_MB", DEFAULT_MAX_UPLOAD_MB))
    # Slack for the other multipart fields; the per-file limit lives in AttachmentStore.
    app.config["MAX_CONTENT_LENGTH"] = (max_upload_mb + 1) * 1024 * 1024

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        if app.config["DEBUG"]:
            logger.info(
                "settings=%s db=%s@%s:%s/%s",
                settings_module,
                db_config.get("user"),
                db_config.get("host"),
                db_config.get("port", 3306),
                db_config.get("database"),
            )

        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if getattr(settings, "AUTO_SEED_DB", False):
            created = ensure_default_user(
                db_config,
                username=getattr(settings, "DEFAULT_HR_USERNAME"),
                password=getattr(settings, "DEFAULT_HR_PASSWORD"),
                full_name=getattr(settings, "DEFAULT_HR_FULL_NAME"),
            )
            if created:
                logger.info("default HR account created")

        attachments = AttachmentStore(
            getattr(settings, "UPLOAD_DIR"),
            max_bytes=max_upload_mb * 1024 * 1024,
        )
        container = build_container(
            db_config=db_config,
            attachments=attachments,
            pool_size=int(getattr(settings, "DB_POOL_SIZE", DEFAULT_DB_POOL_SIZE)),
        )

        if getattr(settings, "AUTO_INIT_DB", False):
            purged = container.sessions_repo.purge_expired(now_local())
            if purged:
                logger.info("purged %d expired sessions", purged)

    app.session_interface = ServerSideSessionInterface(container.sessions_repo)

    @app.errorhandler(RequestEntityTooLarge)
    def too_large(_e):
        return jsonify({"message": f"File too large (max {max_upload_mb}MB)"}), 400

    register_users(app, container)
    register_candidates(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_leaves(app, container)

    upload_dir = str(container.attachments.upload_dir.resolve())
    assets_dir = str(Path(getattr(settings, "ATTACHED_ASSETS_DIR", "attached_assets")).resolve())

    @app.route("/uploads/<path:filename>", methods=["GET"], endpoint="uploaded_attachment")
    @login_required
    def uploaded_attachment(filename: str):
        return send_from_directory(upload_dir, filename)

    @app.route("/attached_assets/<path:filename>", methods=["GET"], endpoint="attached_asset")
    def attached_asset(filename: str):
        return send_from_directory(assets_dir, filename)

    return app
