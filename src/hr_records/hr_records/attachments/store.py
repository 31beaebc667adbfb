from __future__ import annotations

import logging
import os
import re
import secrets
from pathlib import Path
from typing import Optional, Sequence

from werkzeug.datastructures import FileStorage

from ..core.constants import ALLOWED_ATTACHMENT_TYPES, DEFAULT_MAX_UPLOAD_MB, UPLOADS_URL_PREFIX
from ..core.exceptions import UploadError

logger = logging.getLogger(__name__)


def _file_size(file: FileStorage) -> int:
    stream = file.stream
    pos = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(pos)
    return size


class AttachmentStore:
    """Stores uploaded resumes/leave documents on local disk.

    Files are renamed to a random token (original extension kept) and exposed
    as ``/uploads/<name>``.
    """

    def __init__(
        self,
        upload_dir: str | Path,
        *,
        max_bytes: int = DEFAULT_MAX_UPLOAD_MB * 1024 * 1024,
        allowed_types: Sequence[str] = ALLOWED_ATTACHMENT_TYPES,
    ):
        self.upload_dir = Path(upload_dir)
        self.max_bytes = int(max_bytes)
        self._pattern = re.compile("|".join(re.escape(t) for t in allowed_types))

    def check(self, file: Optional[FileStorage]) -> None:
        """Reject unsupported type or oversize files before anything is stored."""
        if file is None:
            return

        ext = os.path.splitext(file.filename or "")[1].lower().lstrip(".")
        mimetype = (file.mimetype or "").lower()
        if not ext or not self._pattern.search(ext) or not self._pattern.search(mimetype):
            raise UploadError("Only documents and images are allowed")

        if _file_size(file) > self.max_bytes:
            raise UploadError(f"File too large (max {self.max_bytes // (1024 * 1024)}MB)")

    def save(self, file: FileStorage) -> str:
        self.check(file)
        self.upload_dir.mkdir(parents=True, exist_ok=True)

        ext = os.path.splitext(file.filename or "")[1].lower()
        name = f"{secrets.token_hex(16)}{ext}"
        file.save(self.upload_dir / name)
        logger.info("stored attachment %s (%s)", name, file.filename)
        return f"{UPLOADS_URL_PREFIX}/{name}"
