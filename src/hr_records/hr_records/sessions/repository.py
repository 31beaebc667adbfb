from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Protocol

from .model import StoredSession


class SessionRepository(Protocol):
    def get(self, sid: str) -> Optional[StoredSession]:
        raise NotImplementedError

    def save(self, sid: str, data: Dict[str, Any], expires_at: datetime) -> None:
        """Insert or replace."""

        raise NotImplementedError

    def delete(self, sid: str) -> None:
        raise NotImplementedError

    def purge_expired(self, now: datetime) -> int:
        raise NotImplementedError
