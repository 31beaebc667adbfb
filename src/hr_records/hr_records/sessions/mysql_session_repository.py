from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Dict, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import StoredSession
from .repository import SessionRepository


class MySQLSessionRepository(SessionRepository):
    """Session rows: sid, JSON-encoded ``sess`` and ``expire``."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, sid: str) -> Optional[StoredSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT sid, sess, expire FROM sessions WHERE sid=%s", (sid,))
            r = fetchone(cur)
            if not r:
                return None
            return StoredSession(sid=r["sid"], data=json.loads(r["sess"]), expires_at=r["expire"])

    def save(self, sid: str, data: Dict[str, Any], expires_at: datetime) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO sessions(sid, sess, expire) VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE sess=VALUES(sess), expire=VALUES(expire)
                """,
                (sid, json.dumps(data), expires_at),
            )

    def delete(self, sid: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM sessions WHERE sid=%s", (sid,))

    def purge_expired(self, now: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM sessions WHERE expire < %s", (now,))
            return int(cur.rowcount)
