from __future__ import annotations

from typing import Any, Dict, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, unique_violation
from .model import NewUser, User
from .repository import UserRepository

COLUMNS = "id, username, password, full_name, role, created_at"


def row_to_user(r: Dict[str, Any]) -> User:
    return User(
        id=int(r["id"]),
        username=r["username"],
        password=r["password"],
        full_name=r["full_name"],
        role=r["role"],
        created_at=r["created_at"],
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {COLUMNS} FROM users WHERE id=%s", (int(user_id),))
            row = fetchone(cur)
            return row_to_user(row) if row else None

    def get_by_username(self, username: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {COLUMNS} FROM users WHERE username=%s", (username,))
            row = fetchone(cur)
            return row_to_user(row) if row else None

    def create(self, new: NewUser) -> User:
        with unique_violation("Username already exists"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(username, password, full_name, role)
                VALUES(%s,%s,%s,%s)
                """,
                (new.username, new.password, new.full_name, new.role),
            )
            cur.execute(f"SELECT {COLUMNS} FROM users WHERE id=%s", (int(cur.lastrowid),))
            return row_to_user(fetchone(cur))
