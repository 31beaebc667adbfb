from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Optional, Sequence

from ..common.patch import Patch
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, insert_clause, set_clause, unique_violation
from .model import Candidate, NewCandidate
from .repository import CandidateRepository

COLUMNS = "id, full_name, email, phone, position, experience, status, resume_url, created_at"
UPDATABLE = ("full_name", "email", "phone", "position", "experience", "status", "resume_url")


def row_to_candidate(r: Dict[str, Any]) -> Candidate:
    return Candidate(
        id=int(r["id"]),
        full_name=r["full_name"],
        email=r["email"],
        phone=r["phone"],
        position=r["position"],
        experience=r["experience"],
        status=r["status"],
        resume_url=r.get("resume_url"),
        created_at=r["created_at"],
    )


class MySQLCandidateRepository(CandidateRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Candidate]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {COLUMNS} FROM candidates ORDER BY created_at DESC, id DESC")
            return [row_to_candidate(r) for r in fetchall(cur)]

    def get_by_id(self, candidate_id: int) -> Optional[Candidate]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {COLUMNS} FROM candidates WHERE id=%s", (int(candidate_id),))
            r = fetchone(cur)
            return row_to_candidate(r) if r else None

    def create(self, new: NewCandidate) -> Candidate:
        cols, marks, params = insert_clause(asdict(new))
        with unique_violation("email already exists"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"INSERT INTO candidates({cols}) VALUES({marks})", tuple(params))
            cur.execute(f"SELECT {COLUMNS} FROM candidates WHERE id=%s", (int(cur.lastrowid),))
            return row_to_candidate(fetchone(cur))

    def update(self, candidate_id: int, patch: Patch) -> Optional[Candidate]:
        assignments, params = set_clause(patch, UPDATABLE)
        with unique_violation("email already exists"), db_cursor(self._conn_factory) as (_, cur):
            if assignments:
                cur.execute(
                    f"UPDATE candidates SET {assignments} WHERE id=%s",
                    tuple(params + [int(candidate_id)]),
                )
            cur.execute(f"SELECT {COLUMNS} FROM candidates WHERE id=%s", (int(candidate_id),))
            r = fetchone(cur)
            return row_to_candidate(r) if r else None

    def delete(self, candidate_id: int) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM candidates WHERE id=%s", (int(candidate_id),))
