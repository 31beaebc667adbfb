from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Optional, Sequence

from ..common.patch import Patch
from ..core.enums import LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, insert_clause, prefixed, set_clause
from ..employees.mysql_employee_repository import row_to_employee
from .model import LeaveRequest, LeaveWithEmployee, NewLeave
from .repository import LeaveRepository

COLUMNS = "id, employee_id, start_date, end_date, reason, status, designation, documents_url, created_at"
UPDATABLE = ("employee_id", "start_date", "end_date", "reason", "status", "designation", "documents_url")

_JOINED_SELECT = """
    SELECT l.id, l.employee_id, l.start_date, l.end_date, l.reason, l.status,
           l.designation, l.documents_url, l.created_at,
           e.id AS e_id, e.full_name AS e_full_name, e.email AS e_email,
           e.phone AS e_phone, e.position AS e_position, e.department AS e_department,
           e.date_of_joining AS e_date_of_joining, e.status AS e_status,
           e.candidate_id AS e_candidate_id, e.created_at AS e_created_at
    FROM leaves l
    JOIN employees e ON e.id = l.employee_id
"""


def _leave_fields(r: Dict[str, Any]) -> Dict[str, Any]:
    return dict(
        id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        start_date=r["start_date"],
        end_date=r["end_date"],
        reason=r["reason"],
        status=r["status"],
        designation=r.get("designation"),
        documents_url=r.get("documents_url"),
        created_at=r["created_at"],
    )


def row_to_leave(r: Dict[str, Any]) -> LeaveRequest:
    return LeaveRequest(**_leave_fields(r))


def _row_to_joined(r: Dict[str, Any]) -> LeaveWithEmployee:
    return LeaveWithEmployee(**_leave_fields(r), employee=row_to_employee(prefixed(r, "e_")))


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[LeaveWithEmployee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_JOINED_SELECT + " ORDER BY l.start_date DESC, l.id DESC")
            return [_row_to_joined(r) for r in fetchall(cur)]

    def list_approved(self) -> Sequence[LeaveWithEmployee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _JOINED_SELECT + " WHERE l.status=%s ORDER BY l.start_date DESC, l.id DESC",
                (LeaveStatus.APPROVED.value,),
            )
            return [_row_to_joined(r) for r in fetchall(cur)]

    def list_for_employee(self, employee_id: int) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {COLUMNS} FROM leaves WHERE employee_id=%s ORDER BY start_date DESC, id DESC",
                (int(employee_id),),
            )
            return [row_to_leave(r) for r in fetchall(cur)]

    def get_by_id(self, leave_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {COLUMNS} FROM leaves WHERE id=%s", (int(leave_id),))
            r = fetchone(cur)
            return row_to_leave(r) if r else None

    def create(self, new: NewLeave) -> LeaveRequest:
        cols, marks, params = insert_clause(asdict(new))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"INSERT INTO leaves({cols}) VALUES({marks})", tuple(params))
            cur.execute(f"SELECT {COLUMNS} FROM leaves WHERE id=%s", (int(cur.lastrowid),))
            return row_to_leave(fetchone(cur))

    def update(self, leave_id: int, patch: Patch) -> Optional[LeaveRequest]:
        assignments, params = set_clause(patch, UPDATABLE)
        with db_cursor(self._conn_factory) as (_, cur):
            if assignments:
                cur.execute(
                    f"UPDATE leaves SET {assignments} WHERE id=%s",
                    tuple(params + [int(leave_id)]),
                )
            cur.execute(f"SELECT {COLUMNS} FROM leaves WHERE id=%s", (int(leave_id),))
            r = fetchone(cur)
            return row_to_leave(r) if r else None

    def delete(self, leave_id: int) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM leaves WHERE id=%s", (int(leave_id),))
