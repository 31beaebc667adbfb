from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Optional, Sequence

from ..common.patch import Patch
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, insert_clause, prefixed, set_clause
from ..employees.mysql_employee_repository import row_to_employee
from .model import AttendanceRecord, AttendanceWithEmployee, NewAttendance
from .repository import AttendanceRepository

COLUMNS = "id, employee_id, date, status, task, created_at"
UPDATABLE = ("employee_id", "date", "status", "task")

_JOINED_SELECT = """
    SELECT a.id, a.employee_id, a.date, a.status, a.task, a.created_at,
           e.id AS e_id, e.full_name AS e_full_name, e.email AS e_email,
           e.phone AS e_phone, e.position AS e_position, e.department AS e_department,
           e.date_of_joining AS e_date_of_joining, e.status AS e_status,
           e.candidate_id AS e_candidate_id, e.created_at AS e_created_at
    FROM attendance a
    JOIN employees e ON e.id = a.employee_id
"""


def _record_fields(r: Dict[str, Any]) -> Dict[str, Any]:
    return dict(
        id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        date=r["date"],
        status=r["status"],
        task=r.get("task"),
        created_at=r["created_at"],
    )


def row_to_attendance(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(**_record_fields(r))


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceWithEmployee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_JOINED_SELECT + " ORDER BY a.date DESC, a.id DESC")
            return [
                AttendanceWithEmployee(**_record_fields(r), employee=row_to_employee(prefixed(r, "e_")))
                for r in fetchall(cur)
            ]

    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {COLUMNS} FROM attendance WHERE employee_id=%s ORDER BY date DESC, id DESC",
                (int(employee_id),),
            )
            return [row_to_attendance(r) for r in fetchall(cur)]

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {COLUMNS} FROM attendance WHERE id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return row_to_attendance(r) if r else None

    def create(self, new: NewAttendance) -> AttendanceRecord:
        cols, marks, params = insert_clause(asdict(new))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"INSERT INTO attendance({cols}) VALUES({marks})", tuple(params))
            cur.execute(f"SELECT {COLUMNS} FROM attendance WHERE id=%s", (int(cur.lastrowid),))
            return row_to_attendance(fetchone(cur))

    def update(self, attendance_id: int, patch: Patch) -> Optional[AttendanceRecord]:
        assignments, params = set_clause(patch, UPDATABLE)
        with db_cursor(self._conn_factory) as (_, cur):
            if assignments:
                cur.execute(
                    f"UPDATE attendance SET {assignments} WHERE id=%s",
                    tuple(params + [int(attendance_id)]),
                )
            cur.execute(f"SELECT {COLUMNS} FROM attendance WHERE id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return row_to_attendance(r) if r else None

    def delete(self, attendance_id: int) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE id=%s", (int(attendance_id),))
