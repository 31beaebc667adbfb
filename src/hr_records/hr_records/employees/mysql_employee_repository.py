from __future__ import annotations

from dataclasses import asdict, replace
from typing import Any, Dict, Optional, Sequence

from ..common.patch import Patch
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, insert_clause, set_clause, unique_violation
from .model import Employee, NewEmployee
from .repository import EmployeeRepository

COLUMNS = "id, full_name, email, phone, position, department, date_of_joining, status, candidate_id, created_at"
UPDATABLE = ("full_name", "email", "phone", "position", "department", "date_of_joining", "status", "candidate_id")


def row_to_employee(r: Dict[str, Any]) -> Employee:
    candidate_id = r.get("candidate_id")
    return Employee(
        id=int(r["id"]),
        full_name=r["full_name"],
        email=r["email"],
        phone=r["phone"],
        position=r["position"],
        department=r["department"],
        date_of_joining=r["date_of_joining"],
        status=r["status"],
        candidate_id=int(candidate_id) if candidate_id is not None else None,
        created_at=r["created_at"],
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {COLUMNS} FROM employees ORDER BY created_at DESC, id DESC")
            return [row_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {COLUMNS} FROM employees WHERE id=%s", (int(employee_id),))
            r = fetchone(cur)
            return row_to_employee(r) if r else None

    def create(self, new: NewEmployee) -> Employee:
        cols, marks, params = insert_clause(asdict(new))
        with unique_violation("email already exists"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"INSERT INTO employees({cols}) VALUES({marks})", tuple(params))
            cur.execute(f"SELECT {COLUMNS} FROM employees WHERE id=%s", (int(cur.lastrowid),))
            return row_to_employee(fetchone(cur))

    def update(self, employee_id: int, patch: Patch) -> Optional[Employee]:
        assignments, params = set_clause(patch, UPDATABLE)
        with unique_violation("email already exists"), db_cursor(self._conn_factory) as (_, cur):
            if assignments:
                cur.execute(
                    f"UPDATE employees SET {assignments} WHERE id=%s",
                    tuple(params + [int(employee_id)]),
                )
            cur.execute(f"SELECT {COLUMNS} FROM employees WHERE id=%s", (int(employee_id),))
            r = fetchone(cur)
            return row_to_employee(r) if r else None

    def delete(self, employee_id: int) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (int(employee_id),))

    def promote(self, candidate_id: int, new: NewEmployee) -> Employee:
        return self.create(replace(new, candidate_id=int(candidate_id)))
