from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus
from ..employees.model import Employee


@dataclass(frozen=True)
class AttendanceRecord:
    """One employee's attendance entry for a day.

    ``employee_id`` is not checked for existence; several entries per
    employee and day are allowed.
    """

    id: int
    employee_id: int
    date: datetime
    status: str
    task: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class AttendanceWithEmployee(AttendanceRecord):
    """Read-model for list views (inner-joined with the employee)."""

    employee: Employee


@dataclass(frozen=True)
class NewAttendance:
    employee_id: int
    date: datetime
    status: str = AttendanceStatus.PRESENT.value
    task: Optional[str] = None
