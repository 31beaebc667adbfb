from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..common.patch import Patch
from .model import AttendanceRecord, AttendanceWithEmployee, NewAttendance


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceWithEmployee]:
        """Joined with the employee, newest date first; rows without an employee are skipped."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(self, new: NewAttendance) -> AttendanceRecord:
        raise NotImplementedError

    def update(self, attendance_id: int, patch: Patch) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def delete(self, attendance_id: int) -> None:
        raise NotImplementedError
