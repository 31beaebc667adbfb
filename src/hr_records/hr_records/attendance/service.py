from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from .model import AttendanceRecord, AttendanceWithEmployee, NewAttendance
from .repository import AttendanceRepository
from .schema import ATTENDANCE_SCHEMA


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def list_attendance(self) -> Sequence[AttendanceWithEmployee]:
        return self._attendance.list_all()

    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_employee(int(employee_id))

    def get_record(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return self._attendance.get_by_id(int(attendance_id))

    def record_attendance(self, raw: Mapping[str, Any]) -> AttendanceRecord:
        return self._attendance.create(NewAttendance(**ATTENDANCE_SCHEMA.parse(raw)))

    def update_record(self, attendance_id: int, raw: Mapping[str, Any]) -> Optional[AttendanceRecord]:
        return self._attendance.update(int(attendance_id), ATTENDANCE_SCHEMA.parse_patch(raw))

    def delete_record(self, attendance_id: int) -> None:
        self._attendance.delete(int(attendance_id))
