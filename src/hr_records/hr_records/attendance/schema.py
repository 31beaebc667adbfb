from __future__ import annotations

from ..common.schema import INTEGER, TIMESTAMP, Field, Schema
from ..core.enums import AttendanceStatus

ATTENDANCE_SCHEMA = Schema(
    "attendance",
    Field("employee_id", "employeeId", INTEGER),
    Field("date", "date", TIMESTAMP),
    Field("status", "status", required=False, default=AttendanceStatus.PRESENT.value),
    Field("task", "task", required=False, nullable=True),
)
