from __future__ import annotations

from ..common.schema import INTEGER, TIMESTAMP, Field, Schema
from ..core.enums import LeaveStatus

LEAVE_SCHEMA = Schema(
    "leave",
    Field("employee_id", "employeeId", INTEGER),
    Field("start_date", "startDate", TIMESTAMP),
    Field("end_date", "endDate", TIMESTAMP),
    Field("reason", "reason"),
    Field("status", "status", required=False, default=LeaveStatus.PENDING.value),
    Field("designation", "designation", required=False, nullable=True),
    Field("documents_url", "documentsUrl", required=False, nullable=True),
)
