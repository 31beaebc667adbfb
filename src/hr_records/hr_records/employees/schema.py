from __future__ import annotations

from ..common.schema import INTEGER, TIMESTAMP, Field, Schema
from ..core.enums import EmployeeStatus

EMPLOYEE_SCHEMA = Schema(
    "employee",
    Field("full_name", "fullName"),
    Field("email", "email"),
    Field("phone", "phone"),
    Field("position", "position"),
    Field("department", "department"),
    Field("date_of_joining", "dateOfJoining", TIMESTAMP),
    Field("status", "status", required=False, default=EmployeeStatus.PRESENT.value),
    Field("candidate_id", "candidateId", INTEGER, required=False, nullable=True),
)
