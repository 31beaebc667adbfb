from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account roles."""

    HR = "hr"


class CandidateStatus(str, Enum):
    ACTIVE = "active"


class EmployeeStatus(str, Enum):
    PRESENT = "present"


class AttendanceStatus(str, Enum):
    PRESENT = "present"


class LeaveStatus(str, Enum):
    """Leave status values.

    The column is free text; only APPROVED is filtered on.
    """

    PENDING = "pending"
    APPROVED = "approved"
