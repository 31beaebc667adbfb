from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import LeaveStatus
from ..employees.model import Employee


@dataclass(frozen=True)
class LeaveRequest:
    id: int
    employee_id: int
    start_date: datetime
    end_date: datetime
    reason: str
    status: str
    designation: Optional[str]
    documents_url: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class LeaveWithEmployee(LeaveRequest):
    """Read-model for list views (inner-joined with the employee)."""

    employee: Employee


@dataclass(frozen=True)
class NewLeave:
    employee_id: int
    start_date: datetime
    end_date: datetime
    reason: str
    status: str = LeaveStatus.PENDING.value
    designation: Optional[str] = None
    documents_url: Optional[str] = None
