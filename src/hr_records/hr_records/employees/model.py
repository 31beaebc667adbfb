from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Employee record.

    ``candidate_id`` is a logical back-reference to the originating candidate;
    it is not checked against the candidates table.
    """

    id: int
    full_name: str
    email: str
    phone: str
    position: str
    department: str
    date_of_joining: datetime
    status: str
    candidate_id: Optional[int]
    created_at: datetime


@dataclass(frozen=True)
class NewEmployee:
    full_name: str
    email: str
    phone: str
    position: str
    department: str
    date_of_joining: datetime
    status: str = EmployeeStatus.PRESENT.value
    candidate_id: Optional[int] = None
