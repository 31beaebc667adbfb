from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import CandidateStatus


@dataclass(frozen=True)
class Candidate:
    """Job applicant record."""

    id: int
    full_name: str
    email: str
    phone: str
    position: str
    experience: str
    status: str
    resume_url: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class NewCandidate:
    full_name: str
    email: str
    phone: str
    position: str
    experience: str
    status: str = CandidateStatus.ACTIVE.value
    resume_url: Optional[str] = None
