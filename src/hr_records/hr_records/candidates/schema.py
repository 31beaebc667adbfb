from __future__ import annotations

from ..common.schema import Field, Schema
from ..core.enums import CandidateStatus

CANDIDATE_SCHEMA = Schema(
    "candidate",
    Field("full_name", "fullName"),
    Field("email", "email"),
    Field("phone", "phone"),
    Field("position", "position"),
    Field("experience", "experience"),
    Field("status", "status", required=False, default=CandidateStatus.ACTIVE.value),
    Field("resume_url", "resumeUrl", required=False, nullable=True),
)
