from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from werkzeug.datastructures import FileStorage

from ..attachments.store import AttachmentStore
from .model import Candidate, NewCandidate
from .repository import CandidateRepository
from .schema import CANDIDATE_SCHEMA


class CandidateService:
    """Use case: candidate intake and maintenance."""

    def __init__(self, candidates: CandidateRepository, attachments: AttachmentStore):
        self._candidates = candidates
        self._attachments = attachments

    def list_candidates(self) -> Sequence[Candidate]:
        return self._candidates.list_all()

    def get_candidate(self, candidate_id: int) -> Optional[Candidate]:
        return self._candidates.get_by_id(int(candidate_id))

    def create_candidate(self, raw: Mapping[str, Any], *, resume: Optional[FileStorage] = None) -> Candidate:
        self._attachments.check(resume)
        data = CANDIDATE_SCHEMA.parse(raw)
        if resume is not None:
            data["resume_url"] = self._attachments.save(resume)
        return self._candidates.create(NewCandidate(**data))

    def update_candidate(
        self,
        candidate_id: int,
        raw: Mapping[str, Any],
        *,
        resume: Optional[FileStorage] = None,
    ) -> Optional[Candidate]:
        # Without a new file the stored resume_url is left as is.
        self._attachments.check(resume)
        patch = CANDIDATE_SCHEMA.parse_patch(raw)
        if resume is not None:
            patch = patch.with_value("resume_url", self._attachments.save(resume))
        return self._candidates.update(int(candidate_id), patch)

    def delete_candidate(self, candidate_id: int) -> None:
        self._candidates.delete(int(candidate_id))
