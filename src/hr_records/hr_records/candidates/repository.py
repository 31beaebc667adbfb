from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..common.patch import Patch
from .model import Candidate, NewCandidate


class CandidateRepository(Protocol):
    def list_all(self) -> Sequence[Candidate]:
        """Newest first."""

        raise NotImplementedError

    def get_by_id(self, candidate_id: int) -> Optional[Candidate]:
        raise NotImplementedError

    def create(self, new: NewCandidate) -> Candidate:
        raise NotImplementedError

    def update(self, candidate_id: int, patch: Patch) -> Optional[Candidate]:
        """Returns None when the id does not exist."""

        raise NotImplementedError

    def delete(self, candidate_id: int) -> None:
        raise NotImplementedError
