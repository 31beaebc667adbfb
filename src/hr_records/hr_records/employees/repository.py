from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..common.patch import Patch
from .model import Employee, NewEmployee


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, new: NewEmployee) -> Employee:
        raise NotImplementedError

    def update(self, employee_id: int, patch: Patch) -> Optional[Employee]:
        raise NotImplementedError

    def delete(self, employee_id: int) -> None:
        raise NotImplementedError

    def promote(self, candidate_id: int, new: NewEmployee) -> Employee:
        """Insert an employee carrying ``candidate_id``; the candidate row is not touched."""

        raise NotImplementedError
