from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..common.patch import Patch
from .model import LeaveRequest, LeaveWithEmployee, NewLeave


class LeaveRepository(Protocol):
    def list_all(self) -> Sequence[LeaveWithEmployee]:
        """Joined with the employee, latest start date first."""

        raise NotImplementedError

    def list_approved(self) -> Sequence[LeaveWithEmployee]:
        """Same as list_all, restricted to status exactly 'approved'."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def get_by_id(self, leave_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def create(self, new: NewLeave) -> LeaveRequest:
        raise NotImplementedError

    def update(self, leave_id: int, patch: Patch) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def delete(self, leave_id: int) -> None:
        raise NotImplementedError
