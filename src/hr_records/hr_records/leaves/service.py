from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from werkzeug.datastructures import FileStorage

from ..attachments.store import AttachmentStore
from .model import LeaveRequest, LeaveWithEmployee, NewLeave
from .repository import LeaveRepository
from .schema import LEAVE_SCHEMA


class LeaveService:
    """Use case: leave requests and their approval status."""

    def __init__(self, leaves: LeaveRepository, attachments: AttachmentStore):
        self._leaves = leaves
        self._attachments = attachments

    def list_leaves(self) -> Sequence[LeaveWithEmployee]:
        return self._leaves.list_all()

    def list_approved(self) -> Sequence[LeaveWithEmployee]:
        return self._leaves.list_approved()

    def list_for_employee(self, employee_id: int) -> Sequence[LeaveRequest]:
        return self._leaves.list_for_employee(int(employee_id))

    def get_leave(self, leave_id: int) -> Optional[LeaveRequest]:
        return self._leaves.get_by_id(int(leave_id))

    def request_leave(self, raw: Mapping[str, Any], *, documents: Optional[FileStorage] = None) -> LeaveRequest:
        self._attachments.check(documents)

        raw = dict(raw)
        # Single-day leave when no end date is given.
        if raw.get("endDate") in (None, ""):
            raw["endDate"] = raw.get("startDate")

        data = LEAVE_SCHEMA.parse(raw)
        if documents is not None:
            data["documents_url"] = self._attachments.save(documents)
        return self._leaves.create(NewLeave(**data))

    def update_leave(self, leave_id: int, raw: Mapping[str, Any]) -> Optional[LeaveRequest]:
        return self._leaves.update(int(leave_id), LEAVE_SCHEMA.parse_patch(raw))

    def delete_leave(self, leave_id: int) -> None:
        self._leaves.delete(int(leave_id))
