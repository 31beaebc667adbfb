from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..candidates.repository import CandidateRepository
from ..common.datetime_utils import now_local
from ..core.enums import EmployeeStatus
from ..core.exceptions import NotFoundError
from .model import Employee, NewEmployee
from .repository import EmployeeRepository
from .schema import EMPLOYEE_SCHEMA

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: employee records and candidate promotion."""

    def __init__(self, employees: EmployeeRepository, candidates: CandidateRepository):
        self._employees = employees
        self._candidates = candidates

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get_by_id(int(employee_id))

    def create_employee(self, raw: Mapping[str, Any]) -> Employee:
        return self._employees.create(NewEmployee(**EMPLOYEE_SCHEMA.parse(raw)))

    def update_employee(self, employee_id: int, raw: Mapping[str, Any]) -> Optional[Employee]:
        return self._employees.update(int(employee_id), EMPLOYEE_SCHEMA.parse_patch(raw))

    def delete_employee(self, employee_id: int) -> None:
        self._employees.delete(int(employee_id))

    def promote_candidate(
        self,
        candidate_id: int,
        raw: Mapping[str, Any],
        *,
        now: Optional[datetime] = None,
    ) -> Employee:
        """Create an employee from a candidate's details plus a department.

        The candidate read and the employee insert are independent statements;
        the candidate itself is never modified.
        """
        candidate = self._candidates.get_by_id(int(candidate_id))
        if not candidate:
            raise NotFoundError("Candidate not found")

        payload: dict = {
            "fullName": candidate.full_name,
            "email": candidate.email,
            "phone": candidate.phone,
            "position": candidate.position,
            "dateOfJoining": now or now_local(),
            "status": EmployeeStatus.PRESENT.value,
        }
        if "department" in raw:
            payload["department"] = raw["department"]

        data = EMPLOYEE_SCHEMA.parse(payload)
        data.pop("candidate_id", None)
        employee = self._employees.promote(candidate.id, NewEmployee(**data))
        logger.info("promoted candidate %s to employee %s", candidate.id, employee.id)
        return employee
