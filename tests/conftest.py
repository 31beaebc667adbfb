from __future__ import annotations

from dataclasses import asdict, replace
from datetime import datetime, timedelta
from typing import Optional

import pytest

from hr_records.attachments.store import AttachmentStore
from hr_records.attendance.model import AttendanceRecord, AttendanceWithEmployee, NewAttendance
from hr_records.candidates.model import Candidate, NewCandidate
from hr_records.common.patch import Patch
from hr_records.container import Container, assemble
from hr_records.core.enums import LeaveStatus
from hr_records.core.exceptions import ValidationError
from hr_records.employees.model import Employee, NewEmployee
from hr_records.leaves.model import LeaveRequest, LeaveWithEmployee, NewLeave
from hr_records.main import create_app
from hr_records.sessions.model import StoredSession
from hr_records.users.model import NewUser, User

BASE_TIME = datetime(2024, 1, 1, 9, 0, 0)


class _Clock:
    """Deterministic created_at: each insert is one second after the previous one."""

    def __init__(self):
        self._ticks = 0

    def tick(self) -> datetime:
        self._ticks += 1
        return BASE_TIME + timedelta(seconds=self._ticks)


class InMemoryUsers:
    def __init__(self, clock: _Clock):
        self._clock = clock
        self._by_id: dict[int, User] = {}
        self._id = 0

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(int(user_id))

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.username == username), None)

    def create(self, new: NewUser) -> User:
        if self.get_by_username(new.username):
            raise ValidationError("Username already exists")
        self._id += 1
        user = User(id=self._id, created_at=self._clock.tick(), **asdict(new))
        self._by_id[user.id] = user
        return user


class InMemorySessions:
    def __init__(self):
        self.rows: dict[str, StoredSession] = {}

    def get(self, sid: str) -> Optional[StoredSession]:
        return self.rows.get(sid)

    def save(self, sid, data, expires_at) -> None:
        self.rows[sid] = StoredSession(sid=sid, data=dict(data), expires_at=expires_at)

    def delete(self, sid: str) -> None:
        self.rows.pop(sid, None)

    def purge_expired(self, now: datetime) -> int:
        expired = [sid for sid, s in self.rows.items() if s.expires_at < now]
        for sid in expired:
            del self.rows[sid]
        return len(expired)


class _InMemoryTable:
    """Shared id/created_at/patch handling for the entity fakes."""

    unique_email = False

    def __init__(self, clock: _Clock):
        self._clock = clock
        self.rows: dict = {}
        self._id = 0

    def _check_email(self, email: str, *, exclude_id: Optional[int] = None) -> None:
        if not self.unique_email:
            return
        if any(r.email == email and r.id != exclude_id for r in self.rows.values()):
            raise ValidationError("email already exists")

    def _insert(self, entity_cls, new):
        if self.unique_email:
            self._check_email(new.email)
        self._id += 1
        row = entity_cls(id=self._id, created_at=self._clock.tick(), **asdict(new))
        self.rows[row.id] = row
        return row

    def get_by_id(self, row_id: int):
        return self.rows.get(int(row_id))

    def update(self, row_id: int, patch: Patch):
        row = self.rows.get(int(row_id))
        if row is None:
            return None
        if "email" in patch:
            self._check_email(patch.get("email"), exclude_id=row.id)
        row = patch.apply(row)
        self.rows[row.id] = row
        return row

    def delete(self, row_id: int) -> None:
        self.rows.pop(int(row_id), None)


class InMemoryCandidates(_InMemoryTable):
    unique_email = True

    def list_all(self):
        return sorted(self.rows.values(), key=lambda c: (c.created_at, c.id), reverse=True)

    def create(self, new: NewCandidate) -> Candidate:
        return self._insert(Candidate, new)


class InMemoryEmployees(_InMemoryTable):
    unique_email = True

    def list_all(self):
        return sorted(self.rows.values(), key=lambda e: (e.created_at, e.id), reverse=True)

    def create(self, new: NewEmployee) -> Employee:
        return self._insert(Employee, new)

    def promote(self, candidate_id: int, new: NewEmployee) -> Employee:
        return self.create(replace(new, candidate_id=int(candidate_id)))


class InMemoryAttendance(_InMemoryTable):
    def __init__(self, clock: _Clock, employees: InMemoryEmployees):
        super().__init__(clock)
        self._employees = employees

    def _ordered(self, rows):
        return sorted(rows, key=lambda r: (r.date, r.id), reverse=True)

    def list_all(self):
        # Inner join: records of deleted/unknown employees are not listed.
        out = []
        for r in self._ordered(self.rows.values()):
            employee = self._employees.get_by_id(r.employee_id)
            if employee:
                out.append(AttendanceWithEmployee(**asdict(r), employee=employee))
        return out

    def list_for_employee(self, employee_id: int):
        return self._ordered(r for r in self.rows.values() if r.employee_id == int(employee_id))

    def create(self, new: NewAttendance) -> AttendanceRecord:
        return self._insert(AttendanceRecord, new)


class InMemoryLeaves(_InMemoryTable):
    def __init__(self, clock: _Clock, employees: InMemoryEmployees):
        super().__init__(clock)
        self._employees = employees

    def _ordered(self, rows):
        return sorted(rows, key=lambda r: (r.start_date, r.id), reverse=True)

    def _joined(self, rows):
        out = []
        for r in self._ordered(rows):
            employee = self._employees.get_by_id(r.employee_id)
            if employee:
                out.append(LeaveWithEmployee(**asdict(r), employee=employee))
        return out

    def list_all(self):
        return self._joined(self.rows.values())

    def list_approved(self):
        return self._joined(r for r in self.rows.values() if r.status == LeaveStatus.APPROVED.value)

    def list_for_employee(self, employee_id: int):
        return self._ordered(r for r in self.rows.values() if r.employee_id == int(employee_id))

    def create(self, new: NewLeave) -> LeaveRequest:
        return self._insert(LeaveRequest, new)


@pytest.fixture()
def container(tmp_path) -> Container:
    clock = _Clock()
    employees = InMemoryEmployees(clock)
    return assemble(
        users_repo=InMemoryUsers(clock),
        sessions_repo=InMemorySessions(),
        candidates_repo=InMemoryCandidates(clock),
        employees_repo=employees,
        attendance_repo=InMemoryAttendance(clock, employees),
        leaves_repo=InMemoryLeaves(clock, employees),
        attachments=AttachmentStore(tmp_path / "uploads"),
    )


@pytest.fixture()
def app_client(container):
    app = create_app(container, settings_module="config.testing")
    return app, app.test_client()


@pytest.fixture()
def auth_client(app_client):
    """Test client with a logged-in HR user."""
    app, client = app_client
    res = client.post(
        "/api/register",
        json={"username": "hr.jane", "password": "secret123", "fullName": "Jane HR"},
    )
    assert res.status_code == 201
    return app, client
