from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attachments.store import AttachmentStore
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .candidates.mysql_candidate_repository import MySQLCandidateRepository
from .candidates.repository import CandidateRepository
from .candidates.service import CandidateService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .sessions.mysql_session_repository import MySQLSessionRepository
from .sessions.repository import SessionRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    sessions_repo: SessionRepository
    candidates_repo: CandidateRepository
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    leaves_repo: LeaveRepository
    attachments: AttachmentStore

    auth_service: AuthService
    candidate_service: CandidateService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    leave_service: LeaveService

    conn: Optional[DatabaseConnection] = None


def assemble(
    *,
    users_repo: UserRepository,
    sessions_repo: SessionRepository,
    candidates_repo: CandidateRepository,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    leaves_repo: LeaveRepository,
    attachments: AttachmentStore,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of the given repositories (MySQL or in-memory)."""
    return Container(
        conn=conn,
        users_repo=users_repo,
        sessions_repo=sessions_repo,
        candidates_repo=candidates_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        attachments=attachments,
        auth_service=AuthService(users_repo),
        candidate_service=CandidateService(candidates_repo, attachments),
        employee_service=EmployeeService(employees_repo, candidates_repo),
        attendance_service=AttendanceService(attendance_repo),
        leave_service=LeaveService(leaves_repo, attachments),
    )


def build_container(*, db_config: dict, attachments: AttachmentStore, pool_size: int = 5) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config), pool_size=pool_size)

    return assemble(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        sessions_repo=MySQLSessionRepository(conn),
        candidates_repo=MySQLCandidateRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        leaves_repo=MySQLLeaveRepository(conn),
        attachments=attachments,
    )
