from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Login account of an HR operator.

    ``password`` holds the werkzeug hash and is never serialized.
    """

    id: int
    username: str
    password: str
    full_name: str
    role: str
    created_at: datetime


@dataclass(frozen=True)
class NewUser:
    username: str
    password: str
    full_name: str
    role: str = Role.HR.value
