from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.exceptions import AuthenticationError, ValidationError
from .model import NewUser, User
from .repository import UserRepository
from .schema import USER_SCHEMA

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: register, authenticate and look up HR accounts."""

    def __init__(self, users: UserRepository):
        self._users = users

    def register(self, raw: Mapping[str, Any]) -> User:
        data = USER_SCHEMA.parse(raw)
        username = require_non_empty(data["username"], "username")
        full_name = require_non_empty(data["full_name"], "fullName")
        require_min_length(data["password"], "password", 6)

        if self._users.get_by_username(username):
            raise ValidationError("Username already exists")

        user = self._users.create(
            NewUser(
                username=username,
                password=generate_password_hash(data["password"]),
                full_name=full_name,
            )
        )
        logger.info("registered user %s", user.username)
        return user

    def authenticate(self, username: str, password: str) -> User:
        user = self._users.get_by_username((username or "").strip())
        if not user:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(user.password, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME'
            ok = False

        if not ok:
            raise AuthenticationError("Invalid username or password")
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get_by_id(int(user_id))
