from __future__ import annotations

from typing import Optional, Protocol

from .model import NewUser, User


class UserRepository(Protocol):
    """Repository interface for User.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def create(self, new: NewUser) -> User:
        raise NotImplementedError
