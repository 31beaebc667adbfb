from __future__ import annotations

from ..common.schema import Field, Schema

USER_SCHEMA = Schema(
    "user",
    Field("username", "username"),
    Field("password", "password"),
    Field("full_name", "fullName"),
)
