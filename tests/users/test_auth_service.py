from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from hr_records.core.exceptions import AuthenticationError, ValidationError


def _register(container, **overrides):
    data = {"username": "hr.bob", "password": "secret123", "fullName": "Bob HR"}
    data.update(overrides)
    return container.auth_service.register(data)


def test_register_hashes_password(container):
    user = _register(container)

    assert user.role == "hr"
    assert user.password != "secret123"
    assert check_password_hash(user.password, "secret123")


def test_register_trims_username(container):
    assert _register(container, username="  hr.bob  ").username == "hr.bob"


def test_register_rejects_short_password(container):
    with pytest.raises(ValidationError, match="at least 6"):
        _register(container, password="12345")


def test_register_rejects_blank_username(container):
    with pytest.raises(ValidationError, match="username"):
        _register(container, username="   ")


def test_register_rejects_duplicate_username(container):
    _register(container)
    with pytest.raises(ValidationError, match="already exists"):
        _register(container, fullName="Someone Else")


def test_authenticate(container):
    user = _register(container)
    assert container.auth_service.authenticate("hr.bob", "secret123") == user


@pytest.mark.parametrize("username, password", [("hr.bob", "wrong-pass"), ("nobody", "secret123"), ("", "")])
def test_authenticate_rejects_bad_credentials(container, username, password):
    _register(container)
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate(username, password)


def test_authenticate_handles_placeholder_hash(container):
    from hr_records.users.model import NewUser

    container.users_repo.create(NewUser(username="legacy", password="CHANGE_ME", full_name="Legacy"))
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("legacy", "CHANGE_ME")
