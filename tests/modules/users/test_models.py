"""Tests for users module models."""

import pytest
from pydantic import ValidationError

from modules.users.models import User, NewUser
from shared.models import SessionUser, UserRole


def _user(**overrides) -> User:
    data = {
        "id": "user-1",
        "name": "Ada",
        "email": "ada@example.com",
        "password_hash": "$2b$04$hash",
    }
    data.update(overrides)
    return User(**data)


class TestUser:

    def test_defaults_to_user_role(self):
        user = _user()
        assert user.role == UserRole.USER
        assert user.is_admin is False

    def test_admin_role(self):
        assert _user(role="admin").is_admin is True

    def test_password_hash_hidden_from_repr(self):
        assert "$2b$04$hash" not in repr(_user())

    def test_name_over_30_is_rejected(self):
        with pytest.raises(ValidationError):
            _user(name="A" * 31)

    def test_to_session_user_copies_identity_and_role(self):
        user = _user(role=UserRole.ADMIN)

        snapshot = user.to_session_user()

        assert snapshot == SessionUser(
            id="user-1", name="Ada", email="ada@example.com", role=UserRole.ADMIN
        )

    def test_snapshot_does_not_follow_later_changes(self):
        user = _user()
        snapshot = user.to_session_user()

        promoted = user.model_copy(update={"role": UserRole.ADMIN})

        assert promoted.is_admin
        assert snapshot.role == UserRole.USER


class TestNewUser:

    def test_defaults_to_user_role(self):
        new_user = NewUser(name="Ada", email="ada@example.com", password_hash="h")
        assert new_user.role == UserRole.USER

    def test_empty_name_is_rejected(self):
        with pytest.raises(ValidationError):
            NewUser(name="", email="ada@example.com", password_hash="h")
