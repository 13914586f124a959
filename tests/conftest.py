"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer
from shared.config import Settings
from shared.models import UserRole

from tests.fakes import (
    ADMIN_EMAIL,
    ADMIN_PASSWORD,
    TEST_BCRYPT_ROUNDS,
    InMemorySessionRepository,
    InMemoryUserRepository,
)


@pytest.fixture
def settings() -> Settings:
    """Settings that never touch a real database."""
    return Settings(
        _env_file=None,
        supabase_url="",
        supabase_service_role_key="",
        bcrypt_rounds=TEST_BCRYPT_ROUNDS,
        bootstrap_admin_email="",
        bootstrap_admin_password="",
    )


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def session_repo() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def container(settings, user_repo, session_repo) -> ServiceContainer:
    return ServiceContainer(
        settings=settings,
        user_repository=user_repo,
        session_repository=session_repo,
    )


@pytest.fixture
def app(container):
    return create_app(container)


@pytest.fixture
def client(app):
    """Test client that runs the app lifespan and does not follow redirects."""
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture
def admin_user(user_repo):
    """An admin account stored directly in the repository."""
    return user_repo.add("Root", ADMIN_EMAIL, ADMIN_PASSWORD, role=UserRole.ADMIN)
