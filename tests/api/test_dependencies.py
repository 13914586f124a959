"""Tests for the service container."""

from unittest.mock import MagicMock, patch

import pytest

from api.dependencies import ServiceContainer
from modules.admin.service import AdminService
from modules.auth.service import AuthService
from modules.sessions.repository import SessionRepository
from modules.sessions.service import SessionManager
from modules.users.repository import UserRepository


class TestServiceContainer:

    def test_services_are_cached(self, container):
        assert container.auth is container.auth
        assert container.admin is container.admin
        assert container.sessions is container.sessions

    def test_wires_concrete_services(self, container, user_repo, session_repo):
        assert isinstance(container.auth, AuthService)
        assert isinstance(container.admin, AdminService)
        assert isinstance(container.sessions, SessionManager)
        assert container.users is user_repo
        assert container.session_store is session_repo

    def test_session_ttl_comes_from_settings(self, settings, user_repo, session_repo):
        settings = settings.model_copy(update={"session_ttl_seconds": 120})
        container = ServiceContainer(settings, user_repository=user_repo, session_repository=session_repo)

        assert container.sessions.ttl_seconds == 120

    def test_supabase_repositories_share_one_client(self, settings):
        db = MagicMock()
        container = ServiceContainer(settings, db=db)

        assert isinstance(container.users, UserRepository)
        assert isinstance(container.session_store, SessionRepository)
        assert container.users._db is db
        assert container.session_store._db is db

    @patch("shared.database.create_client")
    def test_client_created_lazily(self, mock_create, settings):
        settings = settings.model_copy(
            update={"supabase_url": "https://test.supabase.co", "supabase_service_role_key": "k"}
        )
        container = ServiceContainer(settings)
        mock_create.assert_not_called()

        container.users

        mock_create.assert_called_once_with("https://test.supabase.co", "k")

    def test_check_storage_propagates_errors(self, container, user_repo, monkeypatch):
        def broken_ping():
            raise ConnectionError("refused")

        monkeypatch.setattr(user_repo, "ping", broken_ping)

        with pytest.raises(ConnectionError):
            container.check_storage()
