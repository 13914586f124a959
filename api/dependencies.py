"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

The container is constructed once per application by create_app() and
stored on app.state; route dependencies read it from the request. There is
no module-level instance.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Depends, Request

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.admin.interfaces import IAdminService
    from modules.auth.interfaces import IAuthService
    from modules.sessions.interfaces import ISessionManager, ISessionRepository
    from modules.users.interfaces import IUserRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services and repositories are created lazily on first access and
    cached for the container's lifetime. Tests pass in-memory repositories
    through the constructor instead of a database client.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        db: "Client | None" = None,
        user_repository: "IUserRepository | None" = None,
        session_repository: "ISessionRepository | None" = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._db = db
        self._user_repository = user_repository
        self._session_repository = session_repository
        self._session_manager: "ISessionManager | None" = None
        self._auth_service: "IAuthService | None" = None
        self._admin_service: "IAdminService | None" = None

    @property
    def db(self) -> "Client":
        """Get the Supabase client, creating it on first use."""
        if self._db is None:
            from shared.database import create_supabase_client
            self._db = create_supabase_client(self.settings)
        return self._db

    @property
    def users(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def session_store(self) -> "ISessionRepository":
        """Get the session repository instance."""
        if self._session_repository is None:
            from modules.sessions.repository import SessionRepository
            self._session_repository = SessionRepository(self.db)
        return self._session_repository

    @property
    def sessions(self) -> "ISessionManager":
        """Get the session manager instance."""
        if self._session_manager is None:
            from modules.sessions.service import SessionManager
            self._session_manager = SessionManager(
                repository=self.session_store,
                ttl_seconds=self.settings.session_ttl_seconds,
            )
        return self._session_manager

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.users,
                sessions=self.sessions,
                bcrypt_rounds=self.settings.bcrypt_rounds,
            )
        return self._auth_service

    @property
    def admin(self) -> "IAdminService":
        """Get the admin service instance."""
        if self._admin_service is None:
            from modules.admin.service import AdminService
            self._admin_service = AdminService(
                users=self.users,
                bcrypt_rounds=self.settings.bcrypt_rounds,
            )
        return self._admin_service

    def check_storage(self) -> None:
        """
        Fail fast if the database can't be reached.

        Raises:
            Exception: Whatever the storage client raises
        """
        self.users.ping()


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the application's service container."""
    return request.app.state.container


def get_app_settings(container: ServiceContainer = Depends(get_container)) -> Settings:
    """FastAPI dependency for the settings the app was built with."""
    return container.settings


def get_session_manager(container: ServiceContainer = Depends(get_container)) -> "ISessionManager":
    """FastAPI dependency for the session manager."""
    return container.sessions


def get_auth_service(container: ServiceContainer = Depends(get_container)) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return container.auth


def get_admin_service(container: ServiceContainer = Depends(get_container)) -> "IAdminService":
    """FastAPI dependency for admin service."""
    return container.admin
