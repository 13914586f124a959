"""
Sessions module interfaces.

The gate and the auth flow depend on ISessionManager; the manager depends
on ISessionRepository for persistence.
"""

from datetime import datetime
from typing import Protocol, Optional, runtime_checkable

from shared.models import SessionUser
from .models import Session


@runtime_checkable
class ISessionRepository(Protocol):
    """Persistence for session records, keyed by token."""

    def insert(self, session: Session) -> None:
        ...

    def get(self, token: str) -> Optional[Session]:
        ...

    def delete(self, token: str) -> None:
        ...

    def delete_expired(self, now: datetime) -> int:
        """Delete every session with expires_at <= now; return how many."""
        ...


@runtime_checkable
class ISessionManager(Protocol):
    """
    Interface for session lifecycle operations.
    """

    async def create(self, user: SessionUser) -> Session:
        """
        Issue a new session for a user snapshot.

        Returns:
            The persisted session, including its token
        """
        ...

    async def read(self, token: Optional[str]) -> Optional[Session]:
        """
        Resolve a token to a live session.

        Returns:
            Session if the token is known and not expired, None otherwise
        """
        ...

    async def destroy(self, token: str) -> None:
        """
        Delete a session so it can never be read again.

        Raises:
            SessionDestroyError: If the session store could not delete it
        """
        ...

    async def purge_expired(self) -> int:
        """Remove all expired sessions; return how many were removed."""
        ...
