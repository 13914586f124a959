"""
Session manager implementation.

Maps opaque cookie tokens to session state stored in the database, with a
fixed time-to-live counted from creation.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from shared.models import SessionUser

from .interfaces import ISessionManager, ISessionRepository
from .models import Session
from .exceptions import SessionDestroyError

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60 * 60


class SessionManager(ISessionManager):
    """
    Session lifecycle on top of a session repository.

    Expired sessions are removed lazily when read, and in bulk by
    purge_expired() at startup.
    """

    def __init__(
        self,
        repository: ISessionRepository,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
    ):
        self._repository = repository
        self._ttl = timedelta(seconds=ttl_seconds)

    @property
    def ttl_seconds(self) -> int:
        return int(self._ttl.total_seconds())

    async def create(self, user: SessionUser) -> Session:
        now = datetime.now(timezone.utc)
        session = Session(
            token=secrets.token_urlsafe(32),
            user=user,
            created_at=now,
            expires_at=now + self._ttl,
        )
        self._repository.insert(session)
        logger.info("Session issued for user %s", user.id)
        return session

    async def read(self, token: Optional[str]) -> Optional[Session]:
        if not token:
            return None

        session = self._repository.get(token)
        if session is None:
            return None

        if session.is_expired():
            self._repository.delete(token)
            logger.debug("Dropped expired session for user %s", session.user.id)
            return None

        return session

    async def destroy(self, token: str) -> None:
        try:
            self._repository.delete(token)
        except Exception as e:
            logger.exception("Failed to destroy session")
            raise SessionDestroyError() from e

    async def purge_expired(self) -> int:
        removed = self._repository.delete_expired(datetime.now(timezone.utc))
        if removed:
            logger.info("Purged %d expired sessions", removed)
        return removed
