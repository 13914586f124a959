"""
Session repository for database access.

Sessions live in the same database as users, keyed by token. The user
snapshot is stored as JSON so it stays a copy rather than a join.
"""

from datetime import datetime
from typing import Optional, Any

from shared.models import SessionUser
from shared.repository import BaseRepository
from .models import Session


class SessionRepository(BaseRepository[Session]):
    """Repository for session records."""

    TABLE = "sessions"

    def insert(self, session: Session) -> None:
        data = {
            "token": session.token,
            "user_id": session.user.id,
            "user_snapshot": session.user.model_dump(mode="json"),
            "created_at": session.created_at.isoformat(),
            "expires_at": session.expires_at.isoformat(),
        }
        self._db.table(self.TABLE).insert(data).execute()

    def get(self, token: str) -> Optional[Session]:
        result = self._db.table(self.TABLE).select("*").eq("token", token).execute()
        if not result.data:
            return None
        return self._map_to_session(result.data[0])

    def delete(self, token: str) -> None:
        self._db.table(self.TABLE).delete().eq("token", token).execute()

    def delete_expired(self, now: datetime) -> int:
        result = (
            self._db.table(self.TABLE)
            .delete()
            .lte("expires_at", now.isoformat())
            .execute()
        )
        return len(result.data or [])

    def _map_to_session(self, data: dict[str, Any]) -> Session:
        """Map database row to Session model."""
        return Session(
            token=data["token"],
            user=SessionUser(**data["user_snapshot"]),
            created_at=data["created_at"],
            expires_at=data["expires_at"],
        )
