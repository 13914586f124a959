"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
The table carries a UNIQUE constraint on email, which is the real guard
against duplicate accounts.
"""

from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.models import UserRole
from shared.repository import BaseRepository, UNIQUE_VIOLATION, is_uuid
from .exceptions import EmailAlreadyRegisteredError
from .models import User, NewUser


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for role gating.
    """

    TABLE = "users"

    def get_by_id(self, user_id: str) -> Optional[User]:
        # A malformed id can't match and would make Postgres raise 22P02.
        if not is_uuid(user_id):
            return None
        result = self._db.table(self.TABLE).select("*").eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[User]:
        result = self._db.table(self.TABLE).select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def create(self, user: NewUser) -> User:
        """
        Insert a user row.

        Raises:
            EmailAlreadyRegisteredError: On a unique violation, so a lost
                check-then-insert race looks the same as the fast-path check.
        """
        data = {
            "name": user.name,
            "email": user.email,
            "password_hash": user.password_hash,
            "role": user.role.value,
        }
        try:
            result = self._db.table(self.TABLE).insert(data).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise EmailAlreadyRegisteredError(user.email) from e
            raise
        return self._map_to_user(result.data[0])

    def list_all(self) -> list[User]:
        result = self._db.table(self.TABLE).select("*").order("created_at").execute()
        return [self._map_to_user(row) for row in result.data]

    def set_role(self, user_id: str, role: UserRole) -> Optional[User]:
        if not is_uuid(user_id):
            return None
        result = (
            self._db.table(self.TABLE)
            .update({"role": role.value})
            .eq("id", user_id)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def has_admin(self) -> bool:
        result = (
            self._db.table(self.TABLE)
            .select("id")
            .eq("role", UserRole.ADMIN.value)
            .limit(1)
            .execute()
        )
        return bool(result.data)

    def ping(self) -> None:
        self._db.table(self.TABLE).select("id").limit(1).execute()

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            password_hash=data["password_hash"],
            role=UserRole(data.get("role") or UserRole.USER.value),
            created_at=data.get("created_at"),
        )
