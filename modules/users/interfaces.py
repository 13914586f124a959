"""
Users module interface.

Services depend on IUserRepository, not the Supabase implementation.
This keeps them testable against in-memory fakes.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import UserRole
from .models import User, NewUser


@runtime_checkable
class IUserRepository(Protocol):
    """
    Interface for the credential store.

    Implementations must enforce email uniqueness themselves; callers may
    pre-check with get_by_email but must not rely on it.
    """

    def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Get a user by ID.

        Returns:
            User if found, None otherwise (including malformed IDs)
        """
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Get a user by normalized email.

        Returns:
            User if found, None otherwise
        """
        ...

    def create(self, user: NewUser) -> User:
        """
        Insert a user.

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken
        """
        ...

    def list_all(self) -> list[User]:
        """List all users, oldest first."""
        ...

    def set_role(self, user_id: str, role: UserRole) -> Optional[User]:
        """
        Set a user's role.

        Returns:
            The updated user, or None if no such user exists
        """
        ...

    def has_admin(self) -> bool:
        """Return True if at least one admin account exists."""
        ...

    def ping(self) -> None:
        """
        Check that storage is reachable.

        Raises:
            Exception: Whatever the storage client raises
        """
        ...
