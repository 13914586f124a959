"""
Admin module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from modules.users.models import User
from shared.models import SessionUser


@runtime_checkable
class IAdminService(Protocol):
    """
    Interface for role management.

    Every mutating operation takes the acting user's session snapshot and
    checks it itself, independent of any route-level gate.
    """

    async def list_users(self) -> list[User]:
        """List every account, oldest first."""
        ...

    async def promote(self, actor: SessionUser, target_id: str) -> User:
        """
        Give the target the admin role. Promoting an admin is a no-op.

        Raises:
            InsufficientPermissionsError: If actor is not an admin
            UserNotFoundError: If target_id matches no user
        """
        ...

    async def demote(self, actor: SessionUser, target_id: str) -> User:
        """
        Give the target the user role.

        Raises:
            InsufficientPermissionsError: If actor is not an admin
            UserNotFoundError: If target_id matches no user
            SelfDemotionError: If target_id is the actor's own account
        """
        ...

    async def bootstrap_admin(self, name: str, email: str, password: str) -> Optional[User]:
        """
        Make sure an admin exists.

        Returns:
            The promoted or created admin, or None if one already existed
        """
        ...
