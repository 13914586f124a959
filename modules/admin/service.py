"""
Admin service implementation.

Promote and demote accounts. Sessions that were already issued keep the
role they were issued with; the change applies from the user's next login.
"""

import logging
from typing import Optional

from modules.auth.exceptions import InsufficientPermissionsError
from modules.users.exceptions import UserNotFoundError
from modules.users.interfaces import IUserRepository
from modules.users.models import User, NewUser
from modules.users.passwords import DEFAULT_ROUNDS, hash_password_async
from shared.models import SessionUser, UserRole

from .interfaces import IAdminService
from .exceptions import SelfDemotionError

logger = logging.getLogger(__name__)


class AdminService(IAdminService):
    """Role management on top of the credential store."""

    def __init__(self, users: IUserRepository, bcrypt_rounds: int = DEFAULT_ROUNDS):
        self._users = users
        self._rounds = bcrypt_rounds

    async def list_users(self) -> list[User]:
        return self._users.list_all()

    async def promote(self, actor: SessionUser, target_id: str) -> User:
        self._require_admin(actor, "promote")

        target = self._users.get_by_id(target_id)
        if target is None:
            raise UserNotFoundError(target_id)
        if target.is_admin:
            return target

        updated = self._users.set_role(target.id, UserRole.ADMIN)
        if updated is None:
            raise UserNotFoundError(target_id)
        logger.info("Admin %s promoted user %s", actor.id, target.id)
        return updated

    async def demote(self, actor: SessionUser, target_id: str) -> User:
        self._require_admin(actor, "demote")

        target = self._users.get_by_id(target_id)
        if target is None:
            raise UserNotFoundError(target_id)
        if target.id == actor.id:
            logger.warning("Admin %s tried to demote themselves", actor.id)
            raise SelfDemotionError(actor.id)

        updated = self._users.set_role(target.id, UserRole.USER)
        if updated is None:
            raise UserNotFoundError(target_id)
        logger.info("Admin %s demoted user %s", actor.id, target.id)
        return updated

    async def bootstrap_admin(self, name: str, email: str, password: str) -> Optional[User]:
        if self._users.has_admin():
            return None

        email = email.strip().lower()
        existing = self._users.get_by_email(email)
        if existing is not None:
            logger.info("Bootstrap: promoting existing user %s to admin", existing.id)
            return self._users.set_role(existing.id, UserRole.ADMIN)

        user = self._users.create(
            NewUser(
                name=name,
                email=email,
                password_hash=await hash_password_async(password, self._rounds),
                role=UserRole.ADMIN,
            )
        )
        logger.info("Bootstrap: created admin %s", user.id)
        return user

    @staticmethod
    def _require_admin(actor: SessionUser, action: str) -> None:
        if not actor.is_admin:
            logger.warning("User %s refused %s: role %s", actor.id, action, actor.role.value)
            raise InsufficientPermissionsError(UserRole.ADMIN.value, actor.role.value)
