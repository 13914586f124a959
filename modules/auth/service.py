"""
Authentication service implementation.

Signup and login on top of the credential store and the session manager.
"""

import logging
from typing import Optional

from modules.sessions.interfaces import ISessionManager
from modules.sessions.models import Session
from modules.users.exceptions import EmailAlreadyRegisteredError
from modules.users.interfaces import IUserRepository
from modules.users.models import NewUser
from modules.users.passwords import (
    DEFAULT_ROUNDS,
    hash_password_async,
    verify_password_async,
)
from shared.models import UserRole

from .interfaces import IAuthService
from .models import SignupForm, LoginForm
from .exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Both signup and login end by issuing a session that holds a snapshot
    of the user record as it was at that moment.
    """

    def __init__(
        self,
        users: IUserRepository,
        sessions: ISessionManager,
        bcrypt_rounds: int = DEFAULT_ROUNDS,
    ):
        self._users = users
        self._sessions = sessions
        self._rounds = bcrypt_rounds
        self._dummy_hash: Optional[str] = None

    async def signup(self, form: SignupForm) -> Session:
        email = form.normalized_email

        # Fast path only; the UNIQUE constraint on users.email is what
        # actually stops a concurrent duplicate.
        if self._users.get_by_email(email) is not None:
            raise EmailAlreadyRegisteredError(email)

        password_hash = await hash_password_async(form.password, self._rounds)
        user = self._users.create(
            NewUser(
                name=form.name,
                email=email,
                password_hash=password_hash,
                role=UserRole.USER,
            )
        )
        logger.info("Registered user %s", user.id)

        return await self._sessions.create(user.to_session_user())

    async def login(self, form: LoginForm) -> Session:
        user = self._users.get_by_email(form.normalized_email)

        if user is None:
            # Same bcrypt cost as a real check, so timing doesn't reveal
            # whether the account exists.
            await verify_password_async(form.password, await self._get_dummy_hash())
            raise InvalidCredentialsError()

        if not await verify_password_async(form.password, user.password_hash):
            raise InvalidCredentialsError()

        logger.info("User %s logged in", user.id)
        return await self._sessions.create(user.to_session_user())

    async def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = await hash_password_async("not-a-real-password", self._rounds)
        return self._dummy_hash
