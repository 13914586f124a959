"""
Authentication module interface.

The API layer depends on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from modules.sessions.models import Session
from .models import SignupForm, LoginForm


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for signup and login.
    """

    async def signup(self, form: SignupForm) -> Session:
        """
        Create an account and start a session for it.

        Args:
            form: Validated signup fields

        Returns:
            The new session (role "user")

        Raises:
            EmailAlreadyRegisteredError: If the email already has an account
        """
        ...

    async def login(self, form: LoginForm) -> Session:
        """
        Check credentials and start a session.

        Args:
            form: Validated login fields

        Returns:
            A new session holding a snapshot of the stored user

        Raises:
            InvalidCredentialsError: For an unknown email or wrong password
        """
        ...
