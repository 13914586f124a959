"""
Authentication module exceptions.

These exceptions are raised by the auth flow and the authorization gate
and are turned into pages by the API error handlers.
"""

from shared.exceptions import AuthenticationError, AuthorizationError

INVALID_CREDENTIALS_MESSAGE = "Invalid email/password combination"


class InvalidCredentialsError(AuthenticationError):
    """
    Raised for an unknown email or a wrong password.

    Both cases use this one error so the response never reveals whether
    an account exists.
    """

    def __init__(self):
        super().__init__(INVALID_CREDENTIALS_MESSAGE, code="INVALID_CREDENTIALS")


class LoginRequiredError(AuthenticationError):
    """Raised when a route needs a session and the request has none."""

    def __init__(self, redirect_to: str = "/"):
        super().__init__(
            "Authentication required",
            code="LOGIN_REQUIRED",
            details={"redirect_to": redirect_to},
        )
        self.redirect_to = redirect_to


class InsufficientPermissionsError(AuthorizationError):
    """Raised when user lacks required permissions."""

    def __init__(self, required_role: str, user_role: str):
        super().__init__(
            "You are not authorized to view this page",
            code="INSUFFICIENT_PERMISSIONS",
            details={"required_role": required_role, "user_role": user_role},
        )
