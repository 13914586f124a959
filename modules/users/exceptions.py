"""
Users module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when a user ID does not resolve to a stored user."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when signing up with an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "Email already registered.",
            code="EMAIL_ALREADY_REGISTERED",
            details={"email": email},
        )
