"""
Authentication module.

Handles signup, login, and the errors raised by the authorization gate.

Public API:
- IAuthService: Interface for auth operations
- SignupForm, LoginForm, parse_form: Input validation
- Auth exceptions: InvalidCredentialsError, LoginRequiredError, etc.
"""

from .interfaces import IAuthService
from .models import SignupForm, LoginForm, parse_form
from .exceptions import (
    INVALID_CREDENTIALS_MESSAGE,
    InvalidCredentialsError,
    LoginRequiredError,
    InsufficientPermissionsError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "SignupForm",
    "LoginForm",
    "parse_form",
    # Exceptions
    "INVALID_CREDENTIALS_MESSAGE",
    "InvalidCredentialsError",
    "LoginRequiredError",
    "InsufficientPermissionsError",
]
