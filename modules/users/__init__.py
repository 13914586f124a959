"""
Users module (credential store).

Public API:
- IUserRepository: Interface for user storage
- User, NewUser: Stored account models
- hash_password / verify_password: bcrypt helpers
- Users exceptions: UserNotFoundError, EmailAlreadyRegisteredError
"""

from .interfaces import IUserRepository
from .models import User, NewUser
from .passwords import hash_password, verify_password
from .exceptions import UserNotFoundError, EmailAlreadyRegisteredError

__all__ = [
    "IUserRepository",
    "User",
    "NewUser",
    "hash_password",
    "verify_password",
    "UserNotFoundError",
    "EmailAlreadyRegisteredError",
]
