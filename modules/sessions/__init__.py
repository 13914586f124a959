"""
Sessions module.

Server-side sessions keyed by an opaque cookie token.

Public API:
- ISessionManager, ISessionRepository: Interfaces
- Session: Session record with user snapshot
- SessionDestroyError: Raised when logout could not complete
"""

from .interfaces import ISessionManager, ISessionRepository
from .models import Session
from .exceptions import SessionDestroyError

__all__ = [
    "ISessionManager",
    "ISessionRepository",
    "Session",
    "SessionDestroyError",
]
