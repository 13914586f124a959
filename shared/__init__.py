"""
Shared infrastructure for Turnstile backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- log: Logging setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import create_supabase_client
from .exceptions import (
    TurnstileError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)
from .models import SessionUser, UserRole

__all__ = [
    "Settings",
    "get_settings",
    "create_supabase_client",
    "TurnstileError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "SessionUser",
    "UserRole",
]
