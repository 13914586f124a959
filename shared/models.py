"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from pydantic import BaseModel, Field


class UserRole(str, Enum):
    """The two account roles. Admin is strictly above user."""

    USER = "user"
    ADMIN = "admin"


class SessionUser(BaseModel):
    """
    Snapshot of a user taken when a session is issued.

    This is a copy, not a live reference: promoting or demoting the user
    afterwards does not change sessions that already exist.
    """

    id: str = Field(..., description="User ID (UUID)")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Normalized (lowercase) email")
    role: UserRole = Field(default=UserRole.USER, description="Role at login time")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
