"""
Users module data models.

These models define the stored account record and the public view of it
used by the admin pages.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import SessionUser, UserRole


class User(BaseModel):
    """
    A stored account.

    Only ``role`` changes after creation; name, email and password hash
    are fixed at signup.
    """

    id: str = Field(..., description="User ID (UUID)")
    name: str = Field(..., max_length=30, description="Display name")
    email: str = Field(..., description="Normalized (lowercase) email, unique")
    password_hash: str = Field(..., repr=False, description="bcrypt hash")
    role: UserRole = Field(default=UserRole.USER)
    created_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def to_session_user(self) -> SessionUser:
        """Take the point-in-time snapshot stored on a session."""
        return SessionUser(id=self.id, name=self.name, email=self.email, role=self.role)


class NewUser(BaseModel):
    """Fields required to insert a user."""

    name: str = Field(..., min_length=1, max_length=30)
    email: str
    password_hash: str = Field(..., repr=False)
    role: UserRole = UserRole.USER
