"""
Sessions module data models.
"""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import SessionUser


class Session(BaseModel):
    """
    Server-side session state, keyed by the opaque cookie token.

    ``expires_at`` is fixed when the session is created and is not
    extended by later requests.
    """

    token: str = Field(..., repr=False, description="Opaque token carried by the cookie")
    user: SessionUser = Field(..., description="User snapshot taken at login")
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return now >= self.expires_at
