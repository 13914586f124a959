"""
Admin module exceptions.
"""

from shared.exceptions import ValidationError


class SelfDemotionError(ValidationError):
    """Raised when an admin tries to demote their own account."""

    def __init__(self, user_id: str):
        super().__init__(
            "You cannot demote yourself.",
            code="SELF_DEMOTION",
            details={"user_id": user_id},
        )
