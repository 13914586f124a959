"""
Admin module.

Promote/demote accounts between the user and admin roles.

Public API:
- IAdminService: Interface for role management
- SelfDemotionError: Raised when an admin targets their own account
"""

from .interfaces import IAdminService
from .exceptions import SelfDemotionError

__all__ = [
    "IAdminService",
    "SelfDemotionError",
]
