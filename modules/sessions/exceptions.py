"""
Sessions module exceptions.
"""

from shared.exceptions import ExternalServiceError


class SessionDestroyError(ExternalServiceError):
    """Raised when a session could not be deleted, so logout did not happen."""

    def __init__(self, message: str = "Couldn't log you out."):
        super().__init__(message, service="session_store", code="SESSION_DESTROY_FAILED")
