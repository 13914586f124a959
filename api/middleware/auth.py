"""
Session authentication and role gating.

Reads the session cookie, resolves it to a session, and enforces per-route
requirements. Gate failures are raised as exceptions; the handlers in
api/app.py turn them into a redirect (not logged in) or a 403 page
(logged in but not permitted).
"""

from typing import Optional
from fastapi import Depends, Request

from modules.auth.exceptions import InsufficientPermissionsError, LoginRequiredError
from modules.sessions.interfaces import ISessionManager
from modules.sessions.models import Session
from shared.config import Settings
from shared.models import SessionUser, UserRole

from ..dependencies import get_app_settings, get_session_manager


async def get_optional_session(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    sessions: ISessionManager = Depends(get_session_manager),
) -> Optional[Session]:
    """
    Dependency that resolves the session cookie, if any.

    Use this for pages that work with or without a login.

    Usage:
        @router.get("/")
        async def index(session: Optional[Session] = Depends(get_optional_session)):
            if session:
                return f"Hello, {session.user.name}"
    """
    token = request.cookies.get(settings.session_cookie_name)
    return await sessions.read(token)


async def require_member(
    session: Optional[Session] = Depends(get_optional_session),
) -> SessionUser:
    """
    Dependency that requires a session; anonymous requests go to the landing page.
    """
    if session is None:
        raise LoginRequiredError(redirect_to="/")
    return session.user


async def require_admin_page(
    session: Optional[Session] = Depends(get_optional_session),
) -> SessionUser:
    """
    Dependency for admin pages.

    Anonymous requests are sent to the login form; logged-in non-admins
    get a 403 so they can tell "not logged in" from "not allowed".
    """
    if session is None:
        raise LoginRequiredError(redirect_to="/login")
    _check_admin(session.user)
    return session.user


async def require_admin_action(
    session: Optional[Session] = Depends(get_optional_session),
) -> SessionUser:
    """
    Dependency for admin form posts: anything but an admin session is a 403.
    """
    if session is None:
        raise InsufficientPermissionsError(UserRole.ADMIN.value, "anonymous")
    _check_admin(session.user)
    return session.user


def _check_admin(user: SessionUser) -> None:
    if not user.is_admin:
        raise InsufficientPermissionsError(UserRole.ADMIN.value, user.role.value)


# Type aliases for cleaner route definitions
OptionalSession = Depends(get_optional_session)
RequireMember = Depends(require_member)
RequireAdminPage = Depends(require_admin_page)
RequireAdminAction = Depends(require_admin_action)
