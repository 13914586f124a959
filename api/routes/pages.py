"""
Landing, form and members pages, plus logout.
"""

import logging
import random
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from modules.sessions.exceptions import SessionDestroyError
from modules.sessions.interfaces import ISessionManager
from modules.sessions.models import Session
from shared.config import Settings
from shared.models import SessionUser

from ..dependencies import get_app_settings, get_session_manager
from ..forms import clear_session_cookie
from ..middleware.auth import OptionalSession, RequireMember
from ..views import index_page, login_page, members_page, message_page, signup_page

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(session: Optional[Session] = OptionalSession):
    return index_page(session.user if session else None)


@router.get("/signup", response_class=HTMLResponse)
async def signup():
    return signup_page()


@router.get("/login", response_class=HTMLResponse)
async def login():
    return login_page()


@router.get("/members", response_class=HTMLResponse)
async def members(
    user: SessionUser = RequireMember,
    settings: Settings = Depends(get_app_settings),
):
    """Members-only page with a randomly chosen picture."""
    image = random.choice(settings.member_images) if settings.member_images else ""
    return members_page(user, image)


@router.get("/logout")
async def logout(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    sessions: ISessionManager = Depends(get_session_manager),
):
    """
    Destroy the current session.

    If the store can't delete it the user is told so and the cookie is
    left alone.
    """
    token = request.cookies.get(settings.session_cookie_name)
    if token:
        try:
            await sessions.destroy(token)
        except SessionDestroyError:
            return message_page(
                "An error has occurred. Couldn't log you out.",
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        logger.info("Session closed by logout")

    response = RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
    clear_session_cookie(response, settings)
    return response
