"""
Signup and login form handlers.

Validation problems and business-rule rejections render a page with a
"Try again" link and change nothing. Storage failures propagate to the
app-level handler, which logs them and returns a generic 500.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from modules.auth.exceptions import InvalidCredentialsError
from modules.auth.interfaces import IAuthService
from modules.auth.models import SignupForm, LoginForm, parse_form
from modules.users.exceptions import EmailAlreadyRegisteredError
from shared.config import Settings
from shared.exceptions import ValidationError

from ..dependencies import get_app_settings, get_auth_service
from ..forms import read_payload, set_session_cookie
from ..views import message_page

router = APIRouter()


@router.post("/signupSubmit")
async def signup_submit(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    auth: IAuthService = Depends(get_auth_service),
):
    """
    Create an account and log it in.

    Redirects to the members page on success.
    """
    try:
        form = parse_form(SignupForm, await read_payload(request))
        session = await auth.signup(form)
    except ValidationError as e:
        return message_page(e.message, status.HTTP_400_BAD_REQUEST, "/signup")
    except EmailAlreadyRegisteredError as e:
        return message_page(e.message, status.HTTP_409_CONFLICT, "/signup")

    response = RedirectResponse("/members", status_code=status.HTTP_303_SEE_OTHER)
    set_session_cookie(response, session, settings)
    return response


@router.post("/loginSubmit")
async def login_submit(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    auth: IAuthService = Depends(get_auth_service),
):
    """
    Check credentials and start a session.

    Admins land on /admin, everyone else on /members. Unknown email and
    wrong password produce the same page.
    """
    try:
        form = parse_form(LoginForm, await read_payload(request))
        session = await auth.login(form)
    except ValidationError as e:
        return message_page(e.message, status.HTTP_400_BAD_REQUEST, "/login")
    except InvalidCredentialsError as e:
        return message_page(e.message, status.HTTP_401_UNAUTHORIZED, "/login")

    destination = "/admin" if session.user.is_admin else "/members"
    response = RedirectResponse(destination, status_code=status.HTTP_303_SEE_OTHER)
    set_session_cookie(response, session, settings)
    return response
