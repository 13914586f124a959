"""
Request payload helpers.

Form posts come from the HTML pages; JSON bodies are accepted too so the
same routes can be scripted.
"""

import json
from typing import Any

from fastapi import Request, Response

from modules.sessions.models import Session
from shared.config import Settings
from shared.exceptions import ValidationError


async def read_payload(request: Request) -> dict[str, Any]:
    """
    Read a url-encoded, multipart or JSON body into a plain dict.

    Raises:
        ValidationError: If a JSON body is malformed or not an object
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except json.JSONDecodeError as e:
            raise ValidationError("Request body is not valid JSON", code="INVALID_JSON") from e
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object", code="INVALID_JSON")
        return payload
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def set_session_cookie(response: Response, session: Session, settings: Settings) -> None:
    """Attach the session token as an httpOnly cookie that expires with the session."""
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.token,
        max_age=settings.session_ttl_seconds,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite=settings.session_cookie_samesite,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite=settings.session_cookie_samesite,
    )
