"""
Admin endpoints: user list and role changes.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from modules.admin.exceptions import SelfDemotionError
from modules.admin.interfaces import IAdminService
from modules.users.exceptions import UserNotFoundError
from shared.models import SessionUser

from ..dependencies import get_admin_service
from ..forms import read_payload
from ..middleware.auth import RequireAdminPage, RequireAdminAction
from ..views import admin_page, message_page

router = APIRouter()


@router.get("", response_class=HTMLResponse)
async def list_users(
    user: SessionUser = RequireAdminPage,
    admin: IAdminService = Depends(get_admin_service),
):
    """List all users with promote/demote controls."""
    return admin_page(await admin.list_users(), user)


@router.post("/promote")
async def promote_user(
    request: Request,
    actor: SessionUser = RequireAdminAction,
    admin: IAdminService = Depends(get_admin_service),
):
    """Give the user in form field ``userId`` the admin role."""
    target_id = await _target_id(request)
    try:
        await admin.promote(actor, target_id)
    except UserNotFoundError as e:
        return message_page(e.message, status.HTTP_404_NOT_FOUND, "/admin", "Go back")
    return RedirectResponse("/admin", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/demote")
async def demote_user(
    request: Request,
    actor: SessionUser = RequireAdminAction,
    admin: IAdminService = Depends(get_admin_service),
):
    """Give the user in form field ``userId`` the user role; never the caller."""
    target_id = await _target_id(request)
    try:
        await admin.demote(actor, target_id)
    except UserNotFoundError as e:
        return message_page(e.message, status.HTTP_404_NOT_FOUND, "/admin", "Go back")
    except SelfDemotionError as e:
        return message_page(e.message, status.HTTP_400_BAD_REQUEST, "/admin", "Go back")
    return RedirectResponse("/admin", status_code=status.HTTP_303_SEE_OTHER)


async def _target_id(request: Request) -> str:
    payload = await read_payload(request)
    return str(payload.get("userId") or "").strip()
