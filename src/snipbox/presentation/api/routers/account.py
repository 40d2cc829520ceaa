"""Account router: the current user's details and password change."""

from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

from snipbox.application.forms import PasswordUpdateForm
from snipbox.presentation.api.dependencies import AuthService, CurrentUserId, Page
from snipbox.presentation.api.schemas import (
    AccountPage,
    FormErrorResponse,
    PasswordUpdatePage,
    PasswordUpdateRequest,
    UserResponse,
)

router = APIRouter(prefix="/account")


@router.get("/view", summary="Current user's account")
async def view_account(
    user_id: CurrentUserId,
    page: Page,
    auth_service: AuthService,
) -> AccountPage:
    user = await auth_service.account(user_id)
    return AccountPage(**page.model_dump(), user=UserResponse.from_domain(user))


@router.get("/password/update", summary="Password change form")
async def password_update_form(_: CurrentUserId, page: Page) -> PasswordUpdatePage:
    return PasswordUpdatePage(**page.model_dump())


@router.post(
    "/password/update",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Change password",
    responses={
        303: {"description": "Changed; redirects to the login page"},
        422: {
            "model": FormErrorResponse,
            "description": "Field rules violated or current password incorrect",
        },
    },
)
async def update_password(
    user_id: CurrentUserId,
    request: PasswordUpdateRequest,
    auth_service: AuthService,
) -> RedirectResponse:
    form = PasswordUpdateForm(
        current_password=request.current_password,
        new_password=request.new_password,
        new_password_confirmation=request.new_password_confirmation,
    )
    location = await auth_service.change_password(user_id, form)
    return RedirectResponse(location, status_code=status.HTTP_303_SEE_OTHER)
