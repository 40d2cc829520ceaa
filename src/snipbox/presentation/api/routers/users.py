"""User router: signup, login and logout."""

from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

from snipbox.application.forms import UserLoginForm, UserSignupForm
from snipbox.presentation.api.dependencies import AuthService, Page
from snipbox.presentation.api.schemas import (
    FormErrorResponse,
    LoginPage,
    LoginRequest,
    SignupPage,
    SignupRequest,
)

router = APIRouter(prefix="/user")


@router.get("/signup", summary="Signup form")
async def signup_form(page: Page) -> SignupPage:
    return SignupPage(**page.model_dump())


@router.post(
    "/signup",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Register a new user",
    responses={
        303: {"description": "Registered; redirects to the login page"},
        422: {
            "model": FormErrorResponse,
            "description": "Field rules violated or email already in use",
        },
    },
)
async def signup(request: SignupRequest, auth_service: AuthService) -> RedirectResponse:
    form = UserSignupForm(
        name=request.name,
        email=request.email,
        password=request.password,
    )
    location = await auth_service.signup(form)
    return RedirectResponse(location, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/login", summary="Login form")
async def login_form(page: Page) -> LoginPage:
    return LoginPage(**page.model_dump())


@router.post(
    "/login",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Authenticate user",
    responses={
        303: {"description": "Logged in; redirects to the pending target or default"},
        422: {
            "model": FormErrorResponse,
            "description": "Field rules violated or credentials incorrect",
        },
    },
)
async def login(request: LoginRequest, auth_service: AuthService) -> RedirectResponse:
    """
    Authenticate with email and password.

    The session token is renewed before the user id is stored in it.
    """
    form = UserLoginForm(email=request.email, password=request.password)
    location = await auth_service.login(form)
    return RedirectResponse(location, status_code=status.HTTP_303_SEE_OTHER)


@router.post(
    "/logout",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="End the authenticated session",
)
async def logout(auth_service: AuthService) -> RedirectResponse:
    location = await auth_service.logout()
    return RedirectResponse(location, status_code=status.HTTP_303_SEE_OTHER)
