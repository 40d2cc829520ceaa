from snipbox.presentation.api.schemas.common import (
    ErrorResponse,
    FormErrorResponse,
    PageData,
)
from snipbox.presentation.api.schemas.snippets import (
    HomePage,
    SnippetCreatePage,
    SnippetCreateRequest,
    SnippetPage,
    SnippetResponse,
)
from snipbox.presentation.api.schemas.users import (
    AccountPage,
    LoginPage,
    LoginRequest,
    PasswordUpdatePage,
    PasswordUpdateRequest,
    SignupPage,
    SignupRequest,
    UserResponse,
)

__all__ = [
    "AccountPage",
    "ErrorResponse",
    "FormErrorResponse",
    "HomePage",
    "LoginPage",
    "LoginRequest",
    "PageData",
    "PasswordUpdatePage",
    "PasswordUpdateRequest",
    "SignupPage",
    "SignupRequest",
    "SnippetCreatePage",
    "SnippetCreateRequest",
    "SnippetPage",
    "SnippetResponse",
    "UserResponse",
]
