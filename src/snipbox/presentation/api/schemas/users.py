"""User and account schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from snipbox.presentation.api.schemas.common import PageData
from snipbox_identity.domain.user import User


class SignupRequest(BaseModel):
    """Request schema for user signup."""

    name: str = ""
    email: str = ""
    password: str = ""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Alice",
                "email": "alice@example.com",
                "password": "pa$$word",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: str = ""
    password: str = ""


class PasswordUpdateRequest(BaseModel):
    """Request schema for changing the current user's password."""

    current_password: str = Field(default="", alias="currentPassword")
    new_password: str = Field(default="", alias="newPassword")
    new_password_confirmation: str = Field(default="", alias="newPasswordConfirmation")

    model_config = ConfigDict(populate_by_name=True)


class UserResponse(BaseModel):
    """User without any credential data."""

    id: UUID
    name: str
    email: str
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
        )


class SignupForm(BaseModel):
    name: str = ""
    email: str = ""


class LoginForm(BaseModel):
    email: str = ""


class SignupPage(PageData):
    form: SignupForm = Field(default_factory=SignupForm)


class LoginPage(PageData):
    form: LoginForm = Field(default_factory=LoginForm)


class AccountPage(PageData):
    user: UserResponse


class PasswordUpdatePage(PageData):
    """Password fields are never echoed back, so the form is always empty."""
