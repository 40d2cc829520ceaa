"""Typed forms for every state-changing request.

Each form owns a FormValidator. ``validate`` runs all rules for the form
and returns the validator for a single inspection.
"""

from dataclasses import dataclass, field
from typing import Any

from snipbox.application.forms.validator import (
    FormValidator,
    matches,
    max_chars,
    min_chars,
    not_blank,
    permitted_value,
)
from snipbox.domain.snippet import ALLOWED_EXPIRY_DAYS, DEFAULT_EXPIRY_DAYS
from snipbox.domain.snippet.exceptions import allowed_expiry_message
from snipbox_identity.domain.user import EMAIL_PATTERN

BLANK = "This field cannot be blank"
INVALID_EMAIL = "This field must be a valid email address"
PASSWORD_MIN_LENGTH = 8
# Width of the name and email columns
NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 255
TITLE_MAX_LENGTH = 100


def _too_long(limit: int) -> str:
    return f"This field cannot exceed {limit} characters"


@dataclass
class SnippetCreateForm:
    title: str = ""
    content: str = ""
    expires: int = DEFAULT_EXPIRY_DAYS
    validator: FormValidator = field(default_factory=FormValidator, repr=False)

    def validate(self) -> FormValidator:
        v = self.validator
        v.check_field(not_blank(self.title), "title", BLANK)
        v.check_field(
            max_chars(self.title, TITLE_MAX_LENGTH),
            "title",
            _too_long(TITLE_MAX_LENGTH),
        )
        v.check_field(not_blank(self.content), "content", BLANK)
        v.check_field(
            permitted_value(self.expires, *ALLOWED_EXPIRY_DAYS),
            "expires",
            allowed_expiry_message(ALLOWED_EXPIRY_DAYS),
        )
        return v

    def values(self) -> dict[str, Any]:
        return {"title": self.title, "content": self.content, "expires": self.expires}


@dataclass
class UserSignupForm:
    name: str = ""
    email: str = ""
    password: str = field(default="", repr=False)
    validator: FormValidator = field(default_factory=FormValidator, repr=False)

    def validate(self) -> FormValidator:
        v = self.validator
        v.check_field(not_blank(self.name), "name", BLANK)
        v.check_field(max_chars(self.name, NAME_MAX_LENGTH), "name", _too_long(NAME_MAX_LENGTH))
        v.check_field(not_blank(self.email), "email", BLANK)
        v.check_field(matches(self.email.strip(), EMAIL_PATTERN), "email", INVALID_EMAIL)
        v.check_field(
            max_chars(self.email.strip(), EMAIL_MAX_LENGTH),
            "email",
            _too_long(EMAIL_MAX_LENGTH),
        )
        v.check_field(not_blank(self.password), "password", BLANK)
        v.check_field(
            min_chars(self.password, PASSWORD_MIN_LENGTH),
            "password",
            f"This field must be at least {PASSWORD_MIN_LENGTH} characters long",
        )
        return v

    def values(self) -> dict[str, Any]:
        return {"name": self.name, "email": self.email}


@dataclass
class UserLoginForm:
    email: str = ""
    password: str = field(default="", repr=False)
    validator: FormValidator = field(default_factory=FormValidator, repr=False)

    def validate(self) -> FormValidator:
        v = self.validator
        v.check_field(not_blank(self.email), "email", BLANK)
        v.check_field(matches(self.email.strip(), EMAIL_PATTERN), "email", INVALID_EMAIL)
        v.check_field(
            max_chars(self.email.strip(), EMAIL_MAX_LENGTH),
            "email",
            _too_long(EMAIL_MAX_LENGTH),
        )
        v.check_field(not_blank(self.password), "password", BLANK)
        return v

    def values(self) -> dict[str, Any]:
        return {"email": self.email}


@dataclass
class PasswordUpdateForm:
    current_password: str = field(default="", repr=False)
    new_password: str = field(default="", repr=False)
    new_password_confirmation: str = field(default="", repr=False)
    validator: FormValidator = field(default_factory=FormValidator, repr=False)

    def validate(self) -> FormValidator:
        v = self.validator
        v.check_field(not_blank(self.current_password), "currentPassword", BLANK)
        v.check_field(not_blank(self.new_password), "newPassword", BLANK)
        v.check_field(
            not_blank(self.new_password_confirmation),
            "newPasswordConfirmation",
            BLANK,
        )
        v.check_field(
            min_chars(self.new_password, PASSWORD_MIN_LENGTH),
            "newPassword",
            f"This field must be at least {PASSWORD_MIN_LENGTH} characters long",
        )

        # Flag both fields so either input can be highlighted
        same = self.new_password == self.new_password_confirmation
        mismatch = "New password and password confirmation need to be the same value"
        v.check_field(same, "newPassword", mismatch)
        v.check_field(same, "newPasswordConfirmation", mismatch)
        return v

    def values(self) -> dict[str, Any]:
        return {}
