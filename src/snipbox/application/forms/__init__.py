"""Form structures and field rules."""

from snipbox.application.forms.forms import (
    PasswordUpdateForm,
    SnippetCreateForm,
    UserLoginForm,
    UserSignupForm,
)
from snipbox.application.forms.validator import (
    FormValidator,
    matches,
    max_chars,
    min_chars,
    not_blank,
    permitted_value,
)

__all__ = [
    "FormValidator",
    "PasswordUpdateForm",
    "SnippetCreateForm",
    "UserLoginForm",
    "UserSignupForm",
    "matches",
    "max_chars",
    "min_chars",
    "not_blank",
    "permitted_value",
]
