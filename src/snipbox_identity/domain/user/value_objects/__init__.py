"""Value objects for the user domain."""

from snipbox_identity.domain.user.value_objects.email import EMAIL_PATTERN, Email

__all__ = [
    "EMAIL_PATTERN",
    "Email",
]
