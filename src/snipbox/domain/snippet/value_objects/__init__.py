"""Value objects for the snippet domain."""

from snipbox.domain.snippet.value_objects.expiry_period import (
    ALLOWED_EXPIRY_DAYS,
    DEFAULT_EXPIRY_DAYS,
    ExpiryPeriod,
)
from snipbox.domain.snippet.value_objects.snippet_id import (
    SNIPPET_ID_PREFIX,
    SNIPPET_ID_RANDOM_LENGTH,
    generate_snippet_id,
)

__all__ = [
    "ALLOWED_EXPIRY_DAYS",
    "DEFAULT_EXPIRY_DAYS",
    "ExpiryPeriod",
    "SNIPPET_ID_PREFIX",
    "SNIPPET_ID_RANDOM_LENGTH",
    "generate_snippet_id",
]
