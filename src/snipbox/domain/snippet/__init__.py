"""Snippet domain.

Snippets are short-lived, immutable text records. A snippet is live while
the current time is before its expiry timestamp.
"""

from snipbox.domain.snippet.aggregates import Snippet
from snipbox.domain.snippet.exceptions import InvalidExpiryError, SnippetNotFoundError
from snipbox.domain.snippet.repositories import DEFAULT_LATEST_LIMIT, SnippetRepository
from snipbox.domain.snippet.value_objects import (
    ALLOWED_EXPIRY_DAYS,
    DEFAULT_EXPIRY_DAYS,
    SNIPPET_ID_PREFIX,
    ExpiryPeriod,
    generate_snippet_id,
)

__all__ = [
    "ALLOWED_EXPIRY_DAYS",
    "DEFAULT_EXPIRY_DAYS",
    "DEFAULT_LATEST_LIMIT",
    "ExpiryPeriod",
    "InvalidExpiryError",
    "SNIPPET_ID_PREFIX",
    "Snippet",
    "SnippetNotFoundError",
    "SnippetRepository",
    "generate_snippet_id",
]
