"""Snippet identifier generation.

Identifiers are opaque: a readable prefix followed by 16 random symbols
from the URL-safe base64 alphabet (96 bits of entropy). Callers must not
parse or order them.
"""

import secrets

SNIPPET_ID_PREFIX = "snippet-"
SNIPPET_ID_RANDOM_LENGTH = 16


def generate_snippet_id() -> str:
    # 12 random bytes encode to exactly 16 URL-safe characters
    return SNIPPET_ID_PREFIX + secrets.token_urlsafe(12)
