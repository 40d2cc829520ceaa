"""Paths the application redirects to."""

HOME_PATH = "/"
LOGIN_PATH = "/user/login"
SNIPPET_CREATE_PATH = "/snippet/create"

# Where a successful login lands when no redirect target is pending
DEFAULT_LOGIN_REDIRECT = SNIPPET_CREATE_PATH


def snippet_view_path(snippet_id: str) -> str:
    return f"/snippet/view/{snippet_id}"
