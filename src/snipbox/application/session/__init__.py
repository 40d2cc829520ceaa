"""Session management."""

from snipbox.application.session.session_manager import (
    AUTHENTICATED_USER_ID_KEY,
    DEFAULT_LIFETIME,
    FLASH_KEY,
    REDIRECT_KEY,
    Session,
    SessionManager,
    SessionStatus,
)

__all__ = [
    "AUTHENTICATED_USER_ID_KEY",
    "DEFAULT_LIFETIME",
    "FLASH_KEY",
    "REDIRECT_KEY",
    "Session",
    "SessionManager",
    "SessionStatus",
]
