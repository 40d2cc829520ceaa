"""Application services."""

from snipbox.application.services.auth_service import AuthenticationService
from snipbox.application.services.snippet_service import SnippetService

__all__ = ["AuthenticationService", "SnippetService"]
