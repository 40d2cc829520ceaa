"""FastAPI dependency injection for the snipbox API.

Provides dependencies for:
- The application context and per-request database sessions
- The HTTP session loaded by SessionMiddleware
- Repositories and application services
- The authenticated user gate
"""

import logging
from typing import Annotated, AsyncGenerator
from uuid import UUID

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from snipbox.application.services import AuthenticationService, SnippetService
from snipbox.application.session import FLASH_KEY, Session
from snipbox.domain.snippet import SnippetRepository
from snipbox.infrastructure.persistence.sqlalchemy import SnippetRepositorySQLAlchemy
from snipbox.presentation.api.context import AppContext
from snipbox.presentation.api.schemas import PageData
from snipbox_identity.domain.user import UserRepository
from snipbox_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)


def get_context(request: Request) -> AppContext:
    return request.app.state.context


Context = Annotated[AppContext, Depends(get_context)]


async def get_db_session(context: Context) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with context.session_maker() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_http_session(request: Request) -> Session:
    session = getattr(request.state, "session", None)
    if session is None:
        msg = "SessionMiddleware is not installed"
        raise RuntimeError(msg)
    return session


HttpSession = Annotated[Session, Depends(get_http_session)]


# -----------------------------------------------------------------------------
# Repositories
# -----------------------------------------------------------------------------


def get_user_repository(db: DBSession, context: Context) -> UserRepository:
    return UserRepositorySQLAlchemy(
        db,
        context.password_service,
        timeout=context.db_timeout,
    )


def get_snippet_repository(db: DBSession, context: Context) -> SnippetRepository:
    return SnippetRepositorySQLAlchemy(db, clock=context.clock, timeout=context.db_timeout)


Users = Annotated[UserRepository, Depends(get_user_repository)]
Snippets = Annotated[SnippetRepository, Depends(get_snippet_repository)]


# -----------------------------------------------------------------------------
# Application Services
# -----------------------------------------------------------------------------


def get_auth_service(
    users: Users,
    session: HttpSession,
    context: Context,
) -> AuthenticationService:
    return AuthenticationService(users, session, context.session_manager)


def get_snippet_service(
    snippets: Snippets,
    session: HttpSession,
    context: Context,
) -> SnippetService:
    return SnippetService(
        snippets,
        session,
        latest_limit=context.settings.latest_snippets_limit,
    )


AuthService = Annotated[AuthenticationService, Depends(get_auth_service)]
SnippetSvc = Annotated[SnippetService, Depends(get_snippet_service)]


# -----------------------------------------------------------------------------
# Authentication Gate & Page Data
# -----------------------------------------------------------------------------


async def require_user_id(request: Request, auth_service: AuthService) -> UUID:
    """
    Gate for identity-gated routes.

    Anonymous sessions get the requested path stored as the post-login
    redirect and are sent to the login page.

    Raises
    ------
    LoginRequiredError
        If the session is not authenticated
    """
    return await auth_service.require_user(request.url.path)


CurrentUserId = Annotated[UUID, Depends(require_user_id)]


async def get_page_data(session: HttpSession, auth_service: AuthService) -> PageData:
    """Consume the flash message and report the authentication state."""
    return PageData(
        flash=session.pop(FLASH_KEY),
        is_authenticated=await auth_service.is_authenticated(),
    )


Page = Annotated[PageData, Depends(get_page_data)]
