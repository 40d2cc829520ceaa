"""HTTP middleware that loads and saves the server-side session."""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from snipbox.application.session import SessionManager, SessionStatus
from snipbox_config.settings import Settings

logger = logging.getLogger(__name__)


class SessionMiddleware(BaseHTTPMiddleware):
    """Attach the session to ``request.state.session`` for each request.

    After the handler ran, a modified session is committed to the store and
    its token written to the cookie. A write dropped because the token was
    renewed by a concurrent request leaves the cookie untouched.
    The cookie is HttpOnly; Secure and SameSite come from settings.
    """

    def __init__(
        self,
        app: ASGIApp,
        session_manager: SessionManager,
        settings: Settings,
    ) -> None:
        super().__init__(app)
        self._manager = session_manager
        self._cookie_name = settings.session_cookie_name
        self._secure = settings.session_cookie_secure
        self._samesite = settings.session_cookie_samesite

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        session = await self._manager.load(request.cookies.get(self._cookie_name))
        request.state.session = session

        response = await call_next(request)

        if session.status is not SessionStatus.MODIFIED:
            return response

        saved = await self._manager.commit(session)
        if saved is not None:
            token, expiry = saved
            response.set_cookie(
                key=self._cookie_name,
                value=token,
                expires=expiry,
                path="/",
                httponly=True,
                secure=self._secure,
                samesite=self._samesite,
            )

        return response
