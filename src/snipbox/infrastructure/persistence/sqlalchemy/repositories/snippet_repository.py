"""SQLAlchemy implementation of SnippetRepository."""

import logging

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from snipbox.domain.shared.exceptions import RepositoryFailureError
from snipbox.domain.shared.time import Clock, ensure_tz_aware, utc_now
from snipbox.domain.snippet import (
    DEFAULT_LATEST_LIMIT,
    Snippet,
    SnippetNotFoundError,
    SnippetRepository,
)
from snipbox.infrastructure.persistence.sqlalchemy.guard import run_guarded
from snipbox.infrastructure.persistence.sqlalchemy.models import SnippetModel

logger = logging.getLogger(__name__)


class SnippetRepositorySQLAlchemy(SnippetRepository):
    """SQLAlchemy implementation of the SnippetRepository interface.

    Visibility is decided with the injected clock rather than the database
    clock, so every read in a request sees the same "now".
    """

    def __init__(
        self,
        session: AsyncSession,
        clock: Clock = utc_now,
        timeout: float | None = None,
    ) -> None:
        self._session = session
        self._clock = clock
        self._timeout = timeout

    async def insert(self, title: str, content: str, expires_in_days: int) -> str:
        snippet = Snippet.create(title, content, expires_in_days, now=self._clock())
        stmt = insert(SnippetModel).values(
            id=snippet.id,
            title=snippet.title,
            content=snippet.content,
            created_at=snippet.created_at,
            expires_at=snippet.expires_at,
        )

        async def _insert() -> None:
            result = await self._session.execute(stmt)
            if result.rowcount != 1:
                await self._session.rollback()
                raise RepositoryFailureError(
                    "snippets.insert",
                    f"expected 1 row, affected {result.rowcount}",
                )
            await self._session.commit()

        await run_guarded("snippets.insert", _insert(), self._timeout)
        logger.info("Created snippet: %s (expires: %s)", snippet.id, snippet.expires_at)
        return snippet.id

    async def get(self, snippet_id: str) -> Snippet:
        stmt = select(SnippetModel).where(
            SnippetModel.id == snippet_id,
            SnippetModel.expires_at > self._clock(),
        )
        result = await run_guarded(
            "snippets.get",
            self._session.execute(stmt),
            self._timeout,
        )
        model = result.scalar_one_or_none()

        if model is None:
            raise SnippetNotFoundError(snippet_id)

        return self._map_to_domain(model)

    async def latest(self, limit: int = DEFAULT_LATEST_LIMIT) -> list[Snippet]:
        if limit <= 0:
            return []

        stmt = (
            select(SnippetModel)
            .where(SnippetModel.expires_at > self._clock())
            .order_by(SnippetModel.created_at.desc(), SnippetModel.id.desc())
            .limit(limit)
        )
        result = await run_guarded(
            "snippets.latest",
            self._session.execute(stmt),
            self._timeout,
        )
        return [self._map_to_domain(model) for model in result.scalars().all()]

    def _map_to_domain(self, model: SnippetModel) -> Snippet:
        return Snippet.reconstitute(
            id=model.id,
            title=model.title,
            content=model.content,
            created_at=ensure_tz_aware(model.created_at),
            expires_at=ensure_tz_aware(model.expires_at),
        )
