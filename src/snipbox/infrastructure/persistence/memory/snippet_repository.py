"""In-memory implementation of SnippetRepository."""

from snipbox.domain.shared.time import Clock, utc_now
from snipbox.domain.snippet import (
    DEFAULT_LATEST_LIMIT,
    Snippet,
    SnippetNotFoundError,
    SnippetRepository,
)


class InMemorySnippetRepository(SnippetRepository):
    """Dictionary-backed snippet storage with the same visibility rules."""

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._snippets: dict[str, Snippet] = {}

    async def insert(self, title: str, content: str, expires_in_days: int) -> str:
        snippet = Snippet.create(title, content, expires_in_days, now=self._clock())
        self._snippets[snippet.id] = snippet
        return snippet.id

    async def get(self, snippet_id: str) -> Snippet:
        snippet = self._snippets.get(snippet_id)
        if snippet is None or not snippet.is_live(self._clock()):
            raise SnippetNotFoundError(snippet_id)
        return snippet

    async def latest(self, limit: int = DEFAULT_LATEST_LIMIT) -> list[Snippet]:
        if limit <= 0:
            return []
        now = self._clock()
        live = [s for s in self._snippets.values() if s.is_live(now)]
        live.sort(key=lambda s: (s.created_at, s.id), reverse=True)
        return live[:limit]

    def __len__(self) -> int:
        return len(self._snippets)
