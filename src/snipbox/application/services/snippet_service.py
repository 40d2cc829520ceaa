"""Snippet creation and reads."""

import logging

from snipbox.application.forms import SnippetCreateForm
from snipbox.application.routes import snippet_view_path
from snipbox.application.session import FLASH_KEY, Session
from snipbox.domain.snippet import DEFAULT_LATEST_LIMIT, Snippet, SnippetRepository

logger = logging.getLogger(__name__)

SNIPPET_CREATED_FLASH = "Snippet successfully created!"


class SnippetService:
    def __init__(
        self,
        snippets: SnippetRepository,
        session: Session,
        latest_limit: int = DEFAULT_LATEST_LIMIT,
    ):
        self._snippets = snippets
        self._session = session
        self._latest_limit = latest_limit

    async def create(self, form: SnippetCreateForm) -> str:
        """Validate and store a snippet, returning the path to view it.

        The repository is not called when the form is invalid.
        """
        validator = form.validate()
        validator.raise_if_invalid(form.values())

        snippet_id = await self._snippets.insert(form.title, form.content, form.expires)
        self._session.put(FLASH_KEY, SNIPPET_CREATED_FLASH)
        return snippet_view_path(snippet_id)

    async def view(self, snippet_id: str) -> Snippet:
        return await self._snippets.get(snippet_id)

    async def latest(self) -> list[Snippet]:
        return await self._snippets.latest(self._latest_limit)
