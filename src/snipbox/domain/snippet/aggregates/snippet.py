"""Snippet aggregate."""

from datetime import datetime
from typing import Union

from snipbox.domain.shared.time import utc_now
from snipbox.domain.snippet.value_objects import ExpiryPeriod, generate_snippet_id


class Snippet:
    """
    Snippet aggregate root.

    Immutable once created. Expiry only affects visibility; an expired
    snippet is never returned by a repository read.
    """

    def __init__(
        self,
        id: str,
        title: str,
        content: str,
        created_at: datetime,
        expires_at: datetime,
    ):
        self._id = id
        self._title = title
        self._content = content
        self._created_at = created_at
        self._expires_at = expires_at

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def content(self) -> str:
        return self._content

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def expires_at(self) -> datetime:
        return self._expires_at

    def is_live(self, now: datetime) -> bool:
        return now < self._expires_at

    @classmethod
    def create(
        cls,
        title: str,
        content: str,
        expires_in: Union[int, ExpiryPeriod],
        now: datetime | None = None,
    ) -> "Snippet":
        period = (
            expires_in if isinstance(expires_in, ExpiryPeriod) else ExpiryPeriod(expires_in)
        )
        created_at = now or utc_now()
        return cls(
            id=generate_snippet_id(),
            title=title,
            content=content,
            created_at=created_at,
            expires_at=period.expires_at(created_at),
        )

    @classmethod
    def reconstitute(
        cls,
        id: str,
        title: str,
        content: str,
        created_at: datetime,
        expires_at: datetime,
    ) -> "Snippet":
        return cls(
            id=id,
            title=title,
            content=content,
            created_at=created_at,
            expires_at=expires_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snippet):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Snippet(id={self._id}, title={self._title!r})"
