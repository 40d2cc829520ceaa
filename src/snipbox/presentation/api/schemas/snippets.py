"""Snippet schemas for request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from snipbox.domain.snippet import DEFAULT_EXPIRY_DAYS, Snippet
from snipbox.presentation.api.schemas.common import PageData


class SnippetCreateRequest(BaseModel):
    """Request schema for snippet creation.

    Blank values decode fine; the field rules report them.
    """

    title: str = ""
    content: str = ""
    expires: int = Field(
        default=DEFAULT_EXPIRY_DAYS,
        description="Days until the snippet expires (1, 7 or 365)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "An old silent pond",
                "content": "An old silent pond...\nA frog jumps into the pond,\nsplash!",
                "expires": 7,
            },
        },
    )


class SnippetResponse(BaseModel):
    id: str
    title: str
    content: str
    created_at: datetime
    expires_at: datetime

    @classmethod
    def from_domain(cls, snippet: Snippet) -> "SnippetResponse":
        return cls(
            id=snippet.id,
            title=snippet.title,
            content=snippet.content,
            created_at=snippet.created_at,
            expires_at=snippet.expires_at,
        )


class HomePage(PageData):
    snippets: list[SnippetResponse] = Field(default_factory=list)


class SnippetPage(PageData):
    snippet: SnippetResponse


class SnippetCreatePage(PageData):
    form: SnippetCreateRequest = Field(default_factory=SnippetCreateRequest)
