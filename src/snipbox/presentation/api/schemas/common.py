"""Shared response shapes."""

from typing import Any

from pydantic import BaseModel, Field


class PageData(BaseModel):
    """Values every page needs, whatever its payload."""

    flash: str | None = Field(default=None, description="One-shot status message")
    is_authenticated: bool = False


class ErrorResponse(BaseModel):
    detail: str
    code: str


class FormErrorResponse(ErrorResponse):
    """Returned with 422 when a submitted form fails its field rules."""

    field_errors: dict[str, list[str]] = Field(default_factory=dict)
    non_field_errors: list[str] = Field(default_factory=list)
    values: dict[str, Any] = Field(default_factory=dict)
