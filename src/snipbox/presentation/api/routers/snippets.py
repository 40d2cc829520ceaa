"""Snippet router: the home and about pages, viewing and creating snippets."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

from snipbox.application.forms import SnippetCreateForm
from snipbox.presentation.api.dependencies import CurrentUserId, Page, SnippetSvc
from snipbox.presentation.api.schemas import (
    ErrorResponse,
    FormErrorResponse,
    HomePage,
    PageData,
    SnippetCreatePage,
    SnippetCreateRequest,
    SnippetPage,
    SnippetResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", summary="Latest live snippets")
async def home(page: Page, snippets: SnippetSvc) -> HomePage:
    latest = await snippets.latest()
    return HomePage(
        **page.model_dump(),
        snippets=[SnippetResponse.from_domain(s) for s in latest],
    )


@router.get("/about", summary="About page")
async def about(page: Page) -> PageData:
    return page


@router.get(
    "/snippet/view/{snippet_id}",
    summary="View a snippet",
    responses={
        404: {
            "model": ErrorResponse,
            "description": "Snippet does not exist or has expired",
        },
    },
)
async def view_snippet(snippet_id: str, page: Page, snippets: SnippetSvc) -> SnippetPage:
    snippet = await snippets.view(snippet_id)
    return SnippetPage(**page.model_dump(), snippet=SnippetResponse.from_domain(snippet))


@router.get("/snippet/create", summary="Snippet creation form")
async def create_snippet_form(_: CurrentUserId, page: Page) -> SnippetCreatePage:
    return SnippetCreatePage(**page.model_dump())


@router.post(
    "/snippet/create",
    status_code=status.HTTP_303_SEE_OTHER,
    summary="Create a snippet",
    responses={
        303: {"description": "Created; redirects to the new snippet"},
        422: {
            "model": FormErrorResponse,
            "description": "Field rules violated",
        },
    },
)
async def create_snippet(
    user_id: CurrentUserId,
    request: SnippetCreateRequest,
    snippets: SnippetSvc,
) -> RedirectResponse:
    form = SnippetCreateForm(
        title=request.title,
        content=request.content,
        expires=request.expires,
    )
    location = await snippets.create(form)
    logger.debug("Snippet created by user %s", user_id)
    return RedirectResponse(location, status_code=status.HTTP_303_SEE_OTHER)
