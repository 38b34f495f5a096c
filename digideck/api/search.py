"""
Search API endpoints.

One results tab per category. Responses always use the ApiResponse envelope.
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from digideck.models.category import Category
from digideck.models.context import SearchContext
from digideck.models.failure import (
    ApiResponse,
    ContainerMissingError,
    KnownError,
    create_success,
    create_unknown_failure,
)
from digideck.services.orchestrator import SearchOrchestrator
from digideck.services.presenter import DisplayCard, render_results, resolve_container
from digideck.services.session import build_filter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


class SearchResponse(BaseModel):
    """Rendered results for one search."""

    category: Category
    count: int = 0
    from_cache: bool = False
    stale: bool = Field(
        default=False,
        description="A newer search for this tab was issued; discard these results",
    )
    message: str | None = None
    cards: list[DisplayCard] = Field(default_factory=list)


class InvalidateResponse(BaseModel):
    """Response model for cache invalidation."""

    cleared: list[Category]


def get_orchestrator(request: Request) -> SearchOrchestrator:
    """Shared orchestrator created in the app lifespan."""
    orchestrator: SearchOrchestrator = request.app.state.orchestrator
    return orchestrator


def _failure(error: KnownError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_response().model_dump(mode="json"),
    )


@router.delete("/cache", response_model=ApiResponse[InvalidateResponse])
async def invalidate_cache(
    orchestrator: Annotated[SearchOrchestrator, Depends(get_orchestrator)],
    tab: Annotated[str | None, Query(description="Tab to clear; all tabs if omitted")] = None,
) -> Any:
    """Drop cached results for one tab or for every tab."""
    try:
        category = resolve_container(tab) if tab is not None else None
    except ContainerMissingError as e:
        return _failure(e)

    orchestrator.cache.invalidate(category)
    cleared = [category] if category is not None else list(Category)
    logger.info("Cleared cache for %s", ", ".join(c.value for c in cleared))
    return create_success(InvalidateResponse(cleared=cleared))


@router.get("/{tab}", response_model=ApiResponse[SearchResponse])
async def search(
    tab: str,
    orchestrator: Annotated[SearchOrchestrator, Depends(get_orchestrator)],
    q: Annotated[str, Query(description="Search term")] = "",
    level: Annotated[str | None, Query(description="Creature level filter")] = None,
    card_type: Annotated[str | None, Query(alias="type", description="Card type filter")] = None,
) -> Any:
    """
    Search one tab.

    Creature searches with a level list the whole level; the term is still
    required but not sent.
    """
    try:
        category = resolve_container(tab)
        value = level if category == Category.CREATURE else card_type
        context = SearchContext(category=category, term=q, filter=build_filter(category, value))
        outcome = await orchestrator.run(context)
        rendered = render_results(outcome.records, category)
    except KnownError as e:
        return _failure(e)
    except Exception as e:
        logger.exception("Search failed for %s", tab)
        return JSONResponse(
            status_code=500,
            content=create_unknown_failure(e).model_dump(mode="json"),
        )

    return create_success(
        SearchResponse(
            category=category,
            count=len(rendered.cards),
            from_cache=outcome.from_cache,
            stale=outcome.stale,
            message=rendered.message,
            cards=rendered.cards,
        )
    )
