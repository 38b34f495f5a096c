"""
DigiDeck services.

The search pipeline: normalization, routing, caching and orchestration.
"""

from digideck.services.normalizer import (
    DARK_BACKGROUND_COLORS,
    foreground_for,
    normalize,
    normalize_all,
)
from digideck.services.orchestrator import SearchOrchestrator, SearchOutcome, SearchPhase
from digideck.services.presenter import (
    DisplayCard,
    RenderedResults,
    render_results,
)
from digideck.services.query_router import QueryRouter, RemoteRequest, RequestKind
from digideck.services.remote import create_client, fetch_json
from digideck.services.result_cache import CacheSlot, ResultCache, derive_key
from digideck.services.session import SearchSession, build_filter

__all__ = [
    # Normalizer
    "DARK_BACKGROUND_COLORS",
    "foreground_for",
    "normalize",
    "normalize_all",
    # Router
    "QueryRouter",
    "RemoteRequest",
    "RequestKind",
    # Remote fetch
    "create_client",
    "fetch_json",
    # Cache
    "CacheSlot",
    "ResultCache",
    "derive_key",
    # Orchestration
    "SearchOrchestrator",
    "SearchOutcome",
    "SearchPhase",
    "SearchSession",
    "build_filter",
    # Presentation
    "DisplayCard",
    "RenderedResults",
    "render_results",
]
