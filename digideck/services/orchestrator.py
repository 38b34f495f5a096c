"""
Search orchestrator.

Runs one search: validate the term, answer from the cache when possible,
otherwise route, fetch, normalize and cache.

    IDLE -> VALIDATING -> CACHE_HIT ----------> SUCCESS -> IDLE
                       +-> FETCHING -> SUCCESS | FAILED -> IDLE

Overlapping searches are allowed. Every validated run takes a per-category
sequence number; a fetch that completes after a newer run was issued for the
same category is returned with stale=True and does not touch the cache. A
stale fetch that fails is reported the same way instead of raising.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import httpx

from digideck.models.category import Category
from digideck.models.context import SearchContext
from digideck.models.failure import EmptyQueryError
from digideck.models.records import NormalizedRecord
from digideck.services.normalizer import normalize_all
from digideck.services.query_router import QueryRouter, RemoteRequest
from digideck.services.remote import fetch_json
from digideck.services.result_cache import ResultCache

logger = logging.getLogger(__name__)

Fetcher = Callable[[httpx.AsyncClient, RemoteRequest], Awaitable[list[Any]]]


class SearchPhase(str, Enum):
    """Orchestrator state."""

    IDLE = "idle"
    VALIDATING = "validating"
    CACHE_HIT = "cache_hit"
    FETCHING = "fetching"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class SearchOutcome:
    """
    Result of one search run.

    Attributes:
        category: Category that was searched
        records: Normalized records, in service order
        from_cache: True if answered from the cache without a network call
        stale: True if a newer search for the category was issued while
            this one was fetching; callers should discard it
    """

    category: Category
    records: list[NormalizedRecord] = field(default_factory=list)
    from_cache: bool = False
    stale: bool = False


class SearchOrchestrator:
    """Top-level search operation over the cache, router and lookup services."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        router: QueryRouter | None = None,
        cache: ResultCache | None = None,
        fetcher: Fetcher = fetch_json,
    ) -> None:
        self.client = client
        self.router = router or QueryRouter()
        self.cache = cache or ResultCache()
        self.fetcher = fetcher
        self.phase = SearchPhase.IDLE
        self.last_phase = SearchPhase.IDLE
        self._in_flight = 0
        self._issued: dict[Category, int] = {category: 0 for category in Category}

    @property
    def busy(self) -> bool:
        """True only while at least one fetch is in progress."""
        return self._in_flight > 0

    def latest_sequence(self, category: Category) -> int:
        """Sequence number of the newest run issued for a category."""
        return self._issued[category]

    async def run(self, context: SearchContext) -> SearchOutcome:
        """
        Run a search.

        Args:
            context: Category, term and filter to search with

        Returns:
            SearchOutcome with the normalized records

        Raises:
            EmptyQueryError: If the term is blank (no network call is made)
            RemoteUnavailableError: If the lookup service fails (cache untouched)
                and no newer run has been issued for the category
        """
        self.phase = SearchPhase.VALIDATING
        if not context.normalized_term:
            self._settle(SearchPhase.FAILED)
            raise EmptyQueryError()

        category = context.category
        self._issued[category] += 1
        sequence = self._issued[category]

        cached = self.cache.get(context)
        if cached is not None:
            logger.debug("Cache hit for %s %r", category.value, context.normalized_term)
            self.phase = SearchPhase.CACHE_HIT
            self._settle(SearchPhase.SUCCESS)
            return SearchOutcome(category=category, records=cached, from_cache=True)

        logger.debug("Cache miss for %s %r", category.value, context.normalized_term)
        try:
            records = await self._fetch(context)
        except Exception as e:
            self._settle(SearchPhase.FAILED)
            if sequence != self._issued[category]:
                logger.warning(
                    "Ignoring failed stale %s search for %r: %s",
                    category.value,
                    context.normalized_term,
                    e,
                )
                return SearchOutcome(category=category, stale=True)
            raise

        if sequence != self._issued[category]:
            logger.warning(
                "Discarding stale %s results for %r (run %d, latest %d)",
                category.value,
                context.normalized_term,
                sequence,
                self._issued[category],
            )
            self._settle(SearchPhase.SUCCESS)
            return SearchOutcome(category=category, records=records, stale=True)

        self.cache.put(context, records)
        self._settle(SearchPhase.SUCCESS)
        logger.info(
            "Found %d %s results for %r", len(records), category.value, context.normalized_term
        )
        return SearchOutcome(category=category, records=records)

    async def _fetch(self, context: SearchContext) -> list[NormalizedRecord]:
        """Route, call the service and normalize. Holds the busy flag throughout."""
        self._in_flight += 1
        self.phase = SearchPhase.FETCHING
        try:
            request = self.router.resolve(context)
            if request.is_empty:
                return []
            payload = await self.fetcher(self.client, request)
            return normalize_all(payload, context.category)
        finally:
            self._in_flight -= 1

    def _settle(self, terminal: SearchPhase) -> None:
        self.last_phase = terminal
        self.phase = SearchPhase.FETCHING if self.busy else SearchPhase.IDLE
