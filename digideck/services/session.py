"""
Search session.

Event handlers for one user's search page: tab switches, term submissions and
filter changes. Each handler applies an AppState transition and then decides
whether a search runs.
"""

import logging
from typing import assert_never

from digideck.models.category import Category
from digideck.models.context import CardFilter, CategoryFilter, CreatureFilter
from digideck.models.state import AppState
from digideck.services.orchestrator import SearchOrchestrator, SearchOutcome
from digideck.services.result_cache import ResultCache

logger = logging.getLogger(__name__)


def build_filter(category: Category, value: str | None) -> CategoryFilter:
    """Filter for a category from a raw select-box value."""
    match category:
        case Category.CREATURE:
            return CreatureFilter(level=(value or "").strip() or None)
        case Category.CARD:
            if not value or not value.strip():
                return CardFilter()
            return CardFilter(card_type=value.strip())
        case _:
            assert_never(category)


class SearchSession:
    """Applies user events to AppState and triggers searches."""

    def __init__(self, orchestrator: SearchOrchestrator, state: AppState | None = None) -> None:
        self.orchestrator = orchestrator
        self._state = state or AppState()

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def cache(self) -> ResultCache:
        return self.orchestrator.cache

    @property
    def busy(self) -> bool:
        return self.orchestrator.busy

    async def switch_tab(self, category: Category) -> SearchOutcome | None:
        """Activate a tab; searches it if a term was already submitted."""
        self._state = self._state.switch_category(category)
        if not self._state.has_term:
            return None
        return await self.search()

    async def submit(self, term: str) -> SearchOutcome:
        """
        Submit a search term for the active tab.

        The active tab's slot is dropped first, so resubmitting the same term refreshes it.

        Raises:
            EmptyQueryError: If the term is blank
            RemoteUnavailableError: If the lookup service fails
        """
        pending = self._state.with_term(term)
        if not pending.has_term:
            # Raises EmptyQueryError and records the failed phase
            return await self.orchestrator.run(pending.context())
        self._state = pending
        self.cache.invalidate(self._state.active_category)
        return await self.search()

    async def change_filter(self, category: Category, value: str | None) -> SearchOutcome | None:
        """
        Change one tab's filter.

        Searches only when a term exists and the tab is active.
        """
        self._state = self._state.with_filter(category, build_filter(category, value))
        self.cache.invalidate(category)
        if self._state.has_term and self._state.active_category == category:
            return await self.search()
        return None

    async def search(self) -> SearchOutcome:
        """Search the active tab with the current state."""
        context = self._state.context()
        logger.debug("Searching %s for %r", context.category.value, context.term)
        return await self.orchestrator.run(context)
