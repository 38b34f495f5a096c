"""
Application state.

AppState is immutable: every user event is a transition that returns a new
state, so a search can be reproduced from (state, event) alone.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from digideck.models.category import DEFAULT_CATEGORY, Category
from digideck.models.context import (
    CategoryFilter,
    SearchContext,
    default_filter,
    filter_matches,
)


def _default_filters() -> Mapping[Category, CategoryFilter]:
    return MappingProxyType({category: default_filter(category) for category in Category})


@dataclass(frozen=True)
class AppState:
    """
    UI-facing search state.

    Attributes:
        active_category: Category of the visible tab
        search_term: Last submitted term (trimmed)
        filters: Live filter per category; switching tabs keeps both
    """

    active_category: Category = DEFAULT_CATEGORY
    search_term: str = ""
    filters: Mapping[Category, CategoryFilter] = field(default_factory=_default_filters)

    def switch_category(self, category: Category) -> "AppState":
        """Make a category active, keeping every filter."""
        return replace(self, active_category=category)

    def with_term(self, term: str) -> "AppState":
        """Store a new search term."""
        return replace(self, search_term=term.strip())

    def with_filter(self, category: Category, category_filter: CategoryFilter) -> "AppState":
        """
        Replace one category's filter.

        Raises:
            ValueError: If the filter type does not belong to the category
        """
        if not filter_matches(category, category_filter):
            raise ValueError(
                f"{type(category_filter).__name__} cannot be used with category {category.value}"
            )
        filters = dict(self.filters)
        filters[category] = category_filter
        return replace(self, filters=MappingProxyType(filters))

    def context(self, category: Category | None = None) -> SearchContext:
        """Search context for the given category (defaults to the active one)."""
        category = category or self.active_category
        return SearchContext(
            category=category,
            term=self.search_term,
            filter=self.filters[category],
        )

    @property
    def has_term(self) -> bool:
        """True once a non-blank term has been submitted."""
        return bool(self.search_term)
