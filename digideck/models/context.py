"""
Search context.

A context is the (category, term, filter) triple that decides which backend
is queried and which cache slot answers.
"""

from dataclasses import dataclass
from typing import assert_never

from digideck.config import settings
from digideck.models.category import Category


@dataclass(frozen=True, slots=True)
class CreatureFilter:
    """
    Filter for creature searches.

    Attributes:
        level: Evolution level (e.g., "Rookie"). When set, the free-text
            term is ignored and the whole level is listed.
    """

    level: str | None = None


@dataclass(frozen=True, slots=True)
class CardFilter:
    """
    Filter for card searches.

    Attributes:
        card_type: Card type (e.g., "Digimon", "Tamer", "Option")
    """

    card_type: str = settings.default_card_type


CategoryFilter = CreatureFilter | CardFilter


def default_filter(category: Category) -> CategoryFilter:
    """Startup filter value for a category."""
    match category:
        case Category.CREATURE:
            return CreatureFilter()
        case Category.CARD:
            return CardFilter(card_type=settings.default_card_type)
        case _:
            assert_never(category)


def filter_matches(category: Category, category_filter: CategoryFilter) -> bool:
    """True if the filter type belongs to the category."""
    match category:
        case Category.CREATURE:
            return isinstance(category_filter, CreatureFilter)
        case Category.CARD:
            return isinstance(category_filter, CardFilter)
        case _:
            assert_never(category)


@dataclass(frozen=True, slots=True)
class SearchContext:
    """
    Everything that determines a search result.

    Attributes:
        category: Which backend to search
        term: Free-text search term
        filter: Filter for the category (type must match the category)
    """

    category: Category
    term: str
    filter: CategoryFilter

    def __post_init__(self) -> None:
        if not filter_matches(self.category, self.filter):
            raise ValueError(
                f"{type(self.filter).__name__} cannot be used with category {self.category.value}"
            )

    @property
    def normalized_term(self) -> str:
        """Term with surrounding whitespace removed."""
        return self.term.strip()
