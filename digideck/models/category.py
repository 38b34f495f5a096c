from enum import Enum


class Category(str, Enum):
    """
    Searchable domain.

    Values double as the tab names used by the front-end.
    """

    CREATURE = "digimon"
    CARD = "cards"


DEFAULT_CATEGORY = Category.CREATURE


def parse_category(tab: str) -> Category | None:
    """Resolve a tab name to its category, or None if no such tab exists."""
    try:
        return Category(tab.strip().lower())
    except ValueError:
        return None
