"""
Result cache.

Holds at most one result set per category. A slot only answers for the exact
context it was stored under; any change of term or filter is a miss.
"""

import json
import logging
from collections.abc import Sequence
from dataclasses import asdict, dataclass

from digideck.models.category import Category
from digideck.models.context import SearchContext
from digideck.models.records import NormalizedRecord

logger = logging.getLogger(__name__)


def derive_key(context: SearchContext) -> str:
    """
    Deterministic cache key for a context.

    Category, term and filter fields are serialized as one JSON array with
    sorted keys, so equal contexts always produce the same key and no two
    categories can share one.
    """
    return json.dumps(
        [context.category.value, context.normalized_term, asdict(context.filter)],
        sort_keys=True,
        separators=(",", ":"),
    )


@dataclass(frozen=True, slots=True)
class CacheSlot:
    """A cached result set and the key it was stored under."""

    key: str
    results: tuple[NormalizedRecord, ...]


class ResultCache:
    """Single-slot-per-category result cache."""

    def __init__(self) -> None:
        self._slots: dict[Category, CacheSlot] = {}

    def get(self, context: SearchContext) -> list[NormalizedRecord] | None:
        """
        Look up results for a context.

        Returns:
            The cached records if the category's slot was stored under this
            exact context, otherwise None.
        """
        slot = self._slots.get(context.category)
        if slot is None or slot.key != derive_key(context):
            return None
        return list(slot.results)

    def put(self, context: SearchContext, results: Sequence[NormalizedRecord]) -> None:
        """Overwrite the category's slot."""
        self._slots[context.category] = CacheSlot(key=derive_key(context), results=tuple(results))
        logger.debug("Cached %d %s results", len(results), context.category.value)

    def invalidate(self, category: Category | None = None) -> None:
        """Clear one category's slot, or every slot when no category is given."""
        if category is None:
            self._slots.clear()
        else:
            self._slots.pop(category, None)

    def slot(self, category: Category) -> CacheSlot | None:
        """Raw slot for a category, valid or not."""
        return self._slots.get(category)

    def __len__(self) -> int:
        return len(self._slots)
