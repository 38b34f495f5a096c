"""
Query router.

Decides which lookup-service call answers a search context.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import assert_never
from urllib.parse import quote

from digideck.config import Settings, settings
from digideck.models.context import CardFilter, CreatureFilter, SearchContext


class RequestKind(str, Enum):
    """Remote operation selected for a context."""

    BY_NAME = "by_name"
    BY_LEVEL = "by_level"
    CARD_SEARCH = "card_search"
    EMPTY = "empty"  # Answered with zero results, no network call


@dataclass(frozen=True)
class RemoteRequest:
    """
    A resolved lookup-service call.

    Attributes:
        kind: Which remote operation this is
        url: Full URL (empty for EMPTY requests)
        params: Query string parameters, in order
    """

    kind: RequestKind
    url: str = ""
    params: dict[str, str] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """True if no network call is needed."""
        return self.kind == RequestKind.EMPTY


class QueryRouter:
    """Resolves search contexts to remote requests."""

    def __init__(self, config: Settings | None = None) -> None:
        config = config or settings
        self.digimon_api_url = config.digimon_api_url.rstrip("/")
        self.card_api_url = config.card_api_url
        self.card_series = config.card_series

    def resolve(self, context: SearchContext) -> RemoteRequest:
        """
        Pick the remote request for a context.

        Creature searches with a level list the whole level and ignore the term.
        Card searches always send name, series and type together.
        """
        # SearchContext guarantees the filter type matches the category
        match context.filter:
            case CreatureFilter():
                return self._resolve_creature(context.normalized_term, context.filter)
            case CardFilter():
                return self._resolve_card(context.normalized_term, context.filter)
            case _:
                assert_never(context.filter)

    def _resolve_creature(self, term: str, creature_filter: CreatureFilter) -> RemoteRequest:
        level = (creature_filter.level or "").strip()
        if level:
            return RemoteRequest(
                kind=RequestKind.BY_LEVEL,
                url=f"{self.digimon_api_url}/level/{quote(level, safe='')}",
            )
        if term:
            return RemoteRequest(
                kind=RequestKind.BY_NAME,
                url=f"{self.digimon_api_url}/name/{quote(term, safe='')}",
            )
        return RemoteRequest(kind=RequestKind.EMPTY)

    def _resolve_card(self, term: str, card_filter: CardFilter) -> RemoteRequest:
        return RemoteRequest(
            kind=RequestKind.CARD_SEARCH,
            url=self.card_api_url,
            params={
                "n": term,
                "series": self.card_series,
                "type": card_filter.card_type,
            },
        )
