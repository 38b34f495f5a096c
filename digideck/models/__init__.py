from digideck.models.category import DEFAULT_CATEGORY, Category, parse_category
from digideck.models.context import (
    CardFilter,
    CategoryFilter,
    CreatureFilter,
    SearchContext,
    default_filter,
)
from digideck.models.failure import (
    ApiResponse,
    ContainerMissingError,
    EmptyQueryError,
    FailureDetail,
    FailureKind,
    KnownError,
    OutcomeType,
    RemoteUnavailableError,
    create_success,
    create_unknown_failure,
    finalize_response,
    is_finalized,
)
from digideck.models.records import (
    CARD_NUMBER_SENTINEL,
    CardRecord,
    CreatureRecord,
    Foreground,
    NormalizedRecord,
)
from digideck.models.state import AppState

__all__ = [
    "ApiResponse",
    "AppState",
    "CARD_NUMBER_SENTINEL",
    "CardFilter",
    "CardRecord",
    "Category",
    "CategoryFilter",
    "ContainerMissingError",
    "CreatureFilter",
    "CreatureRecord",
    "DEFAULT_CATEGORY",
    "EmptyQueryError",
    "FailureDetail",
    "FailureKind",
    "Foreground",
    "KnownError",
    "NormalizedRecord",
    "OutcomeType",
    "RemoteUnavailableError",
    "SearchContext",
    "create_success",
    "create_unknown_failure",
    "default_filter",
    "finalize_response",
    "is_finalized",
    "parse_category",
]
