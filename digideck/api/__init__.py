from digideck.api.health import router as health_router
from digideck.api.search import router as search_router

__all__ = [
    "health_router",
    "search_router",
]
