from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from digideck.api import health_router, search_router
from digideck.config import settings
from digideck.services.orchestrator import SearchOrchestrator
from digideck.services.remote import create_client


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler: one HTTP client and one result cache per process."""
    async with create_client() as client:
        app.state.orchestrator = SearchOrchestrator(client)
        yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("digideck"),
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(search_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["GET", "DELETE"],
    allow_headers=["*"],
)
