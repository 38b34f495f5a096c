"""
Lookup-service fetch primitive.

GET a resolved RemoteRequest and decode the JSON array it answers with.
Fails on non-2xx; never retries.
"""

import logging
from typing import Any

import httpx

from digideck.config import Settings, settings
from digideck.models.failure import RemoteUnavailableError
from digideck.services.query_router import RemoteRequest

logger = logging.getLogger(__name__)


def create_client(config: Settings | None = None) -> httpx.AsyncClient:
    """Build the shared HTTP client for both lookup services."""
    config = config or settings
    return httpx.AsyncClient(
        headers={"User-Agent": config.user_agent},
        follow_redirects=True,
        timeout=config.request_timeout,
    )


async def fetch_json(client: httpx.AsyncClient, request: RemoteRequest) -> list[Any]:
    """
    Execute a remote request.

    Args:
        client: HTTP client
        request: Resolved request (must not be EMPTY)

    Returns:
        Decoded JSON array. A JSON object body (the card service's
        "no results" answer) is returned as an empty list.

    Raises:
        RemoteUnavailableError: On non-2xx status, transport failure or a non-JSON body
    """
    logger.debug("GET %s params=%s", request.url, request.params)

    try:
        response = await client.get(request.url, params=request.params or None)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPStatusError as e:
        logger.error("Fetch error: HTTP %d from %s", e.response.status_code, request.url)
        raise RemoteUnavailableError(
            request.url, detail=f"HTTP error! status: {e.response.status_code}"
        ) from e
    except httpx.RequestError as e:
        logger.error("Fetch error: %s from %s", e, request.url)
        raise RemoteUnavailableError(request.url, detail=str(e)) from e
    except ValueError as e:
        logger.error("Fetch error: invalid JSON from %s", request.url)
        raise RemoteUnavailableError(request.url, detail="Response was not valid JSON") from e

    if isinstance(payload, list):
        return payload

    if isinstance(payload, dict):
        logger.warning("No results from %s: %s", request.url, payload.get("error", payload))
    else:
        logger.warning("Unexpected %s payload from %s", type(payload).__name__, request.url)
    return []
