"""Tests for the lookup-service fetch primitive."""

import httpx
import pytest
import respx

from digideck.models.category import Category
from digideck.models.context import CreatureFilter, SearchContext
from digideck.models.failure import FailureKind, RemoteUnavailableError
from digideck.services.query_router import QueryRouter, RemoteRequest, RequestKind
from digideck.services.remote import create_client, fetch_json

NAME_URL = "https://digimon-api.vercel.app/api/digimon/name/Agumon"
CARD_URL = "https://digimoncard.io/api-public/search"


@pytest.fixture
def name_request() -> RemoteRequest:
    return RemoteRequest(kind=RequestKind.BY_NAME, url=NAME_URL)


@pytest.fixture
def card_request() -> RemoteRequest:
    return RemoteRequest(
        kind=RequestKind.CARD_SEARCH,
        url=CARD_URL,
        params={"n": "Omnimon", "series": "Digimon Card Game", "type": "Digimon"},
    )


class TestFetchJson:
    @respx.mock
    async def test_returns_array(self, name_request: RemoteRequest, creature_payload) -> None:
        respx.get(NAME_URL).mock(return_value=httpx.Response(200, json=creature_payload))

        async with create_client() as client:
            payload = await fetch_json(client, name_request)

        assert payload == creature_payload

    @respx.mock
    async def test_sends_query_params(self, card_request: RemoteRequest) -> None:
        """Series qualifier and type reach the card service."""
        route = respx.get(CARD_URL).mock(return_value=httpx.Response(200, json=[]))

        async with create_client() as client:
            await fetch_json(client, card_request)

        sent = route.calls.last.request.url
        assert sent.params["n"] == "Omnimon"
        assert sent.params["series"] == "Digimon Card Game"
        assert sent.params["type"] == "Digimon"

    @respx.mock
    async def test_sends_user_agent(self, name_request: RemoteRequest) -> None:
        route = respx.get(NAME_URL).mock(return_value=httpx.Response(200, json=[]))

        async with create_client() as client:
            await fetch_json(client, name_request)

        assert route.calls.last.request.headers["User-Agent"] == "DigiDeck/1.0"

    @respx.mock
    async def test_error_object_is_empty_result(self, card_request: RemoteRequest) -> None:
        """The card service's 'no results' object becomes an empty list."""
        respx.get(CARD_URL).mock(
            return_value=httpx.Response(200, json={"error": "No cards found"})
        )

        async with create_client() as client:
            payload = await fetch_json(client, card_request)

        assert payload == []

    @respx.mock
    async def test_non_2xx_raises(self, name_request: RemoteRequest) -> None:
        respx.get(NAME_URL).mock(return_value=httpx.Response(404))

        async with create_client() as client:
            with pytest.raises(RemoteUnavailableError) as exc_info:
                await fetch_json(client, name_request)

        assert exc_info.value.kind == FailureKind.SERVICE_UNAVAILABLE
        assert exc_info.value.detail == "HTTP error! status: 404"
        assert exc_info.value.url == NAME_URL

    @respx.mock
    async def test_transport_error_raises(self, name_request: RemoteRequest) -> None:
        respx.get(NAME_URL).mock(side_effect=httpx.ConnectError("connection refused"))

        async with create_client() as client:
            with pytest.raises(RemoteUnavailableError):
                await fetch_json(client, name_request)

    @respx.mock
    async def test_invalid_json_raises(self, name_request: RemoteRequest) -> None:
        respx.get(NAME_URL).mock(return_value=httpx.Response(200, text="<html>oops</html>"))

        async with create_client() as client:
            with pytest.raises(RemoteUnavailableError, match="Failed to load data"):
                await fetch_json(client, name_request)

    @respx.mock
    async def test_no_retry(self, name_request: RemoteRequest) -> None:
        """A failure is reported after exactly one call."""
        route = respx.get(NAME_URL).mock(return_value=httpx.Response(503))

        async with create_client() as client:
            with pytest.raises(RemoteUnavailableError):
                await fetch_json(client, name_request)

        assert route.call_count == 1


class TestRequestPath:
    @respx.mock
    async def test_reserved_characters_stay_in_path(self) -> None:
        """An encoded name is sent as one path segment with no query or fragment."""
        route = respx.get(url__startswith="https://digimon-api.vercel.app/api/digimon/name/").mock(
            return_value=httpx.Response(200, json=[])
        )
        context = SearchContext(Category.CREATURE, "Agumon?x=1#frag", CreatureFilter())
        request = QueryRouter().resolve(context)

        async with create_client() as client:
            await fetch_json(client, request)

        sent = route.calls.last.request.url
        assert sent.raw_path == b"/api/digimon/name/Agumon%3Fx%3D1%23frag"
        assert sent.query == b""
        assert sent.fragment == ""
