"""Tests for RequestClient."""

from __future__ import annotations

import json

import httpx
import pytest

from nomie_store._client import RequestClient
from nomie_store._errors import ConfigurationError, UnreachableError
from nomie_store._models import Credentials
from tests.fakes import SERVER_URL, TOKEN, FakeServer


@pytest.fixture
def client(server: FakeServer) -> RequestClient:
    return RequestClient(Credentials(url=SERVER_URL, token=TOKEN), transport=server.transport)


class TestRequestBuilding:
    """URLs, auth header, and JSON body construction."""

    @pytest.mark.asyncio
    async def test_get_url_and_auth_header(self, client: RequestClient, server: FakeServer) -> None:
        await client.get("n6storage/trackers")
        request = server.requests[-1]
        assert request.method == "GET"
        assert str(request.url) == "http://localhost:3011/api/n6storage/trackers"
        assert request.headers["Authorization"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_post_sends_json(self, client: RequestClient, server: FakeServer) -> None:
        await client.post("n6storage/trackers", {"mood": {"emoji": "x"}})
        request = server.requests[-1]
        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Authorization"] == "Bearer abc"
        assert json.loads(request.content) == {"mood": {"emoji": "x"}}

    @pytest.mark.asyncio
    async def test_delete(self, client: RequestClient, server: FakeServer) -> None:
        await client.delete("n6storage/trackers")
        request = server.requests[-1]
        assert request.method == "DELETE"
        assert request.url.path == "/api/n6storage/trackers"

    @pytest.mark.asyncio
    async def test_trailing_slash_on_url_is_ignored(self, server: FakeServer) -> None:
        client = RequestClient(Credentials(url=SERVER_URL + "/", token=TOKEN), transport=server.transport)
        await client.get("auth/validate")
        assert server.requests[-1].url.path == "/api/auth/validate"


class TestStatusPassThrough:
    """HTTP error statuses are returned, not raised."""

    @pytest.mark.asyncio
    async def test_non_success_is_returned_not_raised(self, client: RequestClient) -> None:
        response = await client.get("n6storage/missing")
        assert response.status_code == 404


class TestMissingConfiguration:
    """Requests fail before sending when URL or token is missing."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "credentials",
        [Credentials(), Credentials(url=SERVER_URL), Credentials(token=TOKEN)],
    )
    async def test_fails_fast_without_network(self, server: FakeServer, credentials: Credentials) -> None:
        client = RequestClient(credentials, transport=server.transport)
        with pytest.raises(ConfigurationError):
            await client.get("n6storage/trackers")
        with pytest.raises(ConfigurationError):
            await client.post("n6storage/trackers", [])
        with pytest.raises(ConfigurationError):
            await client.delete("n6storage/trackers")
        assert server.requests == []

    @pytest.mark.asyncio
    async def test_missing_url_message(self) -> None:
        with pytest.raises(ConfigurationError, match="API URL not set"):
            await RequestClient().get("auth/validate")


class TestTransportErrors:
    """Network failures surface as UnreachableError."""

    @pytest.mark.asyncio
    async def test_connect_error_maps_to_unreachable(self, client: RequestClient, server: FakeServer) -> None:
        server.fail_with = httpx.ConnectError("Connection refused")
        with pytest.raises(UnreachableError) as exc_info:
            await client.get("auth/validate")
        assert exc_info.value.backend == SERVER_URL
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout_maps_to_unreachable(self, client: RequestClient, server: FakeServer) -> None:
        server.fail_with = httpx.ReadTimeout("timed out")
        with pytest.raises(UnreachableError):
            await client.post("n6storage/list", {"path": "/"})
