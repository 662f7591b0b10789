"""Unit tests for the httpx resource client."""

import httpx
import pytest

from src.benchmark.models import ErrorKind
from src.benchmark.operations import classify_error
from src.shared.http_client import HttpResourceClient
from tests.test_const import HTTP_PAYMENT_REQUIRED, TEST_ENDPOINT


def client_with(handler) -> HttpResourceClient:
    return HttpResourceClient(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


class TestHttpResourceClient:

    @pytest.mark.asyncio
    async def test_get_returns_json(self):
        async with client_with(lambda request: httpx.Response(200, json={"paid": True})) as client:
            assert await client.get(TEST_ENDPOINT) == {"paid": True}

    @pytest.mark.asyncio
    async def test_get_returns_text_when_not_json(self):
        async with client_with(lambda request: httpx.Response(200, text="plain")) as client:
            assert await client.get(TEST_ENDPOINT) == "plain"

    @pytest.mark.asyncio
    async def test_payment_required_raises_status_error(self):
        async with client_with(lambda request: httpx.Response(HTTP_PAYMENT_REQUIRED)) as client:
            with pytest.raises(httpx.HTTPStatusError) as exc_info:
                await client.get(TEST_ENDPOINT)

        assert classify_error(exc_info.value).kind is ErrorKind.PAYMENT_REQUIRED

    def test_user_agent_header(self):
        client = HttpResourceClient(user_agent="perfbench-test/1.0")
        assert client._client.headers["User-Agent"] == "perfbench-test/1.0"
