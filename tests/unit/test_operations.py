"""Unit tests for operation wrappers and failure classification."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from src.benchmark.exceptions import OperationError
from src.benchmark.models import ErrorKind, OperationFailure
from src.benchmark.operations import classify_error, partition, payment_tolerant_get, settle_all_group
from tests.factories import make_status_error
from tests.test_const import HTTP_ERROR, HTTP_PAYMENT_REQUIRED, HTTP_UNAUTHORIZED, TEST_ENDPOINT


class TestClassifyError:
    """Map raised exceptions to error kinds."""

    @pytest.mark.parametrize("status_code, kind", [
        (HTTP_PAYMENT_REQUIRED, ErrorKind.PAYMENT_REQUIRED),
        (HTTP_UNAUTHORIZED, ErrorKind.AUTH),
        (403, ErrorKind.AUTH),
        (404, ErrorKind.CLIENT),
        (HTTP_ERROR, ErrorKind.SERVER),
        (503, ErrorKind.SERVER),
    ])
    def test_http_status(self, status_code, kind):
        failure = classify_error(make_status_error(status_code))
        assert failure.kind is kind
        assert failure.status_code == status_code

    def test_timeout(self):
        assert classify_error(httpx.ReadTimeout("slow")).kind is ErrorKind.TIMEOUT
        assert classify_error(asyncio.TimeoutError()).kind is ErrorKind.TIMEOUT

    def test_network(self):
        assert classify_error(httpx.ConnectError("refused")).kind is ErrorKind.NETWORK
        assert classify_error(ConnectionResetError()).kind is ErrorKind.NETWORK

    def test_status_code_attribute(self):
        error = RuntimeError("payment needed")
        error.status_code = HTTP_PAYMENT_REQUIRED
        assert classify_error(error).kind is ErrorKind.PAYMENT_REQUIRED

    def test_unknown(self):
        failure = classify_error(ValueError("bad"))
        assert failure.kind is ErrorKind.UNKNOWN
        assert failure.message == "bad"
        assert failure.status_code is None

    def test_operation_error_passes_through(self):
        failure = OperationFailure(kind=ErrorKind.PARTIAL_BATCH, message="1/2 failed")
        assert classify_error(OperationError(failure)) is failure


class TestPaymentTolerantGet:

    @pytest.mark.asyncio
    async def test_success_returns_response(self, mock_client):
        operation = payment_tolerant_get(mock_client, TEST_ENDPOINT)
        assert await operation() == {"data": "ok"}
        mock_client.get.assert_awaited_once_with(TEST_ENDPOINT)

    @pytest.mark.asyncio
    async def test_payment_required_is_not_a_failure(self, payment_required_client):
        operation = payment_tolerant_get(payment_required_client, TEST_ENDPOINT)
        assert await operation() is None

    @pytest.mark.asyncio
    async def test_other_status_raises_classified_error(self):
        client = MagicMock()
        client.get = AsyncMock(side_effect=make_status_error(HTTP_ERROR))

        with pytest.raises(OperationError) as exc_info:
            await payment_tolerant_get(client, TEST_ENDPOINT)()

        assert exc_info.value.kind is ErrorKind.SERVER
        assert exc_info.value.status_code == HTTP_ERROR


class TestPartition:

    def test_twelve_by_five(self):
        groups = partition([str(i) for i in range(12)], 5)
        assert [len(g) for g in groups] == [5, 5, 2]
        assert groups[2] == ["10", "11"]

    def test_exact_multiple(self):
        assert partition(["a", "b", "c", "d"], 2) == [["a", "b"], ["c", "d"]]

    def test_empty(self):
        assert partition([], 3) == []


class TestSettleAllGroup:

    @pytest.mark.asyncio
    async def test_all_members_succeed(self, mock_client):
        outcomes = await settle_all_group(mock_client, ["u1", "u2", "u3"])()
        assert len(outcomes) == 3
        assert mock_client.get.await_count == 3

    @pytest.mark.asyncio
    async def test_member_failure_does_not_cancel_siblings(self):
        calls = []

        async def get(url):
            calls.append(url)
            if url == "bad":
                raise make_status_error(HTTP_ERROR, url)
            await asyncio.sleep(0.01)
            return url

        client = MagicMock()
        client.get = get

        with pytest.raises(OperationError) as exc_info:
            await settle_all_group(client, ["a", "bad", "c"])()

        assert sorted(calls) == ["a", "bad", "c"]
        assert exc_info.value.kind is ErrorKind.PARTIAL_BATCH
        assert "1/3" in str(exc_info.value)
        assert exc_info.value.failure.member_kinds == {"server": 1}

    @pytest.mark.asyncio
    async def test_member_kinds_tallied_per_failed_member(self):
        async def get(url):
            if url == "auth":
                raise make_status_error(HTTP_UNAUTHORIZED, url)
            if url == "paid":
                raise make_status_error(HTTP_PAYMENT_REQUIRED, url)
            raise httpx.ConnectError("refused")

        client = MagicMock()
        client.get = get

        with pytest.raises(OperationError) as exc_info:
            await settle_all_group(client, ["auth", "paid", "down-1", "down-2"])()

        assert "3/4" in str(exc_info.value)
        assert exc_info.value.failure.member_kinds == {"auth": 1, "network": 2}

    @pytest.mark.asyncio
    async def test_payment_required_members_count_as_settled(self, payment_required_client):
        outcomes = await settle_all_group(payment_required_client, ["a", "b"])()
        assert outcomes == [None, None]
