"""Builds benchmarkable operations and classifies their failures."""
import asyncio
import logging
from collections import Counter
from typing import Any, Awaitable, Callable, List, Optional, Sequence

import httpx

from .constants import BenchmarkConstants
from .exceptions import OperationError
from .models import ErrorKind, OperationFailure


# Configure logging
logger = logging.getLogger(__name__)

Operation = Callable[[], Awaitable[Any]]


def _status_code_of(error: BaseException) -> Optional[int]:
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code
    status = getattr(error, "status_code", None)
    return status if isinstance(status, int) else None


def classify_error(error: BaseException) -> OperationFailure:
    """
    Map an exception raised by an operation to an OperationFailure.

    Args:
        error: Exception raised by the underlying client call.

    Returns:
        OperationFailure with the classified kind and status code, if any.
    """
    if isinstance(error, OperationError):
        return error.failure

    status_code = _status_code_of(error)
    if status_code is not None:
        if status_code == BenchmarkConstants.PAYMENT_REQUIRED_STATUS:
            kind = ErrorKind.PAYMENT_REQUIRED
        elif status_code in (401, 403):
            kind = ErrorKind.AUTH
        elif status_code >= 500:
            kind = ErrorKind.SERVER
        else:
            kind = ErrorKind.CLIENT
        return OperationFailure(kind=kind, message=str(error), status_code=status_code)

    if isinstance(error, (httpx.TimeoutException, asyncio.TimeoutError)):
        kind = ErrorKind.TIMEOUT
    elif isinstance(error, (httpx.TransportError, OSError)):
        kind = ErrorKind.NETWORK
    else:
        kind = ErrorKind.UNKNOWN
    return OperationFailure(kind=kind, message=str(error) or type(error).__name__)


def payment_tolerant_get(client: Any, url: str) -> Operation:
    """
    Wrap ``client.get(url)`` so a payment-required response is not a failure.

    Any other failure is re-raised as an OperationError carrying its kind.
    """
    async def operation() -> Any:
        try:
            return await client.get(url)
        except Exception as e:
            failure = classify_error(e)
            if failure.kind is ErrorKind.PAYMENT_REQUIRED:
                return None
            raise OperationError(failure) from e

    return operation


def partition(items: Sequence[str], size: int) -> List[List[str]]:
    """Split ``items`` into consecutive groups of at most ``size``."""
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def settle_all_group(client: Any, group: Sequence[str]) -> Operation:
    """
    Run one request per endpoint in ``group`` concurrently and wait for all.

    A member failure never cancels its siblings. After every member settled,
    the group raises a PARTIAL_BATCH OperationError if any member failed; the
    failure carries one count per failed member, keyed by its error kind.
    """
    members = [payment_tolerant_get(client, url) for url in group]

    async def operation() -> List[Any]:
        outcomes = await asyncio.gather(*(member() for member in members), return_exceptions=True)
        failed = [(url, outcome) for url, outcome in zip(group, outcomes) if isinstance(outcome, BaseException)]
        for url, outcome in failed:
            logger.debug(f"Batch member {url} failed: {outcome}")
        if failed:
            member_kinds = Counter(classify_error(outcome).kind.value for _, outcome in failed)
            raise OperationError(OperationFailure(
                kind=ErrorKind.PARTIAL_BATCH,
                message=f"{len(failed)}/{len(group)} batch requests failed",
                member_kinds=dict(member_kinds)
            ))
        return outcomes

    return operation
