"""Async HTTP client used as the benchmarked resource client."""

from typing import Any, Optional

import httpx


class HttpResourceClient:
    """Thin async wrapper exposing ``get(url)`` over an httpx client.

    Non-2xx responses raise ``httpx.HTTPStatusError`` so callers can read the
    status code from the failure.
    """

    def __init__(self, timeout: float = 30.0, user_agent: Optional[str] = None,
                 client: Optional[httpx.AsyncClient] = None):
        headers = {"User-Agent": user_agent} if user_agent else None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers=headers
        )

    async def get(self, url: str) -> Any:
        """GET ``url`` and return the decoded JSON body, or the text if not JSON."""
        response = await self._client.get(url)
        response.raise_for_status()
        try:
            return response.json()
        except ValueError:
            return response.text

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpResourceClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
