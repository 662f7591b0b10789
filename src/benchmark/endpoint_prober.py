"""Measures single round-trip latency to network endpoints."""
import logging
import time
from typing import Optional

import httpx

from .constants import BenchmarkConstants


# Configure logging
logger = logging.getLogger(__name__)


class EndpointProber:
    """Performs one latency probe per call and never raises.

    Failed probes return ``BenchmarkConstants.SENTINEL_LATENCY``.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None,
                 timeout: float = BenchmarkConstants.PROBE_TIMEOUT):
        self.timeout = timeout
        self._client = client

    async def _send(self, method: str, url: str, **kwargs) -> None:
        if self._client is not None:
            response = await self._client.request(method, url, **kwargs)
        else:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
                response = await client.request(method, url, **kwargs)
        if response.is_error:
            logger.debug(f"{method} {url} answered {response.status_code}")
        response.json()

    async def _probe(self, label: str, method: str, url: str, **kwargs) -> float:
        start = time.perf_counter()
        try:
            await self._send(method, url, **kwargs)
            return (time.perf_counter() - start) * 1000
        except Exception as e:
            logger.warning(f"{label} {url} unreachable: {e}")
            return BenchmarkConstants.SENTINEL_LATENCY

    async def measure_facilitator_latency(self, facilitator_url: str) -> float:
        """
        Measure the response time of a facilitator's supported-schemes endpoint.

        Args:
            facilitator_url: Facilitator base URL.

        Returns:
            Latency in milliseconds, or SENTINEL_LATENCY if the probe failed.
        """
        url = facilitator_url.rstrip("/") + BenchmarkConstants.FACILITATOR_HEALTH_PATH
        return await self._probe("Facilitator", "GET", url)

    async def measure_rpc_latency(self, rpc_url: str) -> float:
        """
        Measure the response time of a JSON-RPC block number call.

        Args:
            rpc_url: RPC endpoint URL.

        Returns:
            Latency in milliseconds, or SENTINEL_LATENCY if the probe failed.
        """
        return await self._probe("RPC", "POST", rpc_url, json=BenchmarkConstants.RPC_PROBE_PAYLOAD)
