"""Aggregates concurrent endpoint probes into network metrics."""
import asyncio
import logging
from typing import TYPE_CHECKING, List, Optional, Sequence

from .constants import BenchmarkConstants
from .endpoint_prober import EndpointProber
from .models import NetworkMetrics

if TYPE_CHECKING:
    from src.shared.config import BenchmarkSettings


# Configure logging
logger = logging.getLogger(__name__)


class NetworkAnalyzer:
    """Probes facilitator and RPC endpoints concurrently."""

    def __init__(self, facilitator_urls: Sequence[str], rpc_urls: Sequence[str],
                 prober: Optional[EndpointProber] = None):
        self.facilitator_urls = list(facilitator_urls)
        self.rpc_urls = list(rpc_urls)
        self.prober = prober or EndpointProber()

    @classmethod
    def from_settings(cls, settings: "BenchmarkSettings", prober: Optional[EndpointProber] = None) -> "NetworkAnalyzer":
        """Build an analyzer from a BenchmarkSettings instance."""
        return cls(
            facilitator_urls=settings.facilitator_urls,
            rpc_urls=settings.rpc_urls,
            prober=prober or EndpointProber(timeout=settings.probe_timeout)
        )

    @staticmethod
    def average_latency(latencies: List[float]) -> float:
        """Average of the successful probes, or the sentinel if none succeeded."""
        valid = [latency for latency in latencies if latency != BenchmarkConstants.SENTINEL_LATENCY and latency >= 0]
        if not valid:
            return BenchmarkConstants.SENTINEL_LATENCY
        return sum(valid) / len(valid)

    async def analyze_network(self) -> NetworkMetrics:
        """
        Probe every configured endpoint at once and aggregate the latencies.

        Waits for all probes to settle. Never raises on individual failures.

        Returns:
            NetworkMetrics with per-class averages and the attempted probe count.
        """
        logger.info(f"Analyzing network: {len(self.facilitator_urls)} facilitators, {len(self.rpc_urls)} RPC endpoints")
        probes = [self.prober.measure_facilitator_latency(url) for url in self.facilitator_urls]
        probes += [self.prober.measure_rpc_latency(url) for url in self.rpc_urls]

        latencies = await asyncio.gather(*probes)
        split = len(self.facilitator_urls)
        facilitator_latencies = list(latencies[:split])
        rpc_latencies = list(latencies[split:])

        metrics = NetworkMetrics(
            facilitator_latency=self.average_latency(facilitator_latencies),
            rpc_latency=self.average_latency(rpc_latencies),
            total_round_trips=len(probes),
            data_transferred=BenchmarkConstants.DATA_TRANSFERRED_UNTRACKED
        )
        logger.info(f"Network analysis complete: {metrics}")
        return metrics
