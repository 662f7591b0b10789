"""Benchmark runner to orchestrate the execution of benchmarks."""
import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Optional
import logging

from src.shared.http_client import HttpResourceClient

from .constants import BenchmarkConstants
from .endpoint_prober import EndpointProber
from .exceptions import BenchmarkExecutionError, BenchmarkUsageError
from .harness import BenchmarkHarness
from .models import BenchmarkResult, NetworkMetrics, Recommendation
from .network_analyzer import NetworkAnalyzer
from .recommendation_engine import RecommendationEngine
from .result_exporter import ResultExporter

if TYPE_CHECKING:
    from src.shared.config import BenchmarkSettings


# Configure logging
logger = logging.getLogger(__name__)


@dataclass
class SuiteReport:
    """Everything one suite run produced."""
    results: List[BenchmarkResult] = field(default_factory=list)
    network_metrics: Optional[NetworkMetrics] = None
    recommendations: List[Recommendation] = field(default_factory=list)


class BenchmarkRunner:
    """Orchestrates the default benchmark suite and manages output."""

    def __init__(self, settings: "BenchmarkSettings", run_network: bool = True, export: bool = True,
                 client: Any = None, prober: Optional[EndpointProber] = None):
        self.settings = settings
        self.run_network = run_network
        self.export = export
        self.client = client
        self.prober = prober
        self.result_exporter = ResultExporter()
        self.recommendation_engine = RecommendationEngine()

    async def _run_benchmarks(self, client: Any) -> List[BenchmarkResult]:
        harness = BenchmarkHarness.from_settings(self.settings, client=client)
        endpoints = self.settings.test_endpoints
        results = []

        logger.info("Payment verification benchmark")
        try:
            results.append(await harness.benchmark_payment_verification(endpoints[0] if endpoints else ""))
        except BenchmarkUsageError as e:
            logger.warning(f"Payment verification benchmark failed, skipping: {e}")

        logger.info("Batch operations benchmark")
        try:
            results.append(await harness.benchmark_batch_operations(endpoints))
        except BenchmarkUsageError as e:
            logger.warning(f"Batch operations benchmark failed, skipping: {e}")

        return results

    async def _analyze_network(self) -> NetworkMetrics:
        if not self.run_network:
            return NetworkMetrics(
                facilitator_latency=BenchmarkConstants.SENTINEL_LATENCY,
                rpc_latency=BenchmarkConstants.SENTINEL_LATENCY,
                total_round_trips=0
            )
        analyzer = NetworkAnalyzer.from_settings(self.settings, prober=self.prober)
        return await analyzer.analyze_network()

    async def run_async(self) -> SuiteReport:
        """Run benchmarks, network analysis and recommendations."""
        if self.client is not None:
            results = await self._run_benchmarks(self.client)
        else:
            async with HttpResourceClient(timeout=self.settings.request_timeout,
                                          user_agent=self.settings.user_agent) as client:
                results = await self._run_benchmarks(client)

        network_metrics = await self._analyze_network()
        recommendations = self.recommendation_engine.generate(results, network_metrics)
        report = SuiteReport(results=results, network_metrics=network_metrics, recommendations=recommendations)
        self._log_report(report)
        if self.export:
            self._export(report)
        return report

    def run(self) -> SuiteReport:
        """Run the complete benchmarking process."""
        try:
            report = asyncio.run(self.run_async())
            logger.info("Benchmarking complete!")
            return report
        except Exception as e:
            logger.error(f"Benchmarking failed: {e}", stack_info=True)
            raise BenchmarkExecutionError(str(e)) from e

    def _log_report(self, report: SuiteReport) -> None:
        if report.results:
            logger.info("Benchmark Results\n" + self.result_exporter.format_results_table(report.results))

        metrics = report.network_metrics
        if metrics is not None:
            if metrics.facilitator_latency > 0:
                logger.info(f"Avg Facilitator Latency: {metrics.facilitator_latency:.1f}ms")
            if metrics.rpc_latency > 0:
                logger.info(f"Avg RPC Latency: {metrics.rpc_latency:.1f}ms")

        logger.info("Performance Optimization Recommendations")
        for line in self.recommendation_engine.render_lines(report.recommendations):
            logger.info(line)

    def _export(self, report: SuiteReport) -> None:
        output_dir = self.settings.output_dir
        output_dir.mkdir(parents=True, exist_ok=True)
        if report.results:
            self.result_exporter.save_results(report.results, output_dir / "benchmark_results.csv")
        if report.network_metrics is not None and self.run_network:
            self.result_exporter.save_network_metrics(report.network_metrics, output_dir / "network_metrics.json")
