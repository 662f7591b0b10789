"""Runs timed trials of asynchronous operations."""
import logging
import time
from typing import TYPE_CHECKING, Any, Optional, Sequence

from .constants import BenchmarkConstants
from .exceptions import BenchmarkUsageError
from .latency_analyzer import LatencyAnalyzer
from .models import BenchmarkResult
from .operations import Operation, classify_error, partition, payment_tolerant_get, settle_all_group
from .progress import LoggingProgressObserver, ProgressObserver
from .sample_collector import SampleCollector

if TYPE_CHECKING:
    from src.shared.config import BenchmarkSettings


# Configure logging
logger = logging.getLogger(__name__)


class BenchmarkHarness:
    """Warms up, times and summarizes repeated invocations of an operation.

    Trials run strictly one after another. A failing trial is timed and
    counted like any other; only structurally invalid input raises.
    """

    def __init__(
        self,
        client: Any = None,
        progress_observer: Optional[ProgressObserver] = None,
        progress_interval: int = BenchmarkConstants.PROGRESS_INTERVAL,
        verification_iterations: int = BenchmarkConstants.VERIFICATION_ITERATIONS,
        batch_concurrency: int = BenchmarkConstants.DEFAULT_BATCH_CONCURRENCY
    ):
        self.client = client
        self.progress_observer = progress_observer or LoggingProgressObserver()
        self.progress_interval = max(1, progress_interval)
        self.verification_iterations = verification_iterations
        self.batch_concurrency = batch_concurrency
        self.latency_analyzer = LatencyAnalyzer()

    @classmethod
    def from_settings(cls, settings: "BenchmarkSettings", client: Any = None,
                      progress_observer: Optional[ProgressObserver] = None) -> "BenchmarkHarness":
        """Build a harness from a BenchmarkSettings instance."""
        return cls(
            client=client,
            progress_observer=progress_observer,
            progress_interval=settings.progress_interval,
            verification_iterations=settings.verification_iterations,
            batch_concurrency=settings.batch_concurrency
        )

    async def warmup(self, operation_name: str, operation: Operation) -> bool:
        """Invoke the operation once, untimed. Returns False if it failed."""
        try:
            await operation()
            return True
        except Exception as e:
            logger.warning(f"Warmup failed for {operation_name}, continuing: {e}")
            return False

    async def benchmark(
        self,
        operation_name: str,
        operation: Operation,
        iterations: int = BenchmarkConstants.DEFAULT_ITERATIONS
    ) -> BenchmarkResult:
        """
        Run a performance benchmark for one operation.

        Args:
            operation_name: Label stored on the result.
            operation: Zero-argument coroutine function to measure.
            iterations: Number of timed trials.

        Returns:
            BenchmarkResult for the measured trials.

        Raises:
            BenchmarkUsageError: If iterations is not positive.
        """
        if iterations <= 0:
            raise BenchmarkUsageError(f"Iterations must be positive, got {iterations}")

        logger.info(f"Running benchmark: {operation_name} ({iterations} iterations)")
        await self.warmup(operation_name, operation)
        return await self._run_trials(operation_name, operation, iterations)

    async def _run_trials(self, operation_name: str, operation: Operation, iterations: int) -> BenchmarkResult:
        """Time ``iterations`` sequential invocations and summarize them."""
        collector = SampleCollector()
        run_start = time.perf_counter()
        run_end = run_start

        for completed in range(1, iterations + 1):
            trial_start = time.perf_counter()
            try:
                await operation()
            except Exception as e:
                run_end = time.perf_counter()
                failure = classify_error(e)
                collector.record_failure((run_end - trial_start) * 1000, failure.kind, failure.member_kinds)
                logger.debug(f"Trial {completed} of {operation_name} failed ({failure.kind.value}): {failure.message}")
            else:
                run_end = time.perf_counter()
                collector.record_success((run_end - trial_start) * 1000)

            # outside the timed window
            if completed % self.progress_interval == 0 or completed == iterations:
                self.progress_observer.on_progress(completed, iterations)

        total_time_ms = (run_end - run_start) * 1000
        logger.info(f"Completed {iterations} iterations of {operation_name}: "
                    f"{collector.success} succeeded, {collector.errors} failed")

        return self.latency_analyzer.compute_statistics(
            operation=operation_name,
            iterations=iterations,
            total_time_ms=total_time_ms,
            samples=collector.samples,
            success=collector.success,
            errors=collector.errors,
            error_kinds=collector.error_kinds
        )

    def _require_client(self) -> Any:
        if self.client is None:
            raise BenchmarkUsageError("A client is required for endpoint benchmarks")
        return self.client

    async def benchmark_payment_verification(self, endpoint: str, iterations: Optional[int] = None) -> BenchmarkResult:
        """Benchmark ``client.get(endpoint)``, treating payment-required as success."""
        client = self._require_client()
        if not endpoint:
            raise BenchmarkUsageError("An endpoint is required for payment verification")
        return await self.benchmark(
            "Payment Verification",
            payment_tolerant_get(client, endpoint),
            iterations if iterations is not None else self.verification_iterations
        )

    async def benchmark_batch_operations(self, endpoints: Sequence[str], concurrency: Optional[int] = None) -> BenchmarkResult:
        """
        Benchmark concurrent requests over groups of endpoints.

        Endpoints are partitioned into groups of ``concurrency``. Each trial
        fans out one group and waits for every member to settle. The trial
        count is capped at ``BATCH_ITERATION_CAP`` groups.

        Args:
            endpoints: Target URLs.
            concurrency: Group size; defaults to the configured batch concurrency.

        Returns:
            BenchmarkResult for the group trials.

        Raises:
            BenchmarkUsageError: If there are no endpoints or concurrency is not positive.
        """
        client = self._require_client()
        concurrency = concurrency if concurrency is not None else self.batch_concurrency
        if concurrency <= 0:
            raise BenchmarkUsageError(f"Concurrency must be positive, got {concurrency}")
        if not endpoints:
            raise BenchmarkUsageError("At least one endpoint is required for a batch benchmark")

        groups = partition(endpoints, concurrency)
        iterations = min(BenchmarkConstants.BATCH_ITERATION_CAP, len(groups))
        group_operations = [settle_all_group(client, group) for group in groups[:iterations]]
        remaining = iter(group_operations)

        # trial i fans out group i
        async def operation() -> Any:
            return await next(remaining)()

        operation_name = f"Batch Operations (concurrency: {concurrency})"
        logger.info(f"Running benchmark: {operation_name} - {len(endpoints)} endpoints "
                    f"in {len(groups)} groups, {iterations} iterations")
        await self.warmup(operation_name, group_operations[0])
        return await self._run_trials(operation_name, operation, iterations)
