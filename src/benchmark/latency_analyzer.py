"""Analyzes and computes latency statistics."""
import logging
import math
from typing import Dict, Optional, Sequence

import numpy as np

from .constants import BenchmarkConstants
from .exceptions import BenchmarkUsageError
from .models import BenchmarkResult


# Configure logging
logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int = BenchmarkConstants.ROUND_DIGITS) -> float:
    """Round half away from zero, unlike the built-in banker's rounding."""
    factor = 10 ** digits
    return math.copysign(math.floor(abs(value) * factor + 0.5) / factor, value)


class LatencyAnalyzer:
    """Analyzes and computes latency statistics."""

    PERCENTILES = (0.5, 0.95, 0.99)

    @staticmethod
    def percentile_index(sample_count: int, quantile: float) -> int:
        """Floor-ranked index of ``quantile``, clamped to the sample range."""
        index = math.floor(sample_count * quantile)
        return max(0, min(index, sample_count - 1))

    @staticmethod
    def compute_statistics(
        operation: str,
        iterations: int,
        total_time_ms: float,
        samples: Sequence[float],
        success: int,
        errors: int,
        error_kinds: Optional[Dict[str, int]] = None
    ) -> BenchmarkResult:
        """
        Reduce trial samples to a BenchmarkResult.

        Args:
            operation: Benchmark label.
            iterations: Requested trial count.
            total_time_ms: Wall-clock span covering all trials.
            samples: One duration in milliseconds per trial.
            success: Number of successful trials.
            errors: Number of failed trials.
            error_kinds: Optional failure counts keyed by error kind.

        Returns:
            BenchmarkResult with percentiles, throughput and error rate.

        Raises:
            BenchmarkUsageError: If no samples were recorded or the counts
                do not add up to ``iterations``.
        """
        if len(samples) == 0:
            raise BenchmarkUsageError("No measurements recorded")
        if iterations <= 0:
            raise BenchmarkUsageError(f"Iterations must be positive, got {iterations}")
        if len(samples) != iterations:
            raise BenchmarkUsageError(
                f"Expected {iterations} samples, got {len(samples)}"
            )
        if success + errors != iterations:
            raise BenchmarkUsageError(
                f"success ({success}) + errors ({errors}) != iterations ({iterations})"
            )
        if total_time_ms < 0:
            raise BenchmarkUsageError(f"Total time cannot be negative, got {total_time_ms}")

        # np.sort returns a copy; the caller's samples stay untouched
        ordered = np.sort(np.asarray(samples, dtype=float))
        count = len(ordered)
        p50, p95, p99 = (
            float(ordered[LatencyAnalyzer.percentile_index(count, q)])
            for q in LatencyAnalyzer.PERCENTILES
        )

        if total_time_ms > 0:
            ops_per_second = int(round_half_up(iterations / total_time_ms * 1000, 0))
        else:
            logger.warning(f"Zero wall-clock time for {operation}, throughput reported as 0")
            ops_per_second = 0

        result = BenchmarkResult(
            operation=operation,
            iterations=iterations,
            total_time_ms=round_half_up(total_time_ms),
            avg_time_ms=round_half_up(float(ordered.mean())),
            min_time_ms=round_half_up(float(ordered[0])),
            max_time_ms=round_half_up(float(ordered[-1])),
            p50_ms=round_half_up(p50),
            p95_ms=round_half_up(p95),
            p99_ms=round_half_up(p99),
            ops_per_second=ops_per_second,
            success=success,
            errors=errors,
            error_rate=round_half_up(errors / iterations * 100),
            error_kinds=dict(error_kinds or {})
        )
        logger.debug(f"Computed statistics for {operation}: {result}")
        return result
