"""Turns benchmark results and network metrics into optimization advice."""
from typing import List, Sequence

from .constants import BenchmarkConstants, RecommendationThresholds
from .models import BenchmarkResult, NetworkMetrics, Recommendation


HIGH_LATENCY = Recommendation(
    title="High average latency detected. Consider:",
    suggestions=[
        "Using a closer RPC endpoint",
        "Implementing request caching",
        "Using connection pooling"
    ]
)
HIGH_FACILITATOR_LATENCY = Recommendation(
    title="Facilitator latency is high. Consider:",
    suggestions=[
        "Using a geographically closer facilitator",
        "Implementing facilitator health checking"
    ]
)
HIGH_ERROR_RATE = Recommendation(
    title="Error rate is elevated. Consider:",
    suggestions=[
        "Implementing retry logic with exponential backoff",
        "Adding circuit breaker patterns",
        "Monitoring facilitator health"
    ]
)
LOW_THROUGHPUT = Recommendation(
    title="Low throughput detected. Consider:",
    suggestions=[
        "Batching requests when possible",
        "Using connection keep-alive",
        "Optimizing payload sizes"
    ]
)
ALL_GOOD = Recommendation(title="Performance looks good! No immediate optimizations needed.")


class RecommendationEngine:
    """Applies a fixed, ordered rule table. Every matching rule contributes."""

    @staticmethod
    def generate(results: Sequence[BenchmarkResult], network_metrics: NetworkMetrics) -> List[Recommendation]:
        """
        Produce recommendations for the given results and network metrics.

        Rules are evaluated in table order: average latency, facilitator
        latency, error rate, throughput. Result-based rules are skipped when
        ``results`` is empty.

        Returns:
            Matching recommendations, or a single positive one if none matched.
        """
        recommendations: List[Recommendation] = []

        if results:
            mean_latency = sum(r.avg_time_ms for r in results) / len(results)
            if mean_latency > RecommendationThresholds.HIGH_AVG_LATENCY_MS:
                recommendations.append(HIGH_LATENCY)

        facilitator_latency = network_metrics.facilitator_latency
        if (facilitator_latency != BenchmarkConstants.SENTINEL_LATENCY
                and facilitator_latency > RecommendationThresholds.HIGH_FACILITATOR_LATENCY_MS):
            recommendations.append(HIGH_FACILITATOR_LATENCY)

        if results:
            if any(r.error_rate > RecommendationThresholds.HIGH_ERROR_RATE_PCT for r in results):
                recommendations.append(HIGH_ERROR_RATE)
            if max(r.ops_per_second for r in results) < RecommendationThresholds.LOW_OPS_PER_SECOND:
                recommendations.append(LOW_THROUGHPUT)

        return recommendations or [ALL_GOOD]

    @staticmethod
    def render_lines(recommendations: Sequence[Recommendation]) -> List[str]:
        """Flatten recommendations to text lines, suggestions indented as bullets."""
        lines: List[str] = []
        for recommendation in recommendations:
            lines.append(recommendation.title)
            lines.extend(f"  • {suggestion}" for suggestion in recommendation.suggestions)
        return lines
