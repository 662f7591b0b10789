"""Constants for the benchmarking system."""
from typing import Any, Dict, List


class BenchmarkConstants:
    """Centralized constants for benchmark configuration."""
    DEFAULT_ITERATIONS = 100
    VERIFICATION_ITERATIONS = 50
    DEFAULT_BATCH_CONCURRENCY = 5
    BATCH_ITERATION_CAP = 10  # bounds batch wall-clock time
    # default suite run by the CLI
    SUITE_VERIFICATION_ITERATIONS = 25
    SUITE_BATCH_CONCURRENCY = 3
    PROGRESS_INTERVAL = 10
    DEFAULT_TIMEOUT = 30  # seconds
    PROBE_TIMEOUT = 10  # seconds

    SENTINEL_LATENCY = -1.0
    DATA_TRANSFERRED_UNTRACKED = 0
    ROUND_DIGITS = 2

    PAYMENT_REQUIRED_STATUS = 402
    FACILITATOR_HEALTH_PATH = "/supported"
    RPC_PROBE_PAYLOAD: Dict[str, Any] = {
        "jsonrpc": "2.0",
        "id": 1,
        "method": "eth_blockNumber",
        "params": []
    }

    DEFAULT_FACILITATOR_URLS: List[str] = [
        "https://facilitator.x402.org",
        "https://facilitator.thirdweb.com",
        "https://facilitator.xpay.sh"
    ]
    DEFAULT_RPC_URLS: List[str] = [
        "https://mainnet.base.org",
        "https://base-mainnet.public.blastapi.io",
        "https://base.gateway.tenderly.co"
    ]
    DEFAULT_TEST_ENDPOINTS: List[str] = [
        "http://localhost:3000/protected",
        "http://localhost:3001/api/data",
        "http://localhost:3002/service"
    ]


class RecommendationThresholds:
    """Thresholds used by the recommendation rules."""
    HIGH_AVG_LATENCY_MS = 500
    HIGH_FACILITATOR_LATENCY_MS = 200
    HIGH_ERROR_RATE_PCT = 5
    LOW_OPS_PER_SECOND = 10
