"""Data models for the benchmarking system."""
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorKind(Enum):
    """Classified reason for a failed operation."""
    PAYMENT_REQUIRED = "payment_required"
    AUTH = "auth"
    CLIENT = "client"
    SERVER = "server"
    TIMEOUT = "timeout"
    NETWORK = "network"
    PARTIAL_BATCH = "partial_batch"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class OperationFailure:
    """Structured reason attached to a failed trial."""
    kind: ErrorKind
    message: str
    status_code: Optional[int] = None
    member_kinds: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class BenchmarkResult:
    """Statistical summary of one benchmark run."""
    operation: str
    iterations: int
    total_time_ms: float
    avg_time_ms: float
    min_time_ms: float
    max_time_ms: float
    p50_ms: float
    p95_ms: float
    p99_ms: float
    ops_per_second: int
    success: int
    errors: int
    error_rate: float
    error_kinds: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class NetworkMetrics:
    """Aggregated endpoint latencies from one network analysis.

    Latencies are averages in milliseconds, or ``SENTINEL_LATENCY`` when no
    endpoint of that class answered. ``data_transferred`` is not measured and
    is always zero.
    """
    facilitator_latency: float
    rpc_latency: float
    total_round_trips: int
    data_transferred: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Recommendation:
    """A titled group of optimization suggestions."""
    title: str
    suggestions: List[str] = field(default_factory=list)
