"""Benchmark package initialization."""
from .models import BenchmarkResult, ErrorKind, NetworkMetrics, OperationFailure, Recommendation
from .constants import BenchmarkConstants, RecommendationThresholds
from .exceptions import BenchmarkExecutionError, BenchmarkUsageError, OperationError
from .sample_collector import SampleCollector
from .latency_analyzer import LatencyAnalyzer
from .progress import LoggingProgressObserver, ProgressObserver, RecordingProgressObserver
from .operations import classify_error, partition, payment_tolerant_get, settle_all_group
from .harness import BenchmarkHarness
from .endpoint_prober import EndpointProber
from .network_analyzer import NetworkAnalyzer
from .recommendation_engine import RecommendationEngine
from .result_exporter import ResultExporter
from .runner import BenchmarkRunner, SuiteReport

__all__ = [
    'BenchmarkResult',
    'ErrorKind',
    'NetworkMetrics',
    'OperationFailure',
    'Recommendation',
    'BenchmarkConstants',
    'RecommendationThresholds',
    'BenchmarkExecutionError',
    'BenchmarkUsageError',
    'OperationError',
    'SampleCollector',
    'LatencyAnalyzer',
    'LoggingProgressObserver',
    'ProgressObserver',
    'RecordingProgressObserver',
    'classify_error',
    'partition',
    'payment_tolerant_get',
    'settle_all_group',
    'BenchmarkHarness',
    'EndpointProber',
    'NetworkAnalyzer',
    'RecommendationEngine',
    'ResultExporter',
    'BenchmarkRunner',
    'SuiteReport'
]
