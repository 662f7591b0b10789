"""Custom exceptions for the benchmarking system."""
from typing import Optional

from .models import ErrorKind, OperationFailure


class BenchmarkUsageError(ValueError):
    """Raised when a benchmark is invoked with structurally invalid input."""
    pass


class BenchmarkExecutionError(Exception):
    """Custom exception for benchmark suite failures."""
    pass


class OperationError(Exception):
    """A benchmarked operation failed with a classified reason."""

    def __init__(self, failure: OperationFailure):
        super().__init__(failure.message)
        self.failure = failure

    @property
    def kind(self) -> ErrorKind:
        return self.failure.kind

    @property
    def status_code(self) -> Optional[int]:
        return self.failure.status_code
