"""Progress observers for benchmark runs."""
import logging
from typing import List, Protocol, Tuple


# Configure logging
logger = logging.getLogger(__name__)


class ProgressObserver(Protocol):
    """Receives progress updates between trials."""

    def on_progress(self, completed: int, total: int) -> None:
        ...


class LoggingProgressObserver:
    """Reports progress through the module logger."""

    def on_progress(self, completed: int, total: int) -> None:
        logger.info(f"Progress: {completed}/{total} ({completed / total * 100:.1f}%)")


class RecordingProgressObserver:
    """Keeps every progress call, mainly for inspection in tests."""

    def __init__(self):
        self.calls: List[Tuple[int, int]] = []

    def on_progress(self, completed: int, total: int) -> None:
        self.calls.append((completed, total))
