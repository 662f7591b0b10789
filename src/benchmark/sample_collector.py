"""Collects per-trial timing samples."""
from collections import Counter
from typing import Dict, List, Optional

from .models import ErrorKind


class SampleCollector:
    """Accumulates one duration per trial, successful or not."""

    def __init__(self):
        self._samples: List[float] = []
        self.success = 0
        self.errors = 0
        self._error_kinds: Counter = Counter()

    def record_success(self, elapsed_ms: float) -> None:
        self._samples.append(elapsed_ms)
        self.success += 1

    def record_failure(self, elapsed_ms: float, kind: Optional[ErrorKind] = None,
                       member_kinds: Optional[Dict[str, int]] = None) -> None:
        """Record a failed trial; its elapsed time up to failure still counts.

        ``member_kinds`` holds per-member failure counts of a batch trial and is
        tallied under ``member_<kind>`` keys.
        """
        self._samples.append(elapsed_ms)
        self.errors += 1
        self._error_kinds[(kind or ErrorKind.UNKNOWN).value] += 1
        for member_kind, count in (member_kinds or {}).items():
            self._error_kinds[f"member_{member_kind}"] += count

    @property
    def samples(self) -> List[float]:
        return list(self._samples)

    @property
    def error_kinds(self) -> Dict[str, int]:
        return dict(self._error_kinds)

    def __len__(self) -> int:
        return len(self._samples)
