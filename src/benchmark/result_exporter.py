"""Handles exporting benchmark results to various formats."""
import json
import logging
from pathlib import Path
from typing import Dict, List, Sequence, Union

import pandas as pd

from .models import BenchmarkResult, NetworkMetrics


# Configure logging
logger = logging.getLogger(__name__)


class ResultExporter:
    """Handles exporting benchmark results to various formats."""

    TABLE_COLUMNS = {
        "operation": "Operation",
        "avg_time_ms": "Avg (ms)",
        "min_time_ms": "Min",
        "max_time_ms": "Max",
        "p50_ms": "P50",
        "p95_ms": "P95",
        "p99_ms": "P99",
        "ops_per_second": "Ops/sec",
        "errors": "Errors"
    }
    OPERATION_WIDTH = 30

    @staticmethod
    def results_to_frame(results: Sequence[BenchmarkResult]) -> pd.DataFrame:
        """One row per result, error kinds serialized as JSON."""
        rows = []
        for result in results:
            row = result.to_dict()
            row["error_kinds"] = json.dumps(row["error_kinds"], sort_keys=True)
            rows.append(row)
        return pd.DataFrame(rows, columns=list(BenchmarkResult.__dataclass_fields__))

    @staticmethod
    def format_results_table(results: Sequence[BenchmarkResult]) -> str:
        """
        Render results as a fixed-width text table.

        Args:
            results: Benchmark results to render.

        Returns:
            The table as a single string, or an empty string for no results.
        """
        if not results:
            return ""
        df = ResultExporter.results_to_frame(results)[list(ResultExporter.TABLE_COLUMNS)].copy()
        df["operation"] = df["operation"].str.slice(0, ResultExporter.OPERATION_WIDTH)
        df = df.rename(columns=ResultExporter.TABLE_COLUMNS)
        return df.to_string(index=False, float_format=lambda v: f"{v:.1f}")

    @staticmethod
    def save_results(results: Sequence[BenchmarkResult], output_path: Union[Path, str]) -> None:
        """
        Save results to CSV.

        Args:
            results: Benchmark results.
            output_path: Path to save CSV.
        """
        ResultExporter.results_to_frame(results).to_csv(output_path, index=False)
        logger.info(f"CSV saved: {output_path}")

    @staticmethod
    def load_results(input_path: Union[Path, str]) -> List[BenchmarkResult]:
        """
        Load results previously written by save_results.

        Args:
            input_path: Path to load CSV from.

        Returns:
            Results in file order.
        """
        df = pd.read_csv(input_path)
        results = []
        for _, row in df.iterrows():
            error_kinds = row.get("error_kinds")
            results.append(BenchmarkResult(
                operation=str(row["operation"]),
                iterations=int(row["iterations"]),
                total_time_ms=float(row["total_time_ms"]),
                avg_time_ms=float(row["avg_time_ms"]),
                min_time_ms=float(row["min_time_ms"]),
                max_time_ms=float(row["max_time_ms"]),
                p50_ms=float(row["p50_ms"]),
                p95_ms=float(row["p95_ms"]),
                p99_ms=float(row["p99_ms"]),
                ops_per_second=int(row["ops_per_second"]),
                success=int(row["success"]),
                errors=int(row["errors"]),
                error_rate=float(row["error_rate"]),
                error_kinds=json.loads(error_kinds) if isinstance(error_kinds, str) else {}
            ))

        logger.info(f"Results loaded from CSV: {input_path}")
        return results

    @staticmethod
    def save_network_metrics(metrics: NetworkMetrics, output_path: Union[Path, str]) -> None:
        """Save network metrics as JSON."""
        with open(output_path, 'w') as f:
            json.dump(metrics.to_dict(), f, indent=2)
        logger.info(f"Network metrics saved: {output_path}")

    @staticmethod
    def load_network_metrics(input_path: Union[Path, str]) -> NetworkMetrics:
        with open(input_path, 'r') as f:
            data: Dict = json.load(f)
        return NetworkMetrics(**data)
