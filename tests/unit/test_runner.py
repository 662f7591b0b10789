"""Unit tests for the benchmark suite runner."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.benchmark.exceptions import BenchmarkExecutionError
from src.benchmark.recommendation_engine import ALL_GOOD
from src.benchmark.runner import BenchmarkRunner
from src.shared.config import BenchmarkSettings
from tests.test_const import TEST_ENDPOINTS, TEST_FACILITATOR_URLS, TEST_RPC_URLS


def make_settings(tmp_path, **overrides):
    values = dict(
        facilitator_urls=TEST_FACILITATOR_URLS,
        rpc_urls=TEST_RPC_URLS,
        test_endpoints=TEST_ENDPOINTS[:6],
        verification_iterations=4,
        batch_concurrency=3,
        output_dir=tmp_path / "bench"
    )
    values.update(overrides)
    return BenchmarkSettings(**values)


def fast_prober(latency=20.0):
    prober = MagicMock()
    prober.measure_facilitator_latency = AsyncMock(return_value=latency)
    prober.measure_rpc_latency = AsyncMock(return_value=latency)
    return prober


class TestBenchmarkRunner:

    @pytest.mark.asyncio
    async def test_runs_both_benchmarks_and_network(self, tmp_path, mock_client):
        settings = make_settings(tmp_path)
        runner = BenchmarkRunner(settings, client=mock_client, prober=fast_prober())

        report = await runner.run_async()

        assert [r.operation for r in report.results] == [
            "Payment Verification", "Batch Operations (concurrency: 3)"
        ]
        assert report.results[0].iterations == 4
        assert report.results[1].iterations == 2
        assert report.network_metrics.total_round_trips == 5
        assert report.network_metrics.facilitator_latency == 20.0
        assert (tmp_path / "bench" / "benchmark_results.csv").exists()
        assert (tmp_path / "bench" / "network_metrics.json").exists()

    @pytest.mark.asyncio
    async def test_skip_network_and_export(self, tmp_path, mock_client):
        settings = make_settings(tmp_path)
        prober = fast_prober()
        runner = BenchmarkRunner(settings, run_network=False, export=False, client=mock_client, prober=prober)

        report = await runner.run_async()

        prober.measure_facilitator_latency.assert_not_awaited()
        assert report.network_metrics.total_round_trips == 0
        assert report.recommendations == [ALL_GOOD]
        assert not (tmp_path / "bench").exists()

    @pytest.mark.asyncio
    async def test_no_endpoints_skips_benchmarks(self, tmp_path, mock_client):
        settings = make_settings(tmp_path, test_endpoints=[])
        runner = BenchmarkRunner(settings, export=False, client=mock_client, prober=fast_prober())

        report = await runner.run_async()

        assert report.results == []
        mock_client.get.assert_not_awaited()

    def test_run_wraps_failures(self, tmp_path, mock_client):
        settings = make_settings(tmp_path)
        prober = MagicMock()
        prober.measure_facilitator_latency = AsyncMock(side_effect=RuntimeError("broken prober"))
        prober.measure_rpc_latency = AsyncMock(return_value=1.0)
        runner = BenchmarkRunner(settings, export=False, client=mock_client, prober=prober)

        with pytest.raises(BenchmarkExecutionError, match="broken prober"):
            runner.run()
