# Command line entry point for the benchmark suite

import sys

from src.benchmark import BenchmarkRunner
from src.shared.config import BenchmarkSettings
from src.shared.logging import LoggingManager


if __name__ == "__main__":
    args = [arg.lower() for arg in sys.argv[1:]]
    run_network = '--skip-network' not in args
    export = '--no-export' not in args

    settings = BenchmarkSettings()
    LoggingManager.setup_logging(settings.log_level, settings.library_log_levels)

    runner = BenchmarkRunner(settings, run_network=run_network, export=export)
    try:
        runner.run()
    except Exception:
        sys.exit(1)
