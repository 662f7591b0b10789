import json
from pathlib import Path
from typing import Dict, Any, List

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.benchmark.constants import BenchmarkConstants


class BenchmarkSettings(BaseSettings):
    """Configuration for a benchmark suite run.

    Built once by the entry point and handed to the harness and analyzer.
    """

    facilitator_urls: List[str] = list(BenchmarkConstants.DEFAULT_FACILITATOR_URLS)
    rpc_urls: List[str] = list(BenchmarkConstants.DEFAULT_RPC_URLS)
    test_endpoints: List[str] = list(BenchmarkConstants.DEFAULT_TEST_ENDPOINTS)
    probe_timeout: float = BenchmarkConstants.PROBE_TIMEOUT
    request_timeout: float = BenchmarkConstants.DEFAULT_TIMEOUT
    verification_iterations: int = BenchmarkConstants.SUITE_VERIFICATION_ITERATIONS
    batch_concurrency: int = BenchmarkConstants.SUITE_BATCH_CONCURRENCY
    progress_interval: int = BenchmarkConstants.PROGRESS_INTERVAL
    output_dir: Path = Path("bench")
    user_agent: str = "perfbench/0.1.0"
    log_level: str = "INFO"
    library_log_levels: Dict[str, str] = {
        "httpx": "WARNING",
        "httpcore": "WARNING"
    }

    model_config = SettingsConfigDict(
        env_prefix='PERFBENCH_',
    )

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from config.json file."""
        config_path = Path("config.json")
        if config_path.exists():
            with open(config_path, 'r') as f:
                config = json.load(f)
                # Convert output_dir to Path if it's a string
                if "output_dir" in config:
                    config["output_dir"] = Path(config["output_dir"])
                return config
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Environment variables
        2. Init settings (kwargs passed to constructor)
        3. JSON config file
        4. Default values
        """
        def json_source():
            return cls.load_config_from_json()

        return (
            env_settings,
            init_settings,
            json_source,
        )
