"""Runtime settings resolved from the environment.

Command-line options take precedence; they are applied on top of these
values by the CLI entry point.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DATA_FILE_ENV = "ORDER_ANALYTICS_DATA_FILE"
LOG_LEVEL_ENV = "ORDER_ANALYTICS_LOG_LEVEL"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_FILE = Path(__file__).resolve().parents[3] / "data" / "products_orders.json"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    data_file: Path
    log_level: str

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        data_file = env.get(DATA_FILE_ENV)
        return Settings(
            data_file=Path(data_file).expanduser() if data_file else DEFAULT_DATA_FILE,
            log_level=env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
        )
