"""Configuration settings loaded from the environment.

python-dotenv reads an optional ``.env`` file from the working directory
first; real environment variables take precedence over it.  Values are
validated when the settings object is built so a bad value fails at
startup rather than mid-run.

Variables:
    ORDERSIM_DATA_DIR          directory holding the history snapshot (./data)
    ORDERSIM_BACKEND_URL       backend base URL; empty disables notifications
    ORDERSIM_BACKEND_TIMEOUT   HTTP timeout in seconds (5)
    ORDERSIM_LOG_LEVEL         logging level name (WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_BACKEND_URL = "http://localhost:8080"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    backend_url: str = DEFAULT_BACKEND_URL
    backend_timeout_seconds: float = 5.0
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.backend_timeout_seconds <= 0:
            raise ValueError(
                "ORDERSIM_BACKEND_TIMEOUT must be positive, "
                f"got {self.backend_timeout_seconds}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"ORDERSIM_LOG_LEVEL is not a logging level: {self.log_level!r}")

    @property
    def backend_enabled(self) -> bool:
        return bool(self.backend_url)


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    timeout_raw = os.getenv("ORDERSIM_BACKEND_TIMEOUT", "5")
    try:
        timeout = float(timeout_raw)
    except ValueError as exc:
        raise ValueError(
            f"ORDERSIM_BACKEND_TIMEOUT must be a number, got {timeout_raw!r}"
        ) from exc
    return Settings(
        data_dir=Path(os.getenv("ORDERSIM_DATA_DIR", "data")),
        backend_url=os.getenv("ORDERSIM_BACKEND_URL", DEFAULT_BACKEND_URL).strip(),
        backend_timeout_seconds=timeout,
        log_level=os.getenv("ORDERSIM_LOG_LEVEL", "WARNING"),
    )
