"""Runtime configuration loaded from the environment.

A ``.env`` file at the project root is read first (python-dotenv), then
real environment variables win.  The process environment itself is
never modified.  Bad values fail at startup.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

DEFAULT_ENDPOINT_URL = "https://reqres.in/api/cupcakes"

_ENV_FILE = Path(__file__).resolve().parents[3] / ".env"


@dataclass(frozen=True)
class Settings:
    """Where orders are sent and how chatty the logs are.

    ``timeout_seconds`` of None means the HTTP client's own default.
    """

    endpoint_url: str = DEFAULT_ENDPOINT_URL
    timeout_seconds: float | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not self.endpoint_url:
            raise ValueError("CUPCAKE_ENDPOINT_URL must not be empty")
        if not self.endpoint_url.startswith(("http://", "https://")):
            raise ValueError(
                f"CUPCAKE_ENDPOINT_URL must be an http(s) URL, got {self.endpoint_url!r}"
            )
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError(
                f"CUPCAKE_TIMEOUT_SECONDS must be positive, got {self.timeout_seconds}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown CUPCAKE_LOG_LEVEL {self.log_level!r}")

    @staticmethod
    def from_env(env_file: Path | None = _ENV_FILE) -> Settings:
        env = {}
        if env_file is not None:
            env.update((k, v) for k, v in dotenv_values(env_file).items() if v is not None)
        env.update(os.environ)

        raw_timeout = env.get("CUPCAKE_TIMEOUT_SECONDS", "").strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else None
        except ValueError as exc:
            raise ValueError(
                f"CUPCAKE_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}"
            ) from exc

        return Settings(
            endpoint_url=env.get("CUPCAKE_ENDPOINT_URL", DEFAULT_ENDPOINT_URL).strip(),
            timeout_seconds=timeout,
            log_level=env.get("CUPCAKE_LOG_LEVEL", "WARNING").strip(),
        )
