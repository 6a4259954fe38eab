from __future__ import annotations

import os
from dataclasses import dataclass

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class Settings:
    """Boundary settings loaded from environment in a type-safe, framework-free way."""

    log_level: str
    log_rejections: bool
    environment: str
    http_timeout: float

    @staticmethod
    def from_env() -> Settings:
        prefix = "SHAPEGUARD_"
        log_level = os.getenv(f"{prefix}LOG_LEVEL", "INFO").strip().upper() or "INFO"
        rejections_raw = os.getenv(f"{prefix}LOG_REJECTIONS", "true").strip().lower()
        environment = os.getenv(f"{prefix}ENV", "local").strip() or "local"
        timeout_raw = os.getenv(f"{prefix}HTTP_TIMEOUT", "10.0").strip() or "10.0"
        try:
            http_timeout = float(timeout_raw)
        except ValueError as exc:
            raise ValueError(
                f"{prefix}HTTP_TIMEOUT must be a number of seconds, got {timeout_raw!r}"
            ) from exc
        if http_timeout <= 0:
            raise ValueError(f"{prefix}HTTP_TIMEOUT must be positive, got {http_timeout}")
        return Settings(
            log_level=log_level,
            log_rejections=rejections_raw not in _FALSE_VALUES,
            environment=environment,
            http_timeout=http_timeout,
        )
