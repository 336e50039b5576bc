import os
from dataclasses import dataclass
from typing import Mapping

from app.errors import ConfigError

DEFAULT_PORT = 8081
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True)
class Config:
    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    log_level: str = "info"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> "Config":
        raw = environ.get("PORT", "")
        try:
            port = int(raw) if raw else DEFAULT_PORT
        except ValueError:
            raise ConfigError(f"invalid PORT: {raw!r}")
        if not 0 < port < 65536:
            raise ConfigError(f"PORT out of range: {port}")
        level = (environ.get("LOG_LEVEL") or "info").lower()
        if level not in LOG_LEVELS:
            raise ConfigError(f"invalid LOG_LEVEL: {level!r}")
        return cls(port=port, host=environ.get("HOST") or "0.0.0.0", log_level=level)
