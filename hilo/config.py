"""
Runtime settings, read from HILO_* environment variables.

None of these change the rules of the game; they configure the API
server and the CLI around it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import os


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class Settings:
    env: str = "development"
    log_level: str = "INFO"
    allowed_origins: list[str] = field(default_factory=lambda: ["*"])
    session_max_age: int = 3600
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def is_development(self) -> bool:
        return self.env == "development"

    @classmethod
    def from_env(cls) -> Settings:
        origins = os.getenv("HILO_ALLOWED_ORIGINS", "*")
        return cls(
            env=os.getenv("HILO_ENV", "development"),
            log_level=os.getenv("HILO_LOG_LEVEL", "INFO").upper(),
            allowed_origins=[o.strip() for o in origins.split(",") if o.strip()],
            session_max_age=_int_env("HILO_SESSION_MAX_AGE", 3600),
            host=os.getenv("HILO_HOST", "127.0.0.1"),
            port=_int_env("HILO_PORT", 8000),
        )
