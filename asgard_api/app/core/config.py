"""
Simple configuration management.

The ``Settings`` dataclass is built from environment variables by
``Settings.from_env``.  Defaults are provided for every field except
that an unparsable ``APP_PORT`` or timeout fails fast at startup.  In a
production deployment override these via environment variables or a
``.env`` file in the working directory.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    value = float(raw)
    if value <= 0:
        raise ValueError(f"{name} must be a positive number of seconds")
    return value


def _port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ValueError("APP_PORT must be an integer between 0 and 65535") from None
    if not 0 <= port <= 65535:
        raise ValueError("APP_PORT must be an integer between 0 and 65535")
    return port


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = "Asgard API"
    api_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None

    host: str = "127.0.0.1"
    port: int = 8080

    # Path to the SQLite database.  A relative path is resolved against
    # the project root by the ``db`` module.
    database_url: str = "asgard.db"

    # Upper bound for the ``/health`` storage round‑trip.
    health_timeout_seconds: float = 2.0

    # Optional upper bound for every repository call.  ``None`` leaves
    # CRUD operations unbounded.
    store_timeout_seconds: Optional[float] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            project_name=os.getenv("PROJECT_NAME", cls.project_name),
            api_version=os.getenv("API_VERSION", cls.api_version),
            debug=os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"},
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            log_file=os.getenv("LOG_FILE") or None,
            host=os.getenv("APP_HOST", cls.host),
            port=_port(os.getenv("APP_PORT", str(cls.port))),
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            health_timeout_seconds=_optional_float("HEALTH_TIMEOUT_SECONDS") or cls.health_timeout_seconds,
            store_timeout_seconds=_optional_float("STORE_TIMEOUT_SECONDS"),
        )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Values from a local
# ``.env`` file fill in variables that are not already set.
load_dotenv()
settings = Settings.from_env()
