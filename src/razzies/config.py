"""Configuration from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

DEFAULT_CSV_PATH = Path("data/movielist.csv")

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
)

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    csv_path: Path = DEFAULT_CSV_PATH
    # None keeps the catalogue table in an in-memory SQLite database
    db_path: Path | None = None
    log_level: str = "INFO"
    log_json: bool = True
    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    host: str = "127.0.0.1"
    port: int = 3000


def _split_origins(value: str) -> tuple[str, ...]:
    return tuple(origin.strip() for origin in value.split(",") if origin.strip())


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build settings from an environment mapping.

    Args:
        environ: Variables to read. Defaults to os.environ.

    Returns:
        Settings with defaults for anything unset.
    """
    if environ is None:
        environ = dict(os.environ)

    db_path = environ.get("RAZZIES_DB_PATH")
    cors = environ.get("RAZZIES_CORS_ORIGINS")

    return Settings(
        csv_path=Path(environ.get("RAZZIES_CSV_PATH", str(DEFAULT_CSV_PATH))),
        db_path=Path(db_path) if db_path else None,
        log_level=environ.get("RAZZIES_LOG_LEVEL", "INFO").upper(),
        log_json=environ.get("RAZZIES_LOG_JSON", "true").strip().lower() in _TRUE_VALUES,
        cors_origins=_split_origins(cors) if cors is not None else DEFAULT_CORS_ORIGINS,
        host=environ.get("HOST", "127.0.0.1"),
        port=int(environ.get("PORT", "3000")),
    )


@lru_cache
def get_settings() -> Settings:
    """Load settings from the process environment (cached)."""
    return load_settings()
