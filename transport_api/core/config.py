"""
Configuration helpers for the transport projects API.

Settings are read from environment variables once and cached, so routers and
services never touch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

BASE_DIR = Path(__file__).resolve().parents[2]
DEFAULT_DATA_FILE = BASE_DIR / "data" / "projects.json"

SERVICE_NAME = "Transportation Innovations Moscow API"
SERVICE_VERSION = "1.0.0"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    data_file: Path
    cors_origins: tuple[str, ...]
    seed_sample_data: bool
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _origins(value: str | None) -> tuple[str, ...]:
        raw = (value or "*").split(",")
        return tuple(origin.strip().rstrip("/") for origin in raw if origin.strip())

    data_file = (os.getenv("DATA_FILE") or "").strip()
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "5000"), 5000),
        data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
        cors_origins=_origins(os.getenv("CORS_ORIGINS")),
        seed_sample_data=_bool(os.getenv("SEED_SAMPLE_DATA"), True),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
