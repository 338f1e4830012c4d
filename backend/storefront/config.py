from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Storefront API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./storefront.db"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Storefront presentation
    storefront_name: str = "Store | Minimal Modern Storefront"
    seed_demo_content: bool = False

    # Per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL statements
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_composer: str = "INFO"         # PageComposer stage tracing

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
