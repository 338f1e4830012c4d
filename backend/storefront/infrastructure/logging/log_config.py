"""Logging setup for the storefront API.

Levels come from Settings, one per category, so SQL echo or composition
tracing can be turned up without flooding the rest of the output::

    LOG_LEVEL_SQL=INFO LOG_LEVEL_COMPOSER=DEBUG uvicorn storefront.main:app
"""

import logging
import sys

from storefront.config import Settings, get_settings

_FORMAT = "%(levelname)-8s %(name)s — %(message)s"

# (Settings field, logger names it controls)
_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("log_level_sql", ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite")),
    ("log_level_uvicorn", ("uvicorn", "uvicorn.access", "uvicorn.error")),
    (
        "log_level_composer",
        (
            "PageComposer",
            "storefront.application.services.page_composer",
            "storefront.application.rendering",
        ),
    ),
)


def setup_logging(settings: Settings | None = None) -> None:
    """Apply root and per-category levels. Safe to call more than once."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    # Uvicorn usually installs a handler; scripts and tests may not.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    applied: dict[str, str] = {}
    for field_name, logger_names in _CATEGORIES:
        raw_level: str = getattr(settings, field_name, "INFO")
        for name in logger_names:
            logging.getLogger(name).setLevel(_parse_level(raw_level))
        applied[field_name.removeprefix("log_level_")] = raw_level

    logging.getLogger(__name__).debug(
        "Logging configured — root=%s, %s",
        settings.log_level,
        ", ".join(f"{category}={level}" for category, level in applied.items()),
    )


def _parse_level(raw: str) -> int:
    """Level name → logging constant; unknown names mean INFO."""
    numeric = logging.getLevelName(raw.strip().upper())
    return numeric if isinstance(numeric, int) else logging.INFO
