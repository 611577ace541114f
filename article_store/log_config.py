"""Centralized logging configuration.

Applies per-category log levels from Settings so that noisy loggers
(SQLAlchemy statements, Alembic's migration chatter) can be tuned without
affecting the rest of the application.

Usage:
    from article_store.log_config import setup_logging
    setup_logging()   # Call once at startup
"""

import logging
import sys

from article_store.config import settings

# Logger name -> Settings field holding its level.
_CATEGORY_MAP: dict[str, list[str]] = {
    "LOG_LEVEL_SQL": [
        "sqlalchemy.engine",
        "sqlalchemy.pool",
    ],
    "LOG_LEVEL": [
        "alembic",
        "article_store",
    ],
}


def setup_logging() -> None:
    """Configure Python logging levels from application settings."""
    root = logging.getLogger()
    root.setLevel(_parse_level(settings.LOG_LEVEL))

    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s - %(message)s")
        )
        root.addHandler(handler)

    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field, "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    # DEBUG logs every SQL statement through the handlers above; the engine
    # itself is created without echo so it never adds a handler of its own.
    if settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s, sql=%s", settings.LOG_LEVEL, settings.LOG_LEVEL_SQL
    )


def _parse_level(value: str) -> int:
    """Convert a level name like ``"debug"`` to its numeric value (INFO if unknown)."""
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.INFO
