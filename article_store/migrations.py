"""Programmatic access to the Alembic changesets.

The changesets ship inside the package (``article_store/alembic``) so an
installed ``article-store`` command can apply them.  The CLI equivalent is
``alembic upgrade head`` from the repository root; ``main`` calls
:func:`run_migrations` at startup so the schema is ready before any
repository operation runs.
"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy.engine import Connection

from article_store.config import settings

logger = logging.getLogger(__name__)

SCRIPT_LOCATION = Path(__file__).resolve().parent / "alembic"


def alembic_config(connection: Connection | None = None) -> Config:
    """
    Build the Alembic ``Config`` used by the helpers below.

    No ini file is read.  When *connection* is given the migrations run on
    it (inside whatever transaction it already has); otherwise
    ``settings.DATABASE_URL`` is used.
    """
    config = Config()
    config.set_main_option("script_location", str(SCRIPT_LOCATION))
    config.set_main_option("sqlalchemy.url", settings.DATABASE_URL.replace("%", "%%"))
    if connection is not None:
        config.attributes["connection"] = connection
    return config


def run_migrations(connection: Connection | None = None, revision: str = "head") -> None:
    command.upgrade(alembic_config(connection), revision)
    logger.info("Database migrated to %s.", revision)


def downgrade_migrations(connection: Connection | None = None, revision: str = "base") -> None:
    command.downgrade(alembic_config(connection), revision)
    logger.info("Database downgraded to %s.", revision)
