"""Startup runner: migrate, seed the demo data, then print every article."""
import argparse
import logging

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from article_store.config import settings
from article_store.database import engine, session_scope
from article_store.log_config import setup_logging
from article_store.migrations import run_migrations
from article_store.query_counter import get_query_count, reset_query_count
from article_store.seed import seed_demo_data
from article_store.services import article_service

logger = logging.getLogger(__name__)


def run(bind: Engine = engine, migrate: bool = True, seed: bool = True) -> list[str]:
    """
    Bring the schema up to date, optionally seed, and return one line per
    stored article.  Each step is its own unit of work.
    """
    if migrate:
        with bind.begin() as connection:
            run_migrations(connection)

    factory = sessionmaker(bind, class_=Session, expire_on_commit=False)

    if seed:
        with session_scope(factory) as db:
            seed_demo_data(db)

    reset_query_count()
    with session_scope(factory) as db:
        found = article_service.find_all(db)
    logger.info("Loaded %d articles in %d query(ies)", len(found), get_query_count())

    return [repr(article) for article in sorted(found, key=lambda a: a.id)]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Migrate and inspect the article store")
    parser.add_argument(
        "--skip-migrations",
        action="store_true",
        help="Do not apply pending Alembic changesets before starting",
    )
    parser.add_argument("--no-seed", action="store_true", help="Do not insert the demo articles")
    args = parser.parse_args(argv)

    setup_logging()
    lines = run(
        migrate=settings.RUN_MIGRATIONS and not args.skip_migrations,
        seed=settings.SEED_DEMO_DATA and not args.no_seed,
    )
    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
