from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from article_store.config import settings
from article_store.query_counter import install_query_counter


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """
    Turn on ``PRAGMA foreign_keys`` for every new SQLite connection.

    SQLite ignores FOREIGN KEY clauses unless this pragma is set per
    connection; other backends are left untouched.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Module-level engine variable allows tests to substitute their own engine.
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
)

enable_sqlite_foreign_keys(engine)
install_query_counter(engine)

SessionLocal = sessionmaker(
    engine,
    class_=Session,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    pass


@contextmanager
def session_scope(factory: sessionmaker = SessionLocal) -> Iterator[Session]:
    """One unit of work: commit on success, roll back and re-raise on error."""
    with factory() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
