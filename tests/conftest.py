"""
Test infrastructure for the article store.

Strategy
--------
- SQLite in-memory keeps the suite fast and self-contained; no Postgres
  instance is needed in CI.
- StaticPool forces every session to share the same in-memory database
  connection, which is required because SQLite in-memory databases are
  connection-scoped; a new connection would see an empty database.
- Foreign keys are switched on for the test engine so the ``article_fk``
  constraint behaves as it does on Postgres.
- All tables are created fresh before each test and dropped after, giving
  each test a clean isolated state.  Migration tests use their own engine
  (``fresh_engine``) so Alembic starts from an empty database.
"""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from article_store.database import Base, enable_sqlite_foreign_keys
from article_store.query_counter import install_query_counter, reset_query_count

# Import tables so they are registered on Base.metadata.
import article_store.models  # noqa: F401

# ---------------------------------------------------------------------------
# Test database engine — SQLite in-memory
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite:///:memory:"


def _make_engine():
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    install_query_counter(engine)
    return engine


engine_test = _make_engine()

session_test = sessionmaker(
    engine_test,
    class_=Session,
    expire_on_commit=False,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def setup_db():
    """Create all tables before each test, drop after to guarantee isolation."""
    Base.metadata.create_all(engine_test)
    reset_query_count()
    yield
    Base.metadata.drop_all(engine_test)


@pytest.fixture
def db_session() -> Session:
    """
    Yield a live Session for tests that call the services directly.

    Nothing is committed; the session is rolled back when it closes.
    """
    with session_test() as session:
        yield session


@pytest.fixture
def fresh_engine():
    """A separate, empty in-memory database for migration tests."""
    engine = _make_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory() -> sessionmaker:
    """The test sessionmaker, for tests that manage their own units of work."""
    return session_test
