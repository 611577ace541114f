from contextvars import ContextVar

from sqlalchemy import event
from sqlalchemy.engine import Engine

# ---------------------------------------------------------------------------
# Per-context statement counter
# ---------------------------------------------------------------------------

query_count_var: ContextVar[int] = ContextVar("query_count", default=0)


def install_query_counter(engine: Engine) -> None:
    """
    Register a ``before_cursor_execute`` event listener on *engine* that
    increments ``query_count_var`` for every SQL statement sent to the
    database.

    Must be called once per engine (application engine in ``database.py``,
    test engine in ``conftest.py``).
    """

    @event.listens_for(engine, "before_cursor_execute")
    def _count_query(conn, cursor, statement, parameters, context, executemany):
        query_count_var.set(query_count_var.get() + 1)


def reset_query_count() -> None:
    query_count_var.set(0)


def get_query_count() -> int:
    """Number of statements executed in the current context since the last reset."""
    return query_count_var.get()
