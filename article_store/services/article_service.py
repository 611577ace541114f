"""
Article service — lookups and draft creation for the Article aggregate.

Design notes
------------
- Reads issue a single ``articles LEFT OUTER JOIN comments`` select and
  hand the rows to ``row_aggregator``; an article and all its comments
  come back in one round trip (no N+1).
- Writes never patch an in-memory copy.  After the INSERT the article is
  read back by id so the caller always receives store-confirmed state.
- Service functions execute but do not commit; the transaction boundary
  is owned by the caller (``database.session_scope``).
- Store errors (``SQLAlchemyError``) are not caught here.
"""
import logging
from datetime import datetime

from sqlalchemy import insert, select
from sqlalchemy.orm import Session

from article_store.exceptions import InvariantViolationError
from article_store.models import articles, comments
from article_store.schemas import Article
from article_store.services.row_aggregator import aggregate_rows

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Query text
# ---------------------------------------------------------------------------

_a = articles.alias("a")
_c = comments.alias("c")

# select a.id as aid, a.authored, a.title, c.comment, c.id as cid
# from articles a left join comments c on a.id = c.article_id
_JOINED_SELECT = (
    select(
        _a.c.id.label("aid"),
        _a.c.authored.label("authored"),
        _a.c.title.label("title"),
        _c.c.comment.label("comment"),
        _c.c.id.label("cid"),
    )
    .select_from(_a.outerjoin(_c, _a.c.id == _c.c.article_id))
    .order_by(_a.c.id, _c.c.id)
)


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

def find_article_by_id(db: Session, article_id: int) -> Article | None:
    """
    Return the article identified by *article_id* with its comments.

    Returns None when no such article exists; an existing article
    without comments comes back with an empty ``comments`` tuple.
    """
    result = db.execute(_JOINED_SELECT.where(_a.c.id == article_id))
    found = aggregate_rows(result)
    if not found:
        return None
    return found[0]


def find_all(db: Session) -> set[Article]:
    """Return every article with its comments."""
    result = db.execute(_JOINED_SELECT)
    return set(aggregate_rows(result))


def create_draft(db: Session, title: str, authored: datetime) -> Article:
    """
    Insert a new article and return it as read back from the store.

    Raises ``ValueError`` for a blank title, and ``InvariantViolationError``
    when the INSERT does not affect exactly one row or yields no generated
    key.
    """
    if not title or not title.strip():
        raise ValueError("title must not be empty")

    result = db.execute(insert(articles).values(title=title, authored=authored))
    primary_key = result.inserted_primary_key
    article_id = primary_key[0] if primary_key else None
    if result.rowcount != 1 or article_id is None:
        raise InvariantViolationError(
            f"insert into articles affected {result.rowcount} row(s) "
            f"and returned key {article_id!r}"
        )

    logger.debug("Created draft article id=%s title=%r", article_id, title)
    article = find_article_by_id(db, article_id)
    if article is None:
        raise InvariantViolationError(f"article {article_id} vanished after insert")
    return article
