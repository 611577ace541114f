"""
Comment service — append-only comment creation for the Article aggregate.

Comments cannot be edited or deleted.  The target article's existence is
enforced only by the ``article_fk`` foreign key; an unknown id surfaces as
the store's ``IntegrityError``.
"""
import logging

from sqlalchemy import insert
from sqlalchemy.orm import Session

from article_store.exceptions import ArticleNotFoundError
from article_store.models import comments
from article_store.schemas import Article
from article_store.services import article_service

logger = logging.getLogger(__name__)


def add_comment(db: Session, article: Article | int, text: str) -> Article:
    """
    Append a comment with *text* to *article* (an ``Article`` or its id).

    Returns the article read back from the store, now including the new
    comment.
    """
    article_id = article.id if isinstance(article, Article) else article

    db.execute(insert(comments).values(article_id=article_id, comment=text))
    logger.debug("Added comment to article id=%s", article_id)

    refreshed = article_service.find_article_by_id(db, article_id)
    if refreshed is None:
        raise ArticleNotFoundError(article_id)
    return refreshed
