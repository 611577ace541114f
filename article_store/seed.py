"""Demo data written at startup after the migrations have run."""
import logging
from datetime import datetime

from sqlalchemy.orm import Session

from article_store.schemas import Article
from article_store.services import article_service, comment_service

logger = logging.getLogger(__name__)

DEMO_ARTICLES: list[tuple[str, list[str]]] = [
    ("Beat the Queue with this simple trick: Apache Kafka", []),
    (
        "Waiter! There's a bug in my JSoup!",
        [
            "this made me laugh and cry",
            "you  too will believe a man can try",
            "I love beautiful soup in Python and I love JSoup in Java",
        ],
    ),
    (
        "You Can Get to Production with These Ten Easy Tricks",
        ["liar! There are only two tricks!"],
    ),
]


def create_with_comments(
    db: Session, title: str, authored: datetime, comment_texts: list[str]
) -> Article:
    """Create a draft and append *comment_texts* to it in order."""
    article = article_service.create_draft(db, title, authored)
    for text in comment_texts:
        article = comment_service.add_comment(db, article, text)
    return article


def seed_demo_data(db: Session, authored: datetime | None = None) -> list[Article]:
    """Insert the demo articles and their comments; returns them as stored."""
    authored = authored or datetime.now()
    created = [
        create_with_comments(db, title, authored, comment_texts)
        for title, comment_texts in DEMO_ARTICLES
    ]
    logger.info(
        "Seeded %d articles with %d comments",
        len(created),
        sum(len(a.comments) for a in created),
    )
    return created
