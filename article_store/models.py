from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Integer, String, Table

from article_store.database import Base

# ---------------------------------------------------------------------------
# articles
# ---------------------------------------------------------------------------
articles = Table(
    "articles",
    Base.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False),
    Column("authored", DateTime, nullable=False),
)


# ---------------------------------------------------------------------------
# comments: each row belongs to exactly one article
# ---------------------------------------------------------------------------
comments = Table(
    "comments",
    Base.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("comment", String(255), nullable=False),
    Column(
        "article_id",
        BigInteger,
        ForeignKey("articles.id", name="article_fk"),
        nullable=False,
    ),
)
