"""
Row aggregator — rebuilds articles from a LEFT JOIN of articles and comments.

The joined select yields one row per comment, plus a single padding row
(``cid`` NULL) for an article without comments.  Rows are folded into a
call-local, insertion-ordered ``dict`` keyed by article id; once every row
has been consumed the drafts are frozen into immutable ``Article`` values.

Nothing here performs I/O.  If the row source raises while being iterated
the error propagates unchanged.
"""
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from article_store.schemas import Article, Comment


@dataclass
class _ArticleDraft:
    id: int
    title: str
    authored: datetime
    comments: list[Comment] = field(default_factory=list)

    def freeze(self) -> Article:
        return Article(
            id=self.id,
            title=self.title,
            authored=self.authored,
            comments=tuple(self.comments),
        )


def _as_mapping(row: Any) -> Mapping[str, Any]:
    # SQLAlchemy Row objects expose their columns through ``_mapping``.
    return getattr(row, "_mapping", row)


def has_comment(cid: int | None) -> bool:
    """A ``cid`` of NULL, zero or below marks an outer-join padding row."""
    return cid is not None and cid > 0


def fold_row(accumulator: dict[int, _ArticleDraft], row: Any) -> None:
    """
    Apply one joined row to *accumulator*.

    The article is registered the first time its id is seen and reused
    afterwards; a comment is appended only when the row carries one.
    """
    values = _as_mapping(row)
    article_id = values["aid"]
    draft = accumulator.get(article_id)
    if draft is None:
        draft = _ArticleDraft(
            id=article_id,
            title=values["title"],
            authored=values["authored"],
        )
        accumulator[article_id] = draft

    cid = values["cid"]
    if has_comment(cid):
        draft.comments.append(Comment(id=cid, text=values["comment"]))


def aggregate_rows(rows: Iterable[Any]) -> list[Article]:
    """
    Fold *rows* into one ``Article`` per distinct ``aid``.

    Comment order inside each article follows row arrival order.  The
    order of the returned articles carries no meaning.
    """
    accumulator: dict[int, _ArticleDraft] = {}
    for row in rows:
        fold_row(accumulator, row)
    return [draft.freeze() for draft in accumulator.values()]
