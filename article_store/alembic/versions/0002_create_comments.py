"""Create comments table.

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-19

Adds:
    comments.article_id references articles.id through article_fk.
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# Revision identifiers, used by Alembic.
revision: str = "0002"
down_revision: str | None = "0001"
branch_labels: str | None = None
depends_on: str | None = None


def upgrade() -> None:
    op.create_table(
        "comments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("comment", sa.String(255), nullable=False),
        sa.Column("article_id", sa.BigInteger, nullable=False),
        sa.ForeignKeyConstraint(["article_id"], ["articles.id"], name="article_fk"),
    )


def downgrade() -> None:
    op.drop_table("comments")
