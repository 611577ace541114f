"""Articles with append-only comments, stored in Alembic-migrated tables."""
