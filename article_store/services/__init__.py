# Services package.
#
# Each module exposes a focused set of functions over a single concern:
#
#   row_aggregator   — folds joined article/comment rows into Article values
#   article_service  — lookups and draft creation for Article
#   comment_service  — append-only comment creation for Article
#
# Service functions that touch the database accept a Session as their
# first argument so that the caller controls the transaction boundary
# (see ``database.session_scope``).
