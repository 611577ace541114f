"""Domain exceptions raised by the article repository."""


class ArticleNotFoundError(Exception):
    """Raised when an article that must exist cannot be read back."""

    def __init__(self, article_id: int):
        self.article_id = article_id
        super().__init__(f"Article with id '{article_id}' not found")


class InvariantViolationError(RuntimeError):
    """Raised when the store breaks a post-condition of a write.

    This signals a defect in the store contract rather than a normal
    runtime condition; the operation is aborted.
    """
