"""
Articles module exceptions.
"""

from shared.exceptions import NotFoundError


class ArticleNotFoundError(NotFoundError):
    """Raised when an article ID does not match any article."""

    def __init__(self, article_id: str):
        super().__init__(
            "Article not found",
            code="ARTICLE_NOT_FOUND",
            details={"article_id": article_id},
        )
