"""
Articles module interfaces.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import Article, ArticleListResponse, ArticleStatus, ArticleUpdate


@runtime_checkable
class IArticleRepository(Protocol):
    """Storage contract for articles."""

    def get_by_id(self, article_id: str) -> Optional[Article]:
        ...

    def list_articles(
        self,
        status: Optional[ArticleStatus],
        tag: Optional[str],
        search: Optional[str],
        offset: int,
        limit: int,
    ) -> tuple[list[Article], int]:
        """Return one page of matching articles and the total match count."""
        ...

    def update(self, article_id: str, data: dict[str, Any]) -> Optional[Article]:
        ...

    def delete(self, article_id: str) -> bool:
        ...

    def delete_many(self, article_ids: list[str]) -> int:
        ...


@runtime_checkable
class IArticleModerationService(Protocol):
    """
    Interface for article moderation.

    Callers are expected to have passed the admin gate.
    """

    async def list_articles(
        self,
        status: Optional[ArticleStatus] = None,
        tag: Optional[str] = None,
        search: Optional[str] = None,
        page: int = 1,
        page_size: int = 20,
    ) -> ArticleListResponse:
        """List articles, newest first, filtered by status, tag and free text."""
        ...

    async def get_article(self, article_id: str) -> Article:
        """
        Raises:
            ArticleNotFoundError: No such article
        """
        ...

    async def update_article(self, article_id: str, changes: ArticleUpdate) -> Article:
        """
        Edit an article's text fields and/or moderation status.

        Raises:
            ArticleNotFoundError: No such article
        """
        ...

    async def delete_article(self, article_id: str) -> None:
        """
        Raises:
            ArticleNotFoundError: No such article
        """
        ...

    async def delete_articles(self, article_ids: list[str]) -> int:
        """Delete several articles; unknown IDs are ignored. Returns the count."""
        ...
