"""
Article moderation service implementation.
"""

import logging
from typing import Optional

from .exceptions import ArticleNotFoundError
from .interfaces import IArticleModerationService, IArticleRepository
from .models import Article, ArticleListResponse, ArticleStatus, ArticleUpdate


logger = logging.getLogger(__name__)


class ArticleModerationService(IArticleModerationService):
    """Moderation operations on top of the article repository."""

    def __init__(self, repository: IArticleRepository):
        self._articles = repository

    async def list_articles(
        self,
        status: Optional[ArticleStatus] = None,
        tag: Optional[str] = None,
        search: Optional[str] = None,
        page: int = 1,
        page_size: int = 20,
    ) -> ArticleListResponse:
        page = max(1, page)
        page_size = max(1, page_size)
        articles, total = self._articles.list_articles(
            status=status,
            tag=(tag or "").strip() or None,
            search=search,
            offset=(page - 1) * page_size,
            limit=page_size,
        )
        return ArticleListResponse(
            articles=articles,
            total=total,
            page=page,
            page_size=page_size,
        )

    async def get_article(self, article_id: str) -> Article:
        article = self._articles.get_by_id(article_id)
        if article is None:
            raise ArticleNotFoundError(article_id)
        return article

    async def update_article(self, article_id: str, changes: ArticleUpdate) -> Article:
        data = changes.model_dump(exclude_unset=True, exclude_none=True, mode="json")
        article = self._articles.update(article_id, data)
        if article is None:
            raise ArticleNotFoundError(article_id)
        if "status" in data:
            logger.info(f"Article {article.id} marked {article.status.value}")
        return article

    async def delete_article(self, article_id: str) -> None:
        if not self._articles.delete(article_id):
            raise ArticleNotFoundError(article_id)
        logger.info(f"Deleted article {article_id}")

    async def delete_articles(self, article_ids: list[str]) -> int:
        deleted = self._articles.delete_many(article_ids)
        logger.info(f"Bulk deleted {deleted} of {len(article_ids)} articles")
        return deleted
