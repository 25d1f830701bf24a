"""
Article repository for database access.

Encapsulates all Supabase queries and data mapping for the `articles` table.
"""

import logging
import re
from typing import Any, Optional

from shared.repository import BaseRepository, is_valid_uuid
from .models import Article, ArticleStatus


logger = logging.getLogger(__name__)

TABLE = "articles"

# Characters with meaning inside a PostgREST or=() filter or an ilike pattern
_FILTER_SYNTAX = re.compile(r"[,()%*\\]")


class ArticleRepository(BaseRepository[Article]):
    """
    Repository for article data access.

    Implements IArticleRepository.
    """

    def get_by_id(self, article_id: str) -> Optional[Article]:
        if not is_valid_uuid(article_id):
            return None
        query = self._db.table(TABLE).select("*").eq("id", article_id)
        result = self._execute(query, idempotent=True)
        if not result.data:
            return None
        return self._map_to_article(result.data[0])

    def list_articles(
        self,
        status: Optional[ArticleStatus],
        tag: Optional[str],
        search: Optional[str],
        offset: int,
        limit: int,
    ) -> tuple[list[Article], int]:
        query = self._db.table(TABLE).select("*", count="exact")

        if status:
            query = query.eq("status", status.value)
        if tag:
            query = query.eq("tag", tag)

        term = _FILTER_SYNTAX.sub(" ", search or "").strip()
        if term:
            query = query.or_(f"title.ilike.*{term}*,body.ilike.*{term}*")

        query = query.order("created_at", desc=True).range(offset, offset + limit - 1)
        result = self._execute(query, idempotent=True)

        articles = [self._map_to_article(row) for row in result.data]
        total = result.count if result.count is not None else len(articles)
        return articles, total

    def update(self, article_id: str, data: dict[str, Any]) -> Optional[Article]:
        if not is_valid_uuid(article_id):
            return None
        if not data:
            return self.get_by_id(article_id)
        result = self._execute(self._db.table(TABLE).update(data).eq("id", article_id))
        if not result.data:
            return None
        return self._map_to_article(result.data[0])

    def delete(self, article_id: str) -> bool:
        if not is_valid_uuid(article_id):
            return False
        result = self._execute(self._db.table(TABLE).delete().eq("id", article_id))
        return bool(result.data)

    def delete_many(self, article_ids: list[str]) -> int:
        ids = [article_id for article_id in article_ids if is_valid_uuid(article_id)]
        if not ids:
            return 0
        result = self._execute(self._db.table(TABLE).delete().in_("id", ids))
        return len(result.data or [])

    def _map_to_article(self, data: dict[str, Any]) -> Article:
        """Map database row to Article model."""
        return Article(
            id=str(data["id"]),
            title=data.get("title") or "",
            body=data.get("body") or "",
            tag=data.get("tag") or "",
            image_path=data.get("image_path"),
            author_name=data.get("author_name") or "Unknown",
            author_id=str(data["user_id"]) if data.get("user_id") else None,
            status=ArticleStatus(data.get("status") or ArticleStatus.PENDING.value),
            created_at=data.get("created_at"),
        )
