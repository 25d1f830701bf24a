"""
Articles module.

Moderation of user-written articles: listing, status changes, edits and
removal.

Public API:
- IArticleModerationService: Interface for moderation
- Article, ArticleStatus, ArticleUpdate: Data models
- ArticleNotFoundError
"""

from .interfaces import IArticleModerationService, IArticleRepository
from .models import Article, ArticleListResponse, ArticleStatus, ArticleUpdate, BulkDeleteResult
from .exceptions import ArticleNotFoundError

__all__ = [
    # Interfaces
    "IArticleModerationService",
    "IArticleRepository",
    # Models
    "Article",
    "ArticleListResponse",
    "ArticleStatus",
    "ArticleUpdate",
    "BulkDeleteResult",
    # Exceptions
    "ArticleNotFoundError",
]
