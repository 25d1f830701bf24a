"""
Article moderation endpoints.

Open to admins and the super admin.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_article_service
from api.middleware.auth import require_admin_or_super_admin
from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser

from .interfaces import IArticleModerationService
from .models import Article, ArticleListResponse, ArticleStatus, ArticleUpdate, BulkDeleteResult

router = APIRouter()


@router.get("", response_model=ArticleListResponse)
async def list_articles(
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    page_size: int = Query(default=20, ge=1, le=100, description="Items per page"),
    status: Optional[ArticleStatus] = Query(default=None, description="Filter by status"),
    tag: Optional[str] = Query(default=None, description="Filter by tag"),
    search: Optional[str] = Query(default=None, description="Search title and body"),
    moderator: AuthenticatedUser = Depends(require_admin_or_super_admin),
    service: IArticleModerationService = Depends(get_article_service),
) -> ArticleListResponse:
    """
    List articles for moderation.

    Returns paginated results, most recent first.
    """
    return await service.list_articles(status, tag, search, page, page_size)


@router.get("/{article_id}", response_model=Article)
async def get_article(
    article_id: str,
    moderator: AuthenticatedUser = Depends(require_admin_or_super_admin),
    service: IArticleModerationService = Depends(get_article_service),
) -> Article:
    return await service.get_article(article_id)


@router.patch("/{article_id}", response_model=Article)
async def update_article(
    article_id: str,
    request: ArticleUpdate,
    moderator: AuthenticatedUser = Depends(require_admin_or_super_admin),
    service: IArticleModerationService = Depends(get_article_service),
) -> Article:
    """Approve, reject or edit an article."""
    return await service.update_article(article_id, request)


@router.delete("/{article_id}", response_model=BulkDeleteResult)
async def delete_article(
    article_id: str,
    moderator: AuthenticatedUser = Depends(require_admin_or_super_admin),
    service: IArticleModerationService = Depends(get_article_service),
) -> BulkDeleteResult:
    await service.delete_article(article_id)
    return BulkDeleteResult(deleted_count=1, message="Article deleted successfully")


@router.delete("", response_model=BulkDeleteResult)
async def delete_articles(
    ids: str = Query(..., description="Comma-separated article IDs"),
    moderator: AuthenticatedUser = Depends(require_admin_or_super_admin),
    service: IArticleModerationService = Depends(get_article_service),
) -> BulkDeleteResult:
    """Bulk delete articles."""
    article_ids = [article_id.strip() for article_id in ids.split(",") if article_id.strip()]
    if not article_ids:
        raise ValidationError("At least one article ID is required", code="MISSING_IDS")

    deleted = await service.delete_articles(article_ids)
    return BulkDeleteResult(deleted_count=deleted, message=f"Deleted {deleted} articles")
