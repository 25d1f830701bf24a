"""
Articles module data models.

Articles are written by users elsewhere; this backend only moderates them.
"""

import math
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, computed_field, field_validator


class ArticleStatus(str, Enum):
    """Moderation status."""

    PENDING = "pending"      # Awaiting review
    APPROVED = "approved"    # Visible to readers
    REJECTED = "rejected"    # Hidden


class Article(BaseModel):
    """An article as stored in the `articles` table."""

    id: str = Field(..., description="Article ID (UUID)")
    title: str
    body: str = ""
    tag: str = ""
    image_path: Optional[str] = Field(None, description="Hosted image URL, carried as-is")
    author_name: str = "Unknown"
    author_id: Optional[str] = None
    status: ArticleStatus = ArticleStatus.PENDING
    created_at: Optional[datetime] = None


class ArticleUpdate(BaseModel):
    """
    Moderator edit of an article.

    Only the fields present in the request body are written.
    """

    title: Optional[str] = Field(None, min_length=1, max_length=500)
    body: Optional[str] = None
    tag: Optional[str] = Field(None, max_length=100)
    status: Optional[ArticleStatus] = None

    @field_validator("title", "body", "tag", mode="before")
    @classmethod
    def strip(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value


class ArticleListResponse(BaseModel):
    """Paginated list of articles, newest first."""

    articles: list[Article]
    total: int
    page: int
    page_size: int

    @computed_field
    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.page_size else 0


class BulkDeleteResult(BaseModel):
    deleted_count: int = Field(..., ge=0)
    message: str
