"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
settings with a test JWT secret, in-memory repositories that honour the
repository protocols, and services wired on top of them.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from api.dependencies import reset_container
from modules.admin.service import AdminService
from modules.articles.models import Article, ArticleStatus
from modules.articles.service import ArticleModerationService
from modules.auth.models import GoogleIdentity
from modules.auth.oauth import GoogleOAuthClient
from modules.auth.passwords import make_credential
from modules.auth.service import AuthService, reset_auth_service
from modules.auth.tokens import issue_session_token
from modules.users.exceptions import EmailAlreadyExistsError
from modules.users.models import (
    AuthProvider,
    NewUser,
    User,
    UserUpdate,
    normalize_email,
)
from shared.config import Settings, get_settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"
TEST_SUPER_ADMIN_EMAIL = "owner@campuzway.edu"

_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_settings(**overrides: Any) -> Settings:
    """Build Settings for tests without reading a .env file."""
    values: dict[str, Any] = {
        "jwt_secret": TEST_JWT_SECRET,
        "super_admin_email": TEST_SUPER_ADMIN_EMAIL,
        "google_client_id": "test-client-id",
        "google_client_secret": "test-client-secret",
        "frontend_url": "http://localhost:3000",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class InMemoryUserRepository:
    """IUserRepository backed by a dict, with the same email uniqueness rule."""

    def __init__(self) -> None:
        self.rows: dict[str, User] = {}
        self.update_calls: list[tuple[str, UserUpdate]] = []

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.rows.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        normalized = normalize_email(email)
        return next((u for u in self.rows.values() if u.email == normalized), None)

    def list_users(self) -> list[User]:
        return sorted(self.rows.values(), key=lambda u: u.created_at, reverse=True)

    def list_admins(self) -> list[User]:
        return [u for u in self.list_users() if u.is_super_admin or u.is_admin]

    def create(self, new_user: NewUser) -> User:
        email = normalize_email(new_user.email)
        if self.get_by_email(email) is not None:
            raise EmailAlreadyExistsError(email)
        user = User(
            id=str(uuid.uuid4()),
            name=new_user.name.strip(),
            email=email,
            credential=new_user.credential,
            google_id=new_user.google_id,
            google_picture=new_user.google_picture,
            auth_provider=new_user.auth_provider,
            is_super_admin=new_user.is_super_admin,
            created_at=_EPOCH + timedelta(seconds=len(self.rows)),
        )
        self.rows[user.id] = user
        return user

    def update(self, user_id: str, changes: UserUpdate) -> Optional[User]:
        self.update_calls.append((user_id, changes))
        user = self.rows.get(user_id)
        if user is None:
            return None
        data = {name: getattr(changes, name) for name in changes.model_fields_set}
        if "email" in data:
            data["email"] = normalize_email(data["email"])
            other = self.get_by_email(data["email"])
            if other is not None and other.id != user_id:
                raise EmailAlreadyExistsError(data["email"])
        updated = user.model_copy(update=data)
        self.rows[user_id] = updated
        return updated

    def delete(self, user_id: str) -> bool:
        return self.rows.pop(user_id, None) is not None

    def delete_all_except_super_admin(self, super_admin_email: str = "") -> int:
        spared = normalize_email(super_admin_email)
        doomed = [
            u.id for u in self.rows.values()
            if not u.is_super_admin and not (spared and u.email == spared)
        ]
        for user_id in doomed:
            del self.rows[user_id]
        return len(doomed)

    # Test helpers

    def add(
        self,
        email: str,
        password: Optional[str] = "secret1",
        name: str = "Test User",
        is_admin: bool = False,
        is_super_admin: bool = False,
        auth_provider: AuthProvider = AuthProvider.EMAIL,
    ) -> User:
        """Insert a user directly, bypassing the service layer."""
        credential = make_credential(password) if password else None
        user = self.create(NewUser(
            name=name,
            email=email,
            credential=credential,
            auth_provider=auth_provider,
            is_super_admin=is_super_admin,
        ))
        if is_admin:
            user = self.update(user.id, UserUpdate(is_admin=True))
        return user


class InMemoryArticleRepository:
    """IArticleRepository backed by a dict."""

    def __init__(self) -> None:
        self.rows: dict[str, Article] = {}

    def get_by_id(self, article_id: str) -> Optional[Article]:
        return self.rows.get(article_id)

    def list_articles(self, status, tag, search, offset, limit) -> tuple[list[Article], int]:
        matches = sorted(self.rows.values(), key=lambda a: a.created_at, reverse=True)
        if status:
            matches = [a for a in matches if a.status == status]
        if tag:
            matches = [a for a in matches if a.tag == tag]
        if search:
            term = search.lower()
            matches = [a for a in matches if term in a.title.lower() or term in a.body.lower()]
        return matches[offset:offset + limit], len(matches)

    def update(self, article_id: str, data: dict[str, Any]) -> Optional[Article]:
        article = self.rows.get(article_id)
        if article is None:
            return None
        updated = Article.model_validate({**article.model_dump(), **data})
        self.rows[article_id] = updated
        return updated

    def delete(self, article_id: str) -> bool:
        return self.rows.pop(article_id, None) is not None

    def delete_many(self, article_ids: list[str]) -> int:
        return sum(1 for article_id in article_ids if self.rows.pop(article_id, None) is not None)

    # Test helpers

    def add(
        self,
        title: str,
        body: str = "",
        tag: str = "news",
        status: ArticleStatus = ArticleStatus.PENDING,
    ) -> Article:
        article = Article(
            id=str(uuid.uuid4()),
            title=title,
            body=body,
            tag=tag,
            status=status,
            author_name="Author",
            created_at=_EPOCH + timedelta(seconds=len(self.rows)),
        )
        self.rows[article.id] = article
        return article


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, services and container around each test."""
    get_settings.cache_clear()
    reset_auth_service()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_auth_service()
    reset_container()


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def article_repo() -> InMemoryArticleRepository:
    return InMemoryArticleRepository()


@pytest.fixture
def google_identity() -> GoogleIdentity:
    return GoogleIdentity(
        email="new.student@gmail.com",
        name="New Student",
        subject="google-sub-123",
        picture="https://lh3.googleusercontent.com/a/pic",
    )


@pytest.fixture
def oauth_client(google_identity: GoogleIdentity) -> MagicMock:
    """GoogleOAuthClient double whose code exchange yields google_identity."""
    client = MagicMock(spec=GoogleOAuthClient)
    client.exchange_code = AsyncMock(return_value=google_identity)
    client.build_authorization_url.return_value = "https://accounts.google.com/o/oauth2/v2/auth?x=1"
    return client


@pytest.fixture
def auth_service(user_repo, oauth_client, settings) -> AuthService:
    return AuthService(repository=user_repo, oauth_client=oauth_client, settings=settings)


@pytest.fixture
def admin_service(user_repo, auth_service) -> AdminService:
    return AdminService(repository=user_repo, auth=auth_service, roles=auth_service.roles)


@pytest.fixture
def article_service(article_repo) -> ArticleModerationService:
    return ArticleModerationService(article_repo)


@pytest.fixture
def super_admin(user_repo) -> User:
    return user_repo.add(TEST_SUPER_ADMIN_EMAIL, name="Owner", is_super_admin=True)


@pytest.fixture
def admin_user(user_repo) -> User:
    return user_repo.add("moderator@campuzway.edu", name="Moderator", is_admin=True)


@pytest.fixture
def regular_user(user_repo) -> User:
    return user_repo.add("student@campuzway.edu", name="Student")


def create_test_token(user: User, settings: Optional[Settings] = None) -> str:
    """Create a valid session token for a user."""
    return issue_session_token(user, settings or make_settings())


def auth_headers_for(user: User, settings: Optional[Settings] = None) -> dict[str, str]:
    """Create authorization headers for a user."""
    return {"Authorization": f"Bearer {create_test_token(user, settings)}"}
