"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Tests swap implementations through app.dependency_overrides or by
resetting the container.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.admin.interfaces import IAdminService
    from modules.articles.interfaces import IArticleModerationService, IArticleRepository
    from modules.auth.service import AuthService
    from modules.users.interfaces import IUserRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._user_repository: "IUserRepository | None" = None
        self._article_repository: "IArticleRepository | None" = None
        self._auth_service: "AuthService | None" = None
        self._admin_service: "IAdminService | None" = None
        self._article_service: "IArticleModerationService | None" = None

    @property
    def user_repository(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def article_repository(self) -> "IArticleRepository":
        """Get the article repository instance."""
        if self._article_repository is None:
            from modules.articles.repository import ArticleRepository
            from shared.database import get_supabase_client
            self._article_repository = ArticleRepository(get_supabase_client())
        return self._article_repository

    @property
    def auth(self) -> "AuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(repository=self.user_repository)
        return self._auth_service

    @property
    def admin(self) -> "IAdminService":
        """Get the admin service instance."""
        if self._admin_service is None:
            from modules.admin.service import AdminService
            self._admin_service = AdminService(
                repository=self.user_repository,
                auth=self.auth,
                roles=self.auth.roles,
            )
        return self._admin_service

    @property
    def articles(self) -> "IArticleModerationService":
        """Get the article moderation service instance."""
        if self._article_service is None:
            from modules.articles.service import ArticleModerationService
            self._article_service = ArticleModerationService(self.article_repository)
        return self._article_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_repository = None
        self._article_repository = None
        self._auth_service = None
        self._admin_service = None
        self._article_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "AuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_admin_service() -> "IAdminService":
    """FastAPI dependency for admin service."""
    return get_container().admin


def get_article_service() -> "IArticleModerationService":
    """FastAPI dependency for article moderation service."""
    return get_container().articles
