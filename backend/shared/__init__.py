"""
Shared infrastructure for Campuzway backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- repository: Base repository with error mapping and read retries
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    CampuzwayError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ConfigurationError,
    ExternalServiceError,
    UpstreamTimeoutError,
)
from .models import AuthenticatedUser, RoleFlags

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "CampuzwayError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "ConfigurationError",
    "ExternalServiceError",
    "UpstreamTimeoutError",
    "AuthenticatedUser",
    "RoleFlags",
]
