"""
Authentication module.

Handles password and Google sign-in, session tokens, and role resolution.

Public API:
- IAuthService: Interface for auth operations
- RoleResolver: Effective role flags with the configured super admin
- Request/response models: RegisterRequest, LoginRequest, AuthResult, AuthStatus, ...
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .roles import RoleResolver
from .models import (
    AuthResult,
    AuthStatus,
    GoogleIdentity,
    LoginRequest,
    OAuthResult,
    PasswordChangeResponse,
    RegisterRequest,
    SessionClaims,
    SetPasswordRequest,
    StatusUser,
    UpdateProfileRequest,
)
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AccountNoLongerExistsError,
    InsufficientPermissionsError,
    EmailNotRegisteredError,
    InvalidPasswordError,
    NoLocalPasswordError,
    CurrentPasswordIncorrectError,
    WeakPasswordError,
    OAuthProviderError,
)

__all__ = [
    # Interface
    "IAuthService",
    "RoleResolver",
    # Models
    "AuthResult",
    "AuthStatus",
    "GoogleIdentity",
    "LoginRequest",
    "OAuthResult",
    "PasswordChangeResponse",
    "RegisterRequest",
    "SessionClaims",
    "SetPasswordRequest",
    "StatusUser",
    "UpdateProfileRequest",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "AccountNoLongerExistsError",
    "InsufficientPermissionsError",
    "EmailNotRegisteredError",
    "InvalidPasswordError",
    "NoLocalPasswordError",
    "CurrentPasswordIncorrectError",
    "WeakPasswordError",
    "OAuthProviderError",
]
