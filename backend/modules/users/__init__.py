"""
Users module.

The User Store: persisted user records with an optional local password,
an optional Google identity and stored role flags.

Public API:
- IUserRepository: Interface for user persistence
- User, NewUser, UserUpdate, UserSummary: Data models
- normalize_email: Natural-key normalization used everywhere
- User exceptions: UserNotFoundError, EmailAlreadyExistsError, SuperAdminProtectedError
"""

from .interfaces import IUserRepository
from .models import (
    AuthProvider,
    NewUser,
    PasswordCredential,
    User,
    UserSummary,
    UserUpdate,
    normalize_email,
)
from .exceptions import (
    UserNotFoundError,
    EmailAlreadyExistsError,
    SuperAdminProtectedError,
)

__all__ = [
    # Interface
    "IUserRepository",
    # Models
    "AuthProvider",
    "NewUser",
    "PasswordCredential",
    "User",
    "UserSummary",
    "UserUpdate",
    "normalize_email",
    # Exceptions
    "UserNotFoundError",
    "EmailAlreadyExistsError",
    "SuperAdminProtectedError",
]
