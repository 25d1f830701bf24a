"""
Bearer token authentication and role gates.

Every protected route re-resolves the caller from the database through
the auth service, so a deleted user or a revoked role takes effect on
the very next request.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import InsufficientPermissionsError, MissingTokenError
from modules.auth.service import AuthService
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: AuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user. Failures raise
    AuthenticationError subclasses, rendered as 401 with a
    WWW-Authenticate header by the application error handler.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise MissingTokenError("Missing authorization header")

    return await auth.authenticate(credentials.credentials)


async def require_super_admin(
    user: AuthenticatedUser = Depends(get_current_user),
) -> AuthenticatedUser:
    """Dependency that requires the super admin."""
    if not user.is_super_admin:
        raise InsufficientPermissionsError("super_admin", _role_of(user))
    return user


async def require_admin_or_super_admin(
    user: AuthenticatedUser = Depends(get_current_user),
) -> AuthenticatedUser:
    """Dependency that requires an admin or the super admin."""
    if not user.roles.has_admin_access:
        raise InsufficientPermissionsError("admin", _role_of(user))
    return user


def _role_of(user: AuthenticatedUser) -> str:
    if user.is_super_admin:
        return "super_admin"
    return "admin" if user.is_admin else "user"

