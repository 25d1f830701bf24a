"""
User-related endpoints.

Provides endpoints for the caller's own profile.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from modules.auth.models import AuthResult, UpdateProfileRequest
from modules.auth.service import AuthService
from shared.models import AuthenticatedUser
from ..dependencies import get_auth_service
from ..middleware.auth import get_current_user

router = APIRouter()


class UserProfileResponse(BaseModel):
    """User profile response model."""

    id: str
    name: str
    email: str
    is_super_admin: bool
    is_admin: bool
    has_password: bool
    needs_password_setup: bool


@router.get("/me", response_model=UserProfileResponse)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
) -> UserProfileResponse:
    """
    Get the current user's profile.

    Requires authentication.
    """
    return UserProfileResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        is_super_admin=user.is_super_admin,
        is_admin=user.is_admin,
        has_password=user.has_password,
        needs_password_setup=not user.has_password,
    )


@router.put("/me", response_model=AuthResult)
async def update_current_user_profile(
    request: UpdateProfileRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
) -> AuthResult:
    """
    Update the current user's name and email.

    Returns a new session token, since tokens carry the email.
    """
    return await service.update_profile(user.id, request.name, request.email)
