"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from modules.users.models import User, UserSummary, normalize_email
from shared.models import RoleFlags


class SessionClaims(BaseModel):
    """
    Decoded session token payload.

    Only a token that passed signature, expiry and issuer checks is ever
    turned into SessionClaims; anything else is rejected at the edge.
    """

    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="Normalized email")
    name: str = Field(default="", description="Display name at issue time")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")
    iss: str = Field(..., description="Issuer")


class RegisterRequest(BaseModel):
    """Request to create an account with email and password."""

    name: str = Field(..., min_length=1, max_length=200, description="Display name")
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=1, description="Plain-text password")

    @field_validator("email", mode="before")
    @classmethod
    def normalize(cls, value: object) -> object:
        return normalize_email(value) if isinstance(value, str) else value


class LoginRequest(BaseModel):
    """Request to sign in with email and password."""

    email: str = Field(..., min_length=1, description="Email address")
    password: str = Field(..., min_length=1, description="Plain-text password")


class SetPasswordRequest(BaseModel):
    """
    Request to set or change the caller's password.

    `current_password` is required only when the account already has one.
    """

    new_password: str = Field(..., description="New password")
    current_password: Optional[str] = Field(None, description="Current password, if one is set")


class UpdateProfileRequest(BaseModel):
    """Request to edit the caller's profile."""

    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr

    @field_validator("email", mode="before")
    @classmethod
    def normalize(cls, value: object) -> object:
        return normalize_email(value) if isinstance(value, str) else value


class AuthResult(BaseModel):
    """A signed-in user and their session token."""

    user: UserSummary
    token: str
    token_type: str = "bearer"


class StatusUser(UserSummary):
    """User data reported by the auth status endpoint."""

    needs_password_setup: bool = False


class AuthStatus(BaseModel):
    """
    Response of the auth status check.

    A missing, invalid or expired token and a deleted account all yield
    authenticated=False. A database outage is an error, not a sign-out.
    """

    authenticated: bool
    user: Optional[StatusUser] = None
    reason: Optional[str] = None


class GoogleIdentity(BaseModel):
    """Verified identity returned by Google after a code exchange."""

    email: str
    name: str = "User"
    subject: str
    picture: Optional[str] = None


class OAuthResult(AuthResult):
    """AuthResult plus the mandatory password-setup flag."""

    needs_password_setup: bool = False


class PasswordChangeResponse(BaseModel):
    success: bool = True
    message: str


def to_summary(user: User, roles: RoleFlags) -> UserSummary:
    """Build the API view of a user with resolved (not stored) role flags."""
    return UserSummary(
        id=user.id,
        name=user.name,
        email=user.email,
        is_super_admin=roles.is_super_admin,
        is_admin=roles.is_admin,
        has_password=user.has_password,
        auth_provider=user.auth_provider,
        created_at=user.created_at,
    )
