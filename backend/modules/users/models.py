"""
Users module data models.

These models define the user record shared by the auth and admin modules.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class AuthProvider(str, Enum):
    """Credential source that created the account."""

    EMAIL = "email"
    GOOGLE = "google"


def normalize_email(email: str) -> str:
    """Normalize an email to its natural-key form (trimmed, lower-cased)."""
    return (email or "").strip().lower()


class PasswordCredential(BaseModel):
    """A stored local password. Absent on OAuth-only accounts."""

    password_hash: str = Field(..., min_length=1, description="passlib hash string")

    model_config = {"frozen": True}


class User(BaseModel):
    """
    A user record as stored in the `users` table.

    `credential` is None when no local password has been set, which is
    only possible for accounts created through Google sign-in.
    """

    id: str = Field(..., description="User ID (UUID)")
    name: str = Field(default="", description="Display name")
    email: str = Field(..., description="Normalized email address")
    credential: Optional[PasswordCredential] = Field(None, description="Local password, if set")
    google_id: Optional[str] = Field(None, description="Google subject id")
    google_picture: Optional[str] = Field(None, description="Google avatar URL")
    auth_provider: AuthProvider = Field(default=AuthProvider.EMAIL)
    is_super_admin: bool = Field(default=False, description="Stored super-admin flag")
    is_admin: bool = Field(default=False, description="Stored admin flag")
    created_at: Optional[datetime] = Field(None, description="Account creation time")
    last_login: Optional[datetime] = Field(None, description="Last Google sign-in")

    @property
    def has_password(self) -> bool:
        return self.credential is not None

    @property
    def needs_password_setup(self) -> bool:
        return self.credential is None


class NewUser(BaseModel):
    """Data needed to insert a user row."""

    name: str
    email: str
    credential: Optional[PasswordCredential] = None
    auth_provider: AuthProvider = AuthProvider.EMAIL
    google_id: Optional[str] = None
    google_picture: Optional[str] = None
    is_super_admin: bool = False


class UserSummary(BaseModel):
    """User data safe to return from the API (no password hash)."""

    id: str
    name: str
    email: str
    is_super_admin: bool = False
    is_admin: bool = False
    has_password: bool = False
    auth_provider: AuthProvider = AuthProvider.EMAIL
    created_at: Optional[datetime] = None


class UserUpdate(BaseModel):
    """
    Partial update of a user row.

    Only fields explicitly set are written (model_dump(exclude_unset=True)),
    so an update that doesn't mention `credential` never touches the
    stored password hash.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    credential: Optional[PasswordCredential] = None
    google_id: Optional[str] = None
    google_picture: Optional[str] = None
    auth_provider: Optional[AuthProvider] = None
    is_super_admin: Optional[bool] = None
    is_admin: Optional[bool] = None
    last_login: Optional[datetime] = None
