"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class RoleFlags(BaseModel):
    """Effective role of a user after the super-admin rule has been applied."""

    is_super_admin: bool = Field(default=False, description="Allowlisted super admin")
    is_admin: bool = Field(default=False, description="Promoted admin")

    model_config = {"frozen": True}

    @property
    def has_admin_access(self) -> bool:
        return self.is_super_admin or self.is_admin


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Built once per request by the auth middleware: the bearer token is
    decoded, the user is re-loaded from the database (so deleted accounts
    fail closed) and the role flags are resolved. Route handlers receive it
    via dependency injection.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Normalized email address")
    name: str = Field(default="", description="Display name")
    roles: RoleFlags = Field(default_factory=RoleFlags, description="Resolved role flags")
    has_password: bool = Field(default=False, description="Whether a local password is set")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }

    @property
    def is_super_admin(self) -> bool:
        return self.roles.is_super_admin

    @property
    def is_admin(self) -> bool:
        return self.roles.is_admin
