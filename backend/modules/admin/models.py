"""
Admin module data models.

Request and response bodies of the user management endpoints.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator

from modules.users.models import UserSummary, normalize_email


class CreateUserRequest(BaseModel):
    """Request to create an email+password user on someone's behalf."""

    name: str = Field(..., min_length=1, max_length=200, description="Display name")
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=1, description="Initial password")

    @field_validator("email", mode="before")
    @classmethod
    def normalize(cls, value: object) -> object:
        return normalize_email(value) if isinstance(value, str) else value


class SetAdminRequest(BaseModel):
    """Promote (`is_admin: true`) or demote (`is_admin: false`) a user."""

    is_admin: bool


class UserListResponse(BaseModel):
    users: list[UserSummary]
    total: int


class DeleteResult(BaseModel):
    """Outcome of a user deletion."""

    deleted_count: int = Field(..., ge=0)
    message: str
