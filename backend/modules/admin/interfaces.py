"""
Admin module interface.

User management operations reserved for the super admin.
"""

from typing import Protocol, runtime_checkable

from modules.users.models import UserSummary


@runtime_checkable
class IAdminService(Protocol):
    """
    Interface for user management.

    Implementations never change or remove the super-admin account;
    callers are expected to have passed the super-admin gate.
    """

    async def list_users(self) -> list[UserSummary]:
        """List every user, newest first, with resolved role flags."""
        ...

    async def list_admins(self) -> list[UserSummary]:
        """List super admins and admins."""
        ...

    async def create_user(self, name: str, email: str, password: str) -> UserSummary:
        """
        Create an email+password user. No session token is issued.

        Raises:
            WeakPasswordError: Password violates the policy
            EmailAlreadyExistsError: Email already registered
        """
        ...

    async def set_admin(self, user_id: str, is_admin: bool) -> UserSummary:
        """
        Promote or demote a user.

        Raises:
            UserNotFoundError: No such user
            SuperAdminProtectedError: Target is the super admin
        """
        ...

    async def delete_user(self, user_id: str) -> int:
        """
        Delete one user; returns the number of deleted rows.

        Raises:
            UserNotFoundError: No such user
            SuperAdminProtectedError: Target is the super admin
        """
        ...

    async def delete_all_users(self) -> int:
        """Delete every user except the super admin; returns the count."""
        ...
