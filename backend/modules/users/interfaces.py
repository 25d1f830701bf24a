"""
Users module interface.

Other modules should depend on IUserRepository, not the concrete
Supabase implementation. This enables testing with in-memory fakes.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import NewUser, User, UserUpdate


@runtime_checkable
class IUserRepository(Protocol):
    """
    Interface for the User Store.

    Emails passed in are normalized by the implementation; callers may
    pass raw user input.
    """

    def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Get a user by ID.

        Returns:
            User if found, None otherwise (including malformed IDs)
        """
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Get a user by email (case- and whitespace-insensitive).

        Returns:
            User if found, None otherwise
        """
        ...

    def list_users(self) -> list[User]:
        """List all users, newest first."""
        ...

    def list_admins(self) -> list[User]:
        """List users flagged as super admin or admin, newest first."""
        ...

    def create(self, new_user: NewUser) -> User:
        """
        Insert a new user.

        Raises:
            EmailAlreadyExistsError: If the email is already registered
        """
        ...

    def update(self, user_id: str, changes: UserUpdate) -> Optional[User]:
        """
        Apply a partial update.

        Returns:
            The updated user, or None if no such user exists
        """
        ...

    def delete(self, user_id: str) -> bool:
        """
        Delete a user by ID.

        Returns:
            True if a row was deleted
        """
        ...

    def delete_all_except_super_admin(self, super_admin_email: str = "") -> int:
        """
        Delete every user except the super admin.

        A row survives if its stored super-admin flag is set or its email
        is the allowlisted super_admin_email, even with the flag unset.

        Returns:
            Number of deleted users
        """
        ...
