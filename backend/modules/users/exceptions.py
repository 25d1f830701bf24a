"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError, ConflictError, AuthorizationError


class UserNotFoundError(NotFoundError):
    """Raised when a user ID does not match any user."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class EmailAlreadyExistsError(ConflictError):
    """Raised when registering or changing to an email that is already used."""

    def __init__(self, email: str):
        super().__init__(
            "This email is already registered",
            code="EMAIL_EXISTS",
            details={"email": email},
        )


class SuperAdminProtectedError(AuthorizationError):
    """Raised when an operation would demote, delete or rename the super admin."""

    def __init__(self, action: str):
        super().__init__(
            f"Cannot {action} the super admin account",
            code="SUPER_ADMIN_PROTECTED",
            details={"action": action},
        )
