"""
Authentication module exceptions.

These exceptions are raised by the auth module and are rendered by the
API error handler with the status of their base class.
"""

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)


class InvalidTokenError(AuthenticationError):
    """Raised when a session token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a session token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class AccountNoLongerExistsError(AuthenticationError):
    """Raised when the signed-in user has been deleted or changed email."""

    def __init__(self, user_id: str):
        super().__init__(
            "User account no longer exists",
            code="ACCOUNT_NOT_FOUND",
            details={"user_id": user_id},
        )


class InsufficientPermissionsError(AuthorizationError):
    """Raised when user lacks required permissions."""

    def __init__(self, required_role: str, user_role: str):
        super().__init__(
            f"{required_role.replace('_', ' ').capitalize()} access required",
            code="INSUFFICIENT_PERMISSIONS",
            details={"required_role": required_role, "user_role": user_role},
        )


class EmailNotRegisteredError(NotFoundError):
    """Raised on login with an email that has no account."""

    def __init__(self, email: str):
        super().__init__(
            "This email address is not registered.",
            code="EMAIL_NOT_REGISTERED",
            details={"email": email},
        )


class InvalidPasswordError(AuthenticationError):
    """Raised on login when the password does not match."""

    def __init__(self):
        super().__init__("Invalid password.", code="INVALID_PASSWORD")


class NoLocalPasswordError(AuthenticationError):
    """Raised on password login for an account that only has Google sign-in."""

    def __init__(self, email: str):
        super().__init__(
            "This account has no password yet. Sign in with Google and set a password first.",
            code="NO_LOCAL_PASSWORD",
            details={"email": email},
        )


class CurrentPasswordIncorrectError(AuthenticationError):
    """Raised when changing a password with a wrong current password."""

    def __init__(self):
        super().__init__("Current password is incorrect.", code="WRONG_CURRENT_PASSWORD")


class WeakPasswordError(ValidationError):
    """Raised when a new password does not meet the password policy."""

    def __init__(self, min_length: int):
        super().__init__(
            f"Password must be at least {min_length} characters long",
            code="WEAK_PASSWORD",
            details={"min_length": min_length},
        )


class OAuthProviderError(ExternalServiceError):
    """Raised when the Google code exchange or ID token verification fails."""

    def __init__(self, message: str = "Google authentication failed", reason: str = ""):
        super().__init__(
            message,
            service="google",
            code="OAUTH_PROVIDER_ERROR",
            details={"reason": reason},
        )
