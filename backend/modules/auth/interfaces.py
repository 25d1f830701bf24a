"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and future extraction to a microservice.
"""

from typing import Protocol, Optional, runtime_checkable

from modules.users.models import User
from shared.models import AuthenticatedUser

from .models import AuthResult, AuthStatus, OAuthResult


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register(self, name: str, email: str, password: str) -> AuthResult:
        """
        Create an email+password account and sign it in.

        Raises:
            ValidationError: If a field is blank or the password is weak
            EmailAlreadyExistsError: If the email is already registered
        """
        ...

    def create_password_user(self, name: str, email: str, password: str) -> User:
        """
        Validate and insert an email+password user without signing it in.

        Raises:
            ValidationError: If a field is blank or the password is weak
            EmailAlreadyExistsError: If the email is already registered
        """
        ...

    async def login(self, email: str, password: str) -> AuthResult:
        """
        Verify email+password credentials.

        Raises:
            EmailNotRegisteredError: No account for this email
            NoLocalPasswordError: Account has no password (Google-only)
            InvalidPasswordError: Password does not match
        """
        ...

    async def complete_google_sign_in(self, code: str) -> OAuthResult:
        """
        Exchange a Google authorization code and find-or-create the user.

        Raises:
            OAuthProviderError: If the code exchange fails
        """
        ...

    async def get_status(self, token: Optional[str]) -> AuthStatus:
        """
        Report whether a token identifies an existing user.

        Raises:
            ExternalServiceError: The user lookup failed upstream
        """
        ...

    async def authenticate(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Resolve a bearer token to an existing user with role flags.

        Raises:
            AuthenticationError: Missing/invalid/expired token or deleted user
        """
        ...

    async def set_password(
        self,
        user_id: str,
        new_password: str,
        current_password: Optional[str] = None,
    ) -> None:
        """
        Set or change a user's password.

        Raises:
            WeakPasswordError: New password violates the policy
            CurrentPasswordIncorrectError: Wrong current password
        """
        ...

    async def update_profile(self, user_id: str, name: str, email: str) -> AuthResult:
        """
        Edit name and email, returning a fresh token for the new email.

        Raises:
            EmailAlreadyExistsError: Email belongs to another user
            SuperAdminProtectedError: Super admin changing away from the allowlisted email
        """
        ...
