"""
Authentication service implementation.

Unifies the two credential sources (local password, Google OAuth) into
one user record, issues session tokens, and resolves the caller's
identity and role on every request.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from modules.users.exceptions import EmailAlreadyExistsError, SuperAdminProtectedError
from modules.users.interfaces import IUserRepository
from modules.users.models import (
    AuthProvider,
    NewUser,
    User,
    UserSummary,
    UserUpdate,
    normalize_email,
)
from shared.config import Settings, get_settings
from shared.exceptions import (
    AuthenticationError,
    ValidationError,
)
from shared.models import AuthenticatedUser, RoleFlags

from .exceptions import (
    AccountNoLongerExistsError,
    CurrentPasswordIncorrectError,
    EmailNotRegisteredError,
    InvalidPasswordError,
    NoLocalPasswordError,
)
from .interfaces import IAuthService
from .models import AuthResult, AuthStatus, OAuthResult, StatusUser, to_summary
from .oauth import GoogleOAuthClient
from .passwords import check_password_strength, make_credential, verify_password
from .roles import RoleResolver
from .tokens import issue_session_token, read_session_token


logger = logging.getLogger(__name__)

# Placeholder name given to Google accounts without a profile name
PLACEHOLDER_NAME = "User"


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Uses signed session tokens for authentication and the Supabase
    users table (through IUserRepository) for user storage.
    """

    def __init__(
        self,
        repository: Optional[IUserRepository] = None,
        oauth_client: Optional[GoogleOAuthClient] = None,
        settings: Optional[Settings] = None,
    ):
        self._settings = settings or get_settings()
        if repository is None:
            from shared.database import get_supabase_client
            from modules.users.repository import UserRepository
            repository = UserRepository(get_supabase_client())
        self._users = repository
        self._oauth = oauth_client or GoogleOAuthClient(self._settings)
        self._roles = RoleResolver(repository, self._settings.super_admin_email)

    @property
    def roles(self) -> RoleResolver:
        return self._roles

    # -------------------------------------------------------------------------
    # Credential Verifier
    # -------------------------------------------------------------------------

    async def register(self, name: str, email: str, password: str) -> AuthResult:
        """Create an email+password account and sign it in."""
        user = self.create_password_user(name, email, password)
        summary, token = self._issue(user)
        return AuthResult(user=summary, token=token)

    def create_password_user(self, name: str, email: str, password: str) -> User:
        """
        Validate and insert an email+password user.

        Shared by self-registration and admin user creation. The
        allowlisted email is stored with the super-admin flag set.
        """
        name = (name or "").strip()
        email = normalize_email(email)
        if not name or not email or not password:
            raise ValidationError(
                "Name, email, and password are required",
                code="MISSING_FIELDS",
            )
        check_password_strength(password, self._settings.password_min_length)

        if self._users.get_by_email(email) is not None:
            raise EmailAlreadyExistsError(email)

        user = self._users.create(NewUser(
            name=name,
            email=email,
            credential=make_credential(password),
            auth_provider=AuthProvider.EMAIL,
            is_super_admin=self._roles.is_super_admin_email(email),
        ))
        logger.info(f"Registered user {user.id}")
        return user

    async def login(self, email: str, password: str) -> AuthResult:
        """
        Verify email+password credentials.

        Unknown email, missing local password and wrong password are
        distinct failures so the user gets actionable feedback.
        """
        email = normalize_email(email)
        if not email or not password:
            raise ValidationError(
                "Email and password are required",
                code="MISSING_FIELDS",
            )

        user = self._users.get_by_email(email)
        if user is None:
            raise EmailNotRegisteredError(email)
        if user.credential is None:
            raise NoLocalPasswordError(email)
        if not verify_password(password, user.credential):
            logger.info(f"Failed password login for user {user.id}")
            raise InvalidPasswordError()

        summary, token = self._issue(user)
        return AuthResult(user=summary, token=token)

    # -------------------------------------------------------------------------
    # OAuth Bridge
    # -------------------------------------------------------------------------

    def google_authorization_url(self, state: Optional[str] = None) -> str:
        """Consent screen URL to start Google sign-in."""
        return self._oauth.build_authorization_url(state)

    async def complete_google_sign_in(self, code: str) -> OAuthResult:
        """
        Exchange a Google code and find-or-create the matching user.

        An existing account (matched by email) gets the Google identity
        attached; its password hash is never touched. A new account is
        created without a password and must go through password setup.
        """
        if not code:
            raise ValidationError("Missing authorization code", code="MISSING_CODE")

        identity = await self._oauth.exchange_code(code)
        user = self._users.get_by_email(identity.email)

        if user is not None:
            changes = {
                "google_id": identity.subject,
                "google_picture": identity.picture,
                "last_login": datetime.now(timezone.utc),
            }
            if not user.name or user.name == PLACEHOLDER_NAME:
                changes["name"] = identity.name
            user = self._users.update(user.id, UserUpdate(**changes)) or user
        else:
            try:
                user = self._users.create(NewUser(
                    name=identity.name,
                    email=identity.email,
                    credential=None,
                    auth_provider=AuthProvider.GOOGLE,
                    google_id=identity.subject,
                    google_picture=identity.picture,
                    is_super_admin=self._roles.is_super_admin_email(identity.email),
                ))
                logger.info(f"Created user {user.id} from Google sign-in")
            except EmailAlreadyExistsError:
                # Lost a race with a concurrent first sign-in for the same email
                user = self._users.get_by_email(identity.email)
                if user is None:
                    raise

        summary, token = self._issue(user)
        return OAuthResult(
            user=summary,
            token=token,
            needs_password_setup=user.needs_password_setup,
        )

    # -------------------------------------------------------------------------
    # Session Token Reader
    # -------------------------------------------------------------------------

    async def authenticate(self, token: Optional[str]) -> AuthenticatedUser:
        """Resolve a bearer token to an existing user. Fails closed on deleted users."""
        user, roles = self._load_user(token)
        return AuthenticatedUser(
            id=user.id,
            email=user.email,
            name=user.name,
            roles=roles,
            has_password=user.has_password,
        )

    async def get_status(self, token: Optional[str]) -> AuthStatus:
        """
        Report the caller's authentication state.

        Only a bad token or a deleted account reports authenticated=False.
        Upstream failures propagate and render as 502/504.
        """
        try:
            user, roles = self._load_user(token)
        except AuthenticationError as e:
            return AuthStatus(authenticated=False, reason=e.message)

        summary = to_summary(user, roles)
        return AuthStatus(
            authenticated=True,
            user=StatusUser(
                **summary.model_dump(),
                needs_password_setup=user.needs_password_setup,
            ),
        )

    def _load_user(self, token: Optional[str]) -> tuple[User, RoleFlags]:
        claims = read_session_token(token, self._settings)
        user = self._users.get_by_id(claims.sub)
        # A token outlives neither its user nor an email change
        if user is None or normalize_email(user.email) != claims.email:
            raise AccountNoLongerExistsError(claims.sub)
        return user, self._roles.resolve(user)

    # -------------------------------------------------------------------------
    # Account maintenance
    # -------------------------------------------------------------------------

    async def set_password(
        self,
        user_id: str,
        new_password: str,
        current_password: Optional[str] = None,
    ) -> None:
        """
        Set or change a password.

        Accounts without a password (Google-only) may set one without a
        current password; afterwards both sign-in methods work.
        """
        user = self._users.get_by_id(user_id)
        if user is None:
            raise AccountNoLongerExistsError(user_id)

        check_password_strength(new_password, self._settings.password_min_length)

        if user.credential is not None:
            if not current_password:
                raise ValidationError(
                    "Current password is required",
                    code="CURRENT_PASSWORD_REQUIRED",
                )
            if not verify_password(current_password, user.credential):
                raise CurrentPasswordIncorrectError()

        self._users.update(
            user.id,
            UserUpdate(credential=make_credential(new_password)),
        )
        logger.info(f"Password {'changed' if user.has_password else 'set'} for user {user.id}")

    async def update_profile(self, user_id: str, name: str, email: str) -> AuthResult:
        """Edit name and email; returns a fresh token since the old one names the old email."""
        user = self._users.get_by_id(user_id)
        if user is None:
            raise AccountNoLongerExistsError(user_id)

        name = (name or "").strip()
        email = normalize_email(email)
        if not name or not email:
            raise ValidationError("Name and email are required", code="MISSING_FIELDS")

        if email != normalize_email(user.email):
            if self._roles.is_protected(user):
                raise SuperAdminProtectedError("change the email of")
            if self._roles.is_super_admin_email(email):
                raise SuperAdminProtectedError("take over the email of")
            existing = self._users.get_by_email(email)
            if existing is not None and existing.id != user.id:
                raise EmailAlreadyExistsError(email)

        updated = self._users.update(user.id, UserUpdate(name=name, email=email))
        if updated is None:
            raise AccountNoLongerExistsError(user_id)

        summary, token = self._issue(updated)
        return AuthResult(user=summary, token=token)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _issue(self, user: User) -> tuple[UserSummary, str]:
        roles = self._roles.resolve(user)
        token = issue_session_token(user, self._settings)
        return to_summary(user, roles), token


# Module-level instance getter
_service_instance: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get the auth service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AuthService()
    return _service_instance


def reset_auth_service() -> None:
    """Reset the auth service singleton (for testing)."""
    global _service_instance
    _service_instance = None
