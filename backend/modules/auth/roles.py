"""
Role resolution.

Derives the effective role of a user on every read. The super-admin
identity comes from configuration (a one-element allowlist) and always
wins over the stored flag; a stale stored flag is corrected in place.
"""

import logging

from modules.users.interfaces import IUserRepository
from modules.users.models import User, UserUpdate, normalize_email
from shared.models import RoleFlags


logger = logging.getLogger(__name__)


class RoleResolver:
    """Computes RoleFlags for a user and self-heals the stored super-admin flag."""

    def __init__(self, repository: IUserRepository, super_admin_email: str):
        self._repository = repository
        self._super_admin_email = normalize_email(super_admin_email)

    @property
    def super_admin_email(self) -> str:
        return self._super_admin_email

    def is_super_admin_email(self, email: str) -> bool:
        """Whether an email is the allowlisted super-admin identity."""
        return bool(self._super_admin_email) and normalize_email(email) == self._super_admin_email

    def is_protected(self, user: User) -> bool:
        """Whether a user must never be demoted, deleted or renamed away."""
        return user.is_super_admin or self.is_super_admin_email(user.email)

    def resolve(self, user: User) -> RoleFlags:
        """
        Resolve the effective role flags for a user.

        The super admin also reports is_admin=True. For every other
        account the stored flags are returned as-is. Writing the corrected
        flag is idempotent, so concurrent resolutions may race safely.
        """
        if self.is_super_admin_email(user.email):
            if not user.is_super_admin:
                logger.info(f"Restoring super admin flag for user {user.id}")
                self._repository.update(user.id, UserUpdate(is_super_admin=True))
            return RoleFlags(is_super_admin=True, is_admin=True)

        return RoleFlags(is_super_admin=user.is_super_admin, is_admin=user.is_admin)
