"""
Admin service implementation.

The super-admin account is protected here, independently of the route
gate: it can be neither demoted nor deleted by any caller.
"""

import logging

from modules.auth.interfaces import IAuthService
from modules.auth.models import to_summary
from modules.auth.roles import RoleResolver
from modules.users.exceptions import SuperAdminProtectedError, UserNotFoundError
from modules.users.interfaces import IUserRepository
from modules.users.models import User, UserSummary, UserUpdate

from .interfaces import IAdminService


logger = logging.getLogger(__name__)


class AdminService(IAdminService):
    """User management on top of the users repository."""

    def __init__(
        self,
        repository: IUserRepository,
        auth: IAuthService,
        roles: RoleResolver,
    ):
        self._users = repository
        self._auth = auth
        self._roles = roles

    async def list_users(self) -> list[UserSummary]:
        return [self._summarize(user) for user in self._users.list_users()]

    async def list_admins(self) -> list[UserSummary]:
        return [self._summarize(user) for user in self._users.list_admins()]

    async def create_user(self, name: str, email: str, password: str) -> UserSummary:
        user = self._auth.create_password_user(name, email, password)
        logger.info(f"Admin created user {user.id}")
        return self._summarize(user)

    async def set_admin(self, user_id: str, is_admin: bool) -> UserSummary:
        user = self._get_unprotected(user_id, action="change the role of")

        updated = self._users.update(user.id, UserUpdate(is_admin=is_admin))
        if updated is None:
            raise UserNotFoundError(user_id)

        logger.info(f"User {user.id} {'promoted to' if is_admin else 'demoted from'} admin")
        return self._summarize(updated)

    async def delete_user(self, user_id: str) -> int:
        user = self._get_unprotected(user_id, action="delete")

        if not self._users.delete(user.id):
            raise UserNotFoundError(user_id)

        logger.info(f"Deleted user {user.id}")
        return 1

    async def delete_all_users(self) -> int:
        return self._users.delete_all_except_super_admin(self._roles.super_admin_email)

    def _get_unprotected(self, user_id: str, action: str) -> User:
        user = self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        if self._roles.is_protected(user):
            logger.warning(f"Refused to {action} super admin {user.id}")
            raise SuperAdminProtectedError(action)
        return user

    def _summarize(self, user: User) -> UserSummary:
        return to_summary(user, self._roles.resolve(user))
