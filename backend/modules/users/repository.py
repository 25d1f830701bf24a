"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the `users` table.
"""

import logging
from typing import Optional, Any

from shared.exceptions import ConflictError
from shared.repository import BaseRepository, is_valid_uuid
from .exceptions import EmailAlreadyExistsError
from .models import (
    AuthProvider,
    NewUser,
    PasswordCredential,
    User,
    UserUpdate,
    normalize_email,
)


logger = logging.getLogger(__name__)

TABLE = "users"


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Implements IUserRepository. All methods return Pydantic models with
    proper mapping from database rows; the password hash column is mapped
    to an optional PasswordCredential.

    Note: This repository does NOT perform authorization checks or apply
    the super-admin rule. The service layer is responsible for both.
    """

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def get_by_id(self, user_id: str) -> Optional[User]:
        if not is_valid_uuid(user_id):
            return None
        query = self._db.table(TABLE).select("*").eq("id", user_id)
        result = self._execute(query, idempotent=True)
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[User]:
        normalized = normalize_email(email)
        if not normalized:
            return None
        query = self._db.table(TABLE).select("*").eq("email", normalized)
        result = self._execute(query, idempotent=True)
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def list_users(self) -> list[User]:
        query = self._db.table(TABLE).select("*").order("created_at", desc=True)
        result = self._execute(query, idempotent=True)
        return [self._map_to_user(row) for row in result.data]

    def list_admins(self) -> list[User]:
        query = (
            self._db.table(TABLE)
            .select("*")
            .or_("is_super_admin.eq.true,is_admin.eq.true")
            .order("created_at", desc=True)
        )
        result = self._execute(query, idempotent=True)
        return [self._map_to_user(row) for row in result.data]

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create(self, new_user: NewUser) -> User:
        """
        Insert a new user row.

        Raises:
            EmailAlreadyExistsError: If the unique email index rejects the row.
        """
        email = normalize_email(new_user.email)
        data: dict[str, Any] = {
            "name": new_user.name.strip(),
            "email": email,
            "password_hash": new_user.credential.password_hash if new_user.credential else None,
            "auth_provider": new_user.auth_provider.value,
            "google_id": new_user.google_id,
            "google_picture": new_user.google_picture,
            "is_super_admin": new_user.is_super_admin,
            "is_admin": False,
        }
        try:
            result = self._execute(self._db.table(TABLE).insert(data))
        except ConflictError:
            raise EmailAlreadyExistsError(email)
        return self._map_to_user(result.data[0])

    def update(self, user_id: str, changes: UserUpdate) -> Optional[User]:
        """
        Apply a partial update; unset fields are left untouched.

        Raises:
            EmailAlreadyExistsError: If an email change collides with another user.
        """
        if not is_valid_uuid(user_id):
            return None

        data = self._map_update(changes)
        if not data:
            return self.get_by_id(user_id)

        query = self._db.table(TABLE).update(data).eq("id", user_id)
        try:
            result = self._execute(query)
        except ConflictError:
            raise EmailAlreadyExistsError(data.get("email", ""))
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def delete(self, user_id: str) -> bool:
        if not is_valid_uuid(user_id):
            return False
        result = self._execute(self._db.table(TABLE).delete().eq("id", user_id))
        return bool(result.data)

    def delete_all_except_super_admin(self, super_admin_email: str = "") -> int:
        query = self._db.table(TABLE).delete().eq("is_super_admin", False)
        if super_admin_email:
            query = query.neq("email", normalize_email(super_admin_email))
        result = self._execute(query)
        deleted = len(result.data or [])
        logger.info(f"Deleted {deleted} non-super-admin users")
        return deleted

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_update(self, changes: UserUpdate) -> dict[str, Any]:
        """Map a UserUpdate to column values, keeping only explicitly set fields."""
        fields = changes.model_dump(exclude_unset=True)
        data: dict[str, Any] = {}

        for key, value in fields.items():
            if key == "credential":
                data["password_hash"] = value["password_hash"] if value else None
            elif key == "email":
                data["email"] = normalize_email(value)
            elif key == "auth_provider":
                data["auth_provider"] = AuthProvider(value).value if value else None
            elif key == "last_login":
                data["last_login"] = value.isoformat() if value else None
            else:
                data[key] = value

        return data

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        password_hash = data.get("password_hash")
        return User(
            id=str(data["id"]),
            name=data.get("name") or "",
            email=data["email"],
            credential=PasswordCredential(password_hash=password_hash) if password_hash else None,
            google_id=data.get("google_id"),
            google_picture=data.get("google_picture"),
            auth_provider=AuthProvider(data.get("auth_provider") or AuthProvider.EMAIL.value),
            is_super_admin=bool(data.get("is_super_admin")),
            is_admin=bool(data.get("is_admin")),
            created_at=data.get("created_at"),
            last_login=data.get("last_login"),
        )
