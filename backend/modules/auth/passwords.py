"""
Password credentials and password policy.

Local passwords are stored as PBKDF2-SHA256 hashes in passlib's modular
crypt format, so each stored string carries its own salt and rounds.
"""

import logging
from typing import Optional

from passlib.context import CryptContext

from modules.users.models import PasswordCredential
from shared.exceptions import ValidationError

from .exceptions import WeakPasswordError


logger = logging.getLogger(__name__)

password_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def check_password_strength(password: str, min_length: int) -> None:
    """
    Enforce the password policy.

    Raises:
        WeakPasswordError: If the password is blank or shorter than min_length
    """
    if not password or not password.strip() or len(password) < min_length:
        raise WeakPasswordError(min_length)


def make_credential(password: str) -> PasswordCredential:
    """
    Hash a plain-text password into a storable credential.

    Raises:
        ValidationError: If the password is empty
    """
    if not password:
        raise ValidationError("Password is required", code="MISSING_PASSWORD")
    return PasswordCredential(password_hash=password_context.hash(password))


def verify_password(password: str, credential: Optional[PasswordCredential]) -> bool:
    """Check a password against a stored credential. Fails closed."""
    if not password or credential is None:
        return False
    try:
        return password_context.verify(password, credential.password_hash)
    except (ValueError, TypeError):
        logger.warning("Stored password hash is not in a recognized format")
        return False
