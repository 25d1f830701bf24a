"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

import logging
import uuid
from typing import Any, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import ConflictError, ExternalServiceError, UpstreamTimeoutError


logger = logging.getLogger(__name__)

T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def is_valid_uuid(value: str) -> bool:
    """Whether a string is a well-formed UUID (primary keys are uuid columns)."""
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute(), which maps transport and PostgREST failures onto the
      shared exception taxonomy and retries idempotent reads once

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class UserRepository(BaseRepository[User]):
            def get_by_id(self, user_id: str) -> Optional[User]:
                query = self._db.table("users").select("*").eq("id", user_id)
                result = self._execute(query, idempotent=True)
                if not result.data:
                    return None
                return self._map_to_user(result.data[0])
    """

    service_name = "database"

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query: Any, idempotent: bool = False) -> Any:
        """
        Execute a PostgREST query builder.

        Args:
            query: A query builder (anything with an execute() method).
            idempotent: Reads pass True to get one retry on upstream failure.
                Writes are never retried.

        Returns:
            The PostgREST API response.

        Raises:
            ConflictError: On a unique constraint violation.
            UpstreamTimeoutError: If the database did not answer in time.
            ExternalServiceError: On any other database failure.
        """
        attempts = 2 if idempotent else 1
        last_error: ExternalServiceError | None = None

        for attempt in range(1, attempts + 1):
            try:
                return query.execute()
            except httpx.TimeoutException:
                raise UpstreamTimeoutError(self.service_name)
            except APIError as e:
                if e.code == UNIQUE_VIOLATION:
                    raise ConflictError(
                        "Record already exists",
                        code="DUPLICATE_RECORD",
                        details={"reason": e.message},
                    )
                last_error = ExternalServiceError(
                    "Database request failed",
                    service=self.service_name,
                    details={"reason": e.message, "db_code": e.code},
                )
            except httpx.HTTPError as e:
                last_error = ExternalServiceError(
                    "Database is unreachable, try again later",
                    service=self.service_name,
                    details={"reason": str(e)},
                )

            if attempt < attempts:
                logger.warning(f"Database read failed, retrying once: {last_error.details.get('reason')}")

        logger.error(f"Database request failed: {last_error.details}")
        raise last_error
