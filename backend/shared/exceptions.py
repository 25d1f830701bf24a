"""
Base exception classes for the Campuzway backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application: every
subclass carries the HTTP status it maps to, and the API layer renders
them as JSON through a single exception handler.
"""

from typing import Optional, Any


class CampuzwayError(Exception):
    """
    Base exception for all Campuzway errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(CampuzwayError):
    """Resource not found."""

    status_code = 404


class ValidationError(CampuzwayError):
    """Input validation failed."""

    status_code = 400


class AuthenticationError(CampuzwayError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(CampuzwayError):
    """Authorization failed (insufficient permissions)."""

    status_code = 403


class ConflictError(CampuzwayError):
    """Resource already exists."""

    status_code = 409


class ConfigurationError(CampuzwayError):
    """Server is missing required configuration."""

    status_code = 500


class ExternalServiceError(CampuzwayError):
    """Error communicating with an external service."""

    status_code = 502

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class UpstreamTimeoutError(ExternalServiceError):
    """An external service did not answer in time."""

    status_code = 504

    def __init__(
        self,
        service: str,
        timeout_seconds: Optional[float] = None,
    ):
        super().__init__(
            f"{service} did not respond in time, try again later",
            service=service,
            code="UPSTREAM_TIMEOUT",
            details={"timeout_seconds": timeout_seconds},
        )
