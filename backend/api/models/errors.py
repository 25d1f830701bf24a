"""
Error response models.

Standardized error responses for the API. Every error, including
unexpected ones, is returned as JSON in one of these shapes.
"""

from typing import Any, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    message: str
    details: Optional[dict[str, Any]] = None


class ValidationErrorResponse(BaseModel):
    """Validation error response format."""

    error: str = "VALIDATION_ERROR"
    message: str = "Invalid request"
    details: dict[str, list[dict[str, Any]]]
