"""
Campuzway API package.

Provides the FastAPI application for Campuzway authentication and administration.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
