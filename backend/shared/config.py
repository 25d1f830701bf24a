"""
Centralized configuration for the Campuzway backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings are namespaced (e.g., SUPABASE_*, JWT_*, GOOGLE_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Campuzway API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Frontend URLs (for OAuth redirects)
    frontend_url: str = "http://localhost:3000"

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URL, used by run_migrations.py
    db_timeout_seconds: float = 10.0

    # Session tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = "campuzway"
    jwt_expire_minutes: int = 60 * 24 * 7

    # Roles
    super_admin_email: str = ""

    # Passwords
    password_min_length: int = 6

    # Google OAuth
    google_client_id: str = ""
    google_client_secret: str = ""
    google_redirect_uri: str = "http://localhost:8000/api/auth/google"
    oauth_timeout_seconds: float = 10.0


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
