"""
API configuration using Pydantic Settings.

Loads server configuration from environment variables with sensible
defaults. Domain settings (database, tokens, OAuth) live in shared.config.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """API server configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CAMPUZWAY_",
        case_sensitive=False,
        extra="ignore",
    )

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    reload: bool = False
    log_level: str = "INFO"

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
    cors_allow_headers: list[str] = ["Authorization", "Content-Type"]


def get_settings() -> APISettings:
    """Get settings instance."""
    return APISettings()
