"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() for dependency injection compatibility in FastAPI.

Usage:
    from backend.settings import get_settings, Settings

    # In FastAPI endpoints (dependency injection)
    @app.get("/")
    def read_root(settings: Settings = Depends(get_settings)):
        return {"environment": settings.environment}

    # Direct access (module-level)
    settings = get_settings()
    print(settings.target_timezone)
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.services import resolve_timezone


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production, test",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR)",
    )

    # -------------------------------------------------------------------------
    # Calendar
    # -------------------------------------------------------------------------
    target_timezone: str = Field(
        default="Asia/Tokyo",
        description="IANA zone whose local midnights delimit calendar days",
    )

    # -------------------------------------------------------------------------
    # Supabase Database
    # -------------------------------------------------------------------------
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL",
    )
    supabase_service_role_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key (full access)",
    )
    supabase_anon_key: Optional[str] = Field(
        default=None,
        description="Supabase anonymous key (limited access)",
    )
    supabase_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for PostgREST requests before failing as store unavailable",
    )

    @property
    def supabase_key(self) -> Optional[str]:
        """Get the best available Supabase key (service role preferred)."""
        return self.supabase_service_role_key or self.supabase_anon_key

    # -------------------------------------------------------------------------
    # Authentication - Clerk
    # -------------------------------------------------------------------------
    clerk_domain: str = Field(
        default="",
        description="Clerk domain for JWT validation",
    )
    api_keys: str = Field(
        default="",
        description="Comma-separated list of valid API keys",
    )

    @property
    def api_keys_list(self) -> list[str]:
        """Parse API keys into a list."""
        return [k.strip() for k in self.api_keys.split(",") if k.strip()]

    @property
    def clerk_jwks_url(self) -> str:
        """JWKS endpoint for the configured Clerk domain, or empty."""
        return f"https://{self.clerk_domain}/.well-known/jwks.json" if self.clerk_domain else ""

    # -------------------------------------------------------------------------
    # HTTP
    # -------------------------------------------------------------------------
    cors_allowed_origins: str = Field(
        default="",
        description="Comma-separated extra CORS origins",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @field_validator("target_timezone")
    @classmethod
    def validate_target_timezone(cls, v: str) -> str:
        """Fail at startup on an unknown zone rather than on the first request."""
        resolve_timezone(v)
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level '{v}'")
        return level

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
