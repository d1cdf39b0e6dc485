"""Application configuration using pydantic-settings."""
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Database
    database_url: str
    db_pool_size: int = Field(default=5, validation_alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=10, validation_alias="DB_MAX_OVERFLOW")

    # Session tokens - HS256 signing secret shared by every API instance
    jwt_secret: str = Field(default="", validation_alias="JWT_SECRET", validate_default=True)

    # bcrypt cost factor for new password hashes
    bcrypt_rounds: int = Field(default=12, ge=4, le=31, validation_alias="BCRYPT_ROUNDS")

    # Session cookie. None means "secure when the request arrived over HTTPS".
    cookie_secure: bool | None = Field(default=None, validation_alias="COOKIE_SECURE")
    # None means "none" for secure cookies and "lax" otherwise; "none" forces Secure
    cookie_samesite: Literal["lax", "strict", "none"] | None = Field(
        default=None, validation_alias="COOKIE_SAMESITE",
    )
    cookie_domain: str | None = Field(default=None, validation_alias="COOKIE_DOMAIN")

    # open_id of the account that is promoted to admin on upsert
    owner_open_id: str = Field(default="", validation_alias="OWNER_OPEN_ID")

    # CORS - comma-separated list of allowed origins (stored as string, parsed via property)
    cors_origins_str: str = Field(
        default="http://localhost:8081",
        validation_alias="CORS_ORIGINS",
    )

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @field_validator("jwt_secret")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        """Refuse to start without a signing secret."""
        if not v or not v.strip():
            raise ValueError("JWT_SECRET is required for auth")
        return v

    @property
    def cors_origins(self) -> list[str]:
        """Parse comma-separated CORS origins string into a list."""
        if not self.cors_origins_str:
            return []
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]

    @property
    def is_sqlite(self) -> bool:
        """True when the configured database is SQLite (no connection pool sizing)."""
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
