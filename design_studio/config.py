"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "change-me-in-production"  # noqa: S105


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./design_studio.db")

    # JWT
    jwt_secret: str = Field(default=DEFAULT_JWT_SECRET)
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int = Field(default=10080, gt=0)  # 7 days

    # Password hashing cost factor (bcrypt log rounds)
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # Uploads
    upload_dir: str = Field(default="uploads")
    max_upload_bytes: int | None = Field(default=None, gt=0)

    # API
    environment: str = Field(default="development")
    cors_origins: list[str] = Field(
        default=["http://localhost:8081", "http://localhost:19006"],
    )
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if self.jwt_secret == DEFAULT_JWT_SECRET:
                raise ValueError("JWT_SECRET must be changed in production")
            if self.database_url.startswith("sqlite") or "localhost" in self.database_url:
                raise ValueError("DATABASE_URL should point at a real database in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
