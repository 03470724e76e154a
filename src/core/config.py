"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_VERSION = "1.0.0"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Sherbrooke Profile Exchange")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Server (local only)
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)

    # Profile store
    database_url: str = Field(
        default="sqlite+aiosqlite:///./sherbrooke.db",
        description="SQLAlchemy async URL of the local profile store",
    )

    # Scanning
    max_scan_payload_chars: int = Field(
        default=7089,
        ge=1,
        description="Longest scanned text accepted by the scan endpoint (largest QR capacity)",
    )
    max_scan_image_bytes: int = Field(
        default=5_000_000,
        ge=1,
        description="Largest image upload accepted by the image scan endpoint",
    )

    # Code images
    qr_box_size: int = Field(default=10, ge=1)
    qr_border: int = Field(default=4, ge=0)
    qr_error_correction: Literal["L", "M", "Q", "H"] = Field(default="M")

    # Rate Limiting
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable/disable rate limiting (disable for tests)",
    )
    preview_rate_limit: str = Field(default="30/minute")
    scan_rate_limit: str = Field(default="30/minute")
    scan_image_rate_limit: str = Field(
        default="10/minute",
        description="Image decoding is the costly path",
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated list of allowed origins",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
