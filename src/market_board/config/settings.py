"""Application configuration using Pydantic V2.

Settings are read from the environment (prefix ``MARKET_BOARD_``) or a
local ``.env`` file.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOGO_DIRECTORY = Path(__file__).parent / "logos.yaml"


class Settings(BaseSettings):
    """Application settings and configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MARKET_BOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Market Board", description="Application name")
    log_level: str = Field(default="INFO", description="Logging level")

    # Stock API
    base_url: str = Field(
        default="http://localhost:8081/stock-api",
        description="Base URL of the stock API (endpoints are appended)",
    )
    request_timeout_sec: float | None = Field(
        default=None, description="Per-request timeout, None waits indefinitely"
    )
    fetch_attempts: int = Field(
        default=1, ge=1, description="Attempts per GET on transport errors"
    )

    # Logo asset
    logo_directory_path: Path = Field(
        default=DEFAULT_LOGO_DIRECTORY, description="YAML file mapping symbols to logo URLs"
    )

    # Status messages
    loading_message: str = Field(default="Loading...", description="Shown while refreshing")
    info_error_message: str = Field(default="Failed to load Markets Today")
    summary_error_message: str = Field(default="Failed to load Market Summary")
    active_error_message: str = Field(default="Failed to load Active Stocks")

    # Which sections put their failure into the shared status line
    surface_info_errors: bool = Field(default=False)
    surface_summary_errors: bool = Field(default=True)
    surface_active_errors: bool = Field(default=False)
    keep_error_status: bool = Field(
        default=False,
        description="Leave a surfaced section error visible after the refresh completes",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Endpoints start with '/', so the base must not end with one."""
        return v.rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()


# Singleton instance
settings = get_settings()
