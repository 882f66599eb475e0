"""Configuration loading for the Tic-Tac-Toe game.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Game configuration
    first_player: Literal["X", "O"] = Field(
        default="X",
        description="Mark of the player who moves first",
    )
    coordinate_base: int = Field(
        default=0,
        description="Index of the first row/column as typed by players (0 or 1)",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("first_player", mode="before")
    @classmethod
    def normalize_first_player(cls, v: object) -> object:
        """Accept lowercase player symbols."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("coordinate_base")
    @classmethod
    def validate_coordinate_base(cls, v: int) -> int:
        """Ensure coordinates are 0-based or 1-based."""
        if v not in (0, 1):
            raise ValueError("coordinate_base must be 0 or 1")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
