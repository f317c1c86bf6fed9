"""
idcheck configuration management using pydantic-settings.

Values are read from IDCHECK_* environment variables or a .env file.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="IDCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Validation log
    log_file: Path = Field(
        default=Path("validation.log"),
        description="File that receives failed checks",
    )
    log_to_file: bool = Field(
        default=True,
        description="Write failed checks to log_file",
    )

    # Console
    log_level: str = Field(default="WARNING", description="Console logging level")
    verbose: bool = Field(
        default=True,
        description="Print every check while validating",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard logging level names only."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


# Global settings instance
settings = Settings()
