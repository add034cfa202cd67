"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Input surface
    history_max_size: int = Field(default=100, ge=1)  # Entries kept before evicting the oldest
    autocomplete_limit: int = Field(default=10, ge=1, le=10)  # Max suggestions returned

    # Debug
    debug: bool = False
    log_level: LogLevel = "WARNING"

    @property
    def effective_log_level(self) -> LogLevel:
        """Log level to use, forced to DEBUG in debug mode."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience alias
settings = get_settings()
