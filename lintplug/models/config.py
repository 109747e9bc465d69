"""Configuration models."""

from typing import Optional
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="LINTPLUG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Logging
    log_level: str = Field("WARNING", description="Logging level")
    log_file: Optional[str] = Field(None, description="Log file path")
    redact_secrets: bool = Field(True, description="Mask access tokens in logs")

    # Project configuration
    config_file: str = Field(".lintplug.toml", description="Config file name in each working directory")
    plugin_dir: Optional[str] = Field(None, description="Directory holding installed plugins")

    # Release downloads
    github_token: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("LINTPLUG_GITHUB_TOKEN", "GITHUB_TOKEN"),
        description="Token for GitHub API requests",
    )
    github_api_url: str = Field("https://api.github.com", description="GitHub API base URL")
    request_timeout: int = Field(30, description="Request timeout in seconds")
    user_agent: str = Field("lintplug/0.1.0", description="User agent for release downloads")


# Global settings instance
settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reset_settings() -> None:
    """Drop the cached settings instance (useful for testing)."""
    global settings
    settings = None
