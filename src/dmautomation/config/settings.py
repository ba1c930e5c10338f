"""Configuration management for dmautomation using pydantic-settings.

Settings are read from environment variables prefixed with ``DMAUTOMATION_``
and from an optional ``.env`` file.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AutomationSettings(BaseSettings):
    """Main configuration settings for dmautomation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DMAUTOMATION_",
        case_sensitive=False,
        extra="forbid",
    )

    # Waiting settings
    poll_interval: float = Field(
        0.05, gt=0.0, description="Delay in seconds between checks while waiting"
    )
    default_timeout: float = Field(
        30.0, ge=0.0, description="Default timeout in seconds for wait operations"
    )
    retry_count: int = Field(5, ge=1, description="Number of attempts for bounded retries")

    # Logging settings
    debug_mode: bool = Field(False, description="Enable debug logging")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Log level used when debug mode is off"
    )
    log_path: Path | None = Field(None, description="Directory for log files")
    structured_logging: bool = Field(True, description="Render logs as JSON")


# Singleton instance
_settings: AutomationSettings | None = None


def get_settings() -> AutomationSettings:
    """Get the singleton settings instance.

    Returns:
        AutomationSettings instance
    """
    global _settings

    if _settings is None:
        _settings = AutomationSettings()

    return _settings


def configure(**overrides: Any) -> AutomationSettings:
    """Replace the singleton with settings built from explicit overrides.

    Args:
        **overrides: Field values taking precedence over the environment

    Returns:
        The new settings instance
    """
    global _settings

    _settings = AutomationSettings(**overrides)
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
