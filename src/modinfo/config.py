"""
Configuration management for modinfo

Handles environment settings and logging setup for hosts embedding the
build-info codec. The codec itself never reads configuration; only the
logging helpers below do.
"""

import logging
from typing import Optional
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class ModInfoConfig(BaseSettings):
    """Main application configuration"""

    # Environment
    environment: str = Field(default="development", description="Application environment")
    debug: bool = Field(default=False, description="Debug mode")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log record format"
    )

    model_config = SettingsConfigDict(env_prefix="MODINFO_", case_sensitive=False)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        allowed = ["development", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"Environment must be one of {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {LOG_LEVELS}")
        return level

    def effective_log_level(self) -> int:
        """Numeric log level, forced to DEBUG in debug mode"""
        if self.debug:
            return logging.DEBUG
        return getattr(logging, self.log_level)


_config: Optional[ModInfoConfig] = None


def load_config() -> ModInfoConfig:
    """
    Build configuration from the environment

    Returns:
        Fresh configuration instance

    Raises:
        ConfigurationError: If any environment value fails validation
    """
    try:
        return ModInfoConfig()
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid modinfo configuration: {first.get('msg')}",
            config_key=key or None,
            config_value=first.get("input")
        ) from e


def get_config() -> ModInfoConfig:
    """Return the process-wide configuration, loading it on first use"""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def configure_logging(config: Optional[ModInfoConfig] = None) -> None:
    """
    Configure root logging for a host process

    Args:
        config: Configuration to apply (defaults to the process-wide one)
    """
    config = config or get_config()
    logging.basicConfig(level=config.effective_log_level(), format=config.log_format)
    logger.debug(f"Logging configured for {config.environment} environment")
