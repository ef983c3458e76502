"""
Configuration module for the provisioning plugins.

Loads configuration from environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ProvisioningConfig:
    """Cloud API endpoint configuration."""

    endpoint: str = "redis.tencentcloudapi.com"
    request_timeout: int = 60  # seconds per API call

    @classmethod
    def from_env(cls):
        """Load from environment variables."""
        return cls(
            endpoint=os.getenv("REDIS_API_ENDPOINT", "redis.tencentcloudapi.com"),
            request_timeout=int(os.getenv("PROVISIONING_TIMEOUT", "60")),
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    log_level: str = "INFO"

    @classmethod
    def from_env(cls):
        """Load from environment variables."""
        return cls(log_level=os.getenv("LOG_LEVEL", "INFO").upper())


@dataclass
class PluginConfig:
    """Plugin system configuration."""

    # List of enabled plugin names (empty = use all built-in plugins)
    enabled_plugins: List[str] = field(default_factory=list)

    @classmethod
    def from_env(cls):
        """Load from environment variables."""
        enabled_str = os.getenv("ENABLED_PLUGINS", "")
        enabled = (
            [p.strip() for p in enabled_str.split(",") if p.strip()]
            if enabled_str
            else []
        )
        return cls(enabled_plugins=enabled)


@dataclass
class Config:
    """Main configuration object."""

    provisioning: ProvisioningConfig
    logging: LoggingConfig
    plugins: PluginConfig

    @classmethod
    def from_env(cls):
        """Load all configuration from environment variables."""
        return cls(
            provisioning=ProvisioningConfig.from_env(),
            logging=LoggingConfig.from_env(),
            plugins=PluginConfig.from_env(),
        )

    @classmethod
    def default(cls):
        """Return default configuration."""
        return cls(
            provisioning=ProvisioningConfig(),
            logging=LoggingConfig(),
            plugins=PluginConfig(),
        )


# Global config instance
config: Optional[Config] = None


def load_config() -> Config:
    """Load configuration (singleton pattern)."""
    global config
    if config is None:
        config = Config.from_env()
    return config


def get_config() -> Config:
    """Get the current configuration."""
    if config is None:
        return load_config()
    return config


def reset_config() -> None:
    """Reset configuration (mainly for testing)."""
    global config
    config = None
