"""Application configuration helpers."""

from __future__ import annotations

from .dashboard import DEFAULT_CONFIG_FILENAME, DashboardSettings, get_config_path
from .env import require_env_vars, require_values
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig
from .logging import configure_logging
from .sonarqube import DEFAULT_PAGE_SIZE, SonarQubeConfig, get_sonarqube_config

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_PAGE_SIZE",
    "ConfigurationError",
    "DashboardSettings",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "SonarQubeConfig",
    "configure_logging",
    "get_config_path",
    "get_sonarqube_config",
    "require_env_vars",
    "require_values",
]
