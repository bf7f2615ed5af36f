# configurations/factory.py
"""
Configuration factory for creating environment-specific configurations.
"""

from typing import Optional

from exceptions import ConfigurationError

from .settings_base import EnvironmentVariables
from .settings_extraction import (
    BatchConfig,
    CacheConfig,
    ParserSettings,
    StoppageConfig,
)


class ConfigFactory:
    """
    Factory for creating environment-specific configurations
    """

    @staticmethod
    def development() -> ParserSettings:
        """
        Development environment configuration
        """
        return ParserSettings(
            batch=BatchConfig(),
            stoppage=StoppageConfig(),
            cache=CacheConfig(enabled=True),
            log_level="DEBUG",
            log_strategy="session",
            _environment="development",
        )

    @staticmethod
    def testing() -> ParserSettings:
        """
        Testing environment configuration
        """
        return ParserSettings(
            batch=BatchConfig.testing(),
            stoppage=StoppageConfig(),
            cache=CacheConfig(enabled=True),
            log_level="ERROR",
            log_dir="logs/testing",
            log_strategy="session",
            _environment="testing",
        )

    @staticmethod
    def production() -> ParserSettings:
        """
        Production environment configuration
        """
        return ParserSettings(
            batch=BatchConfig(),
            stoppage=StoppageConfig(),
            cache=CacheConfig(enabled=True),
            log_level="INFO",
            log_strategy="daily",
            _environment="production",
        )

    @staticmethod
    def custom(
        environment: str = "development",
        base_minutes: Optional[int] = None,
        default_batch_size: Optional[int] = None,
        cache_enabled: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> ParserSettings:
        """
        Start from an environment profile and override selected values
        """
        settings = get_config(environment)

        if base_minutes is not None:
            settings.stoppage.base_minutes = base_minutes
        if default_batch_size is not None:
            settings.batch.default_batch_size = default_batch_size
        if cache_enabled is not None:
            settings.cache.enabled = cache_enabled
        if log_level is not None:
            settings.log_level = log_level.upper()

        settings.validate()
        return settings


def get_config(environment: Optional[str] = None) -> ParserSettings:
    """
    Get configuration for the given environment, or the one named by
    MATCHSHEET_ENV when no environment is passed.

    Raises:
        ConfigurationError: If the environment name is unknown
    """
    env_vars = EnvironmentVariables()
    env_vars.load()

    environment = (environment or env_vars.get_environment()).lower()
    profiles = {
        "development": ConfigFactory.development,
        "testing": ConfigFactory.testing,
        "production": ConfigFactory.production,
    }
    if environment not in profiles:
        raise ConfigurationError(f"Unknown environment: {environment}")

    settings = profiles[environment]()
    override_level = env_vars.get_log_level()
    if override_level:
        settings.log_level = override_level

    settings.validate()
    return settings
