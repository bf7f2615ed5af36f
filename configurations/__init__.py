"""
configuration module
"""

from .factory import ConfigFactory, get_config
from .settings_base import EnvironmentVariables
from .settings_extraction import (
    BatchConfig,
    CacheConfig,
    ParserSettings,
    StoppageConfig,
)

__all__ = [
    "EnvironmentVariables",
    "BatchConfig",
    "StoppageConfig",
    "CacheConfig",
    "ParserSettings",
    "ConfigFactory",
    "get_config",
]
