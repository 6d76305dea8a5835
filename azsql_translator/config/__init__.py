"""
Configuration management for the translator.

Provides type-safe configuration loading and validation with support
for multiple configuration sources and priority-based merging.
"""

from ..exceptions import ConfigError
from .loader import ConfigLoader, load_config
from .models import LOG_LEVELS, TranslatorConfig

__all__ = [
    "LOG_LEVELS",
    "ConfigError",
    "ConfigLoader",
    "TranslatorConfig",
    "load_config",
]
