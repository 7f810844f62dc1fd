#!/usr/bin/env python3
"""
Curated news source registry.

Static allowlist of trusted outlets used to scope search queries and to
classify URLs.
"""

from .config import RegistryConfig, get_config, reset_config, update_logging
from .exceptions import NewsRegistryError, ValidationError, ConfigurationError
from .sources import (
    SourceRecord, DEFAULT_SOURCES, SourceRegistry, get_default_registry,
    reset_default_registry
)

__all__ = [
    'RegistryConfig', 'get_config', 'reset_config', 'update_logging',
    'NewsRegistryError', 'ValidationError', 'ConfigurationError',
    'SourceRecord', 'DEFAULT_SOURCES', 'SourceRegistry', 'get_default_registry',
    'reset_default_registry'
]
