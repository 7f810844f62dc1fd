#!/usr/bin/env python3
"""
Registry configuration.

Holds the source table and query formatting settings that a
SourceRegistry is built from, plus logging setup.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Tuple

from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from .sources.base import SourceRecord

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def _default_sources() -> Tuple["SourceRecord", ...]:
    # sources package imports this module, so resolve the catalog lazily
    from .sources.catalog import DEFAULT_SOURCES
    return DEFAULT_SOURCES


@dataclass
class RegistryConfig:
    """Configuration for building a SourceRegistry."""
    sources: Tuple["SourceRecord", ...] = field(default_factory=_default_sources)
    
    # Search query construction
    site_prefix: str = "site:"
    restriction_joiner: str = " OR "
    domain_separator: str = "|"
    
    # Logging
    log_level: str = "INFO"
    verbose_logging: bool = False
    
    def __post_init__(self):
        self.sources = tuple(self.sources)
        self.log_level = self.log_level.upper()
    
    def validate(self) -> None:
        """
        Validate configuration values.
        
        Raises:
            ConfigurationError: With every problem found, joined in one message
        """
        from .sources.base import SourceRecord
        
        errors = []
        
        if not self.site_prefix:
            errors.append("site_prefix must not be empty")
        
        if not self.restriction_joiner:
            errors.append("restriction_joiner must not be empty")
        
        bad_sources = [s for s in self.sources if not isinstance(s, SourceRecord)]
        if bad_sources:
            errors.append(f"sources must contain SourceRecord items, got {len(bad_sources)} invalid")
        
        if self.log_level not in VALID_LOG_LEVELS:
            errors.append(f"log_level must be one of: {', '.join(VALID_LOG_LEVELS)}")
        
        if errors:
            raise ConfigurationError('RegistryConfig', '; '.join(errors))
        
        logger.debug("Configuration validation passed")


def update_logging(config: Optional[RegistryConfig] = None) -> None:
    """Configure root logging based on the given (or default) configuration."""
    config = config or get_config()
    config.validate()
    
    numeric_level = getattr(logging, config.log_level)
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    
    if config.verbose_logging:
        format_str = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
    else:
        format_str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    
    if not root_logger.handlers:
        root_logger.addHandler(logging.StreamHandler())
    
    for handler in root_logger.handlers:
        handler.setLevel(numeric_level)
        formatter = logging.Formatter(format_str, datefmt='%Y-%m-%d %H:%M:%S')
        handler.setFormatter(formatter)


# Global configuration instance
_config: Optional[RegistryConfig] = None


def get_config() -> RegistryConfig:
    """Get the process-wide default configuration."""
    global _config
    if _config is None:
        _config = RegistryConfig()
        _config.validate()
    return _config


def reset_config() -> None:
    """Reset default configuration (useful for testing)."""
    global _config
    _config = None
