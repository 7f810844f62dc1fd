#!/usr/bin/env python3
"""
Curated news sources and the registry that queries them.
"""

from .base import SourceRecord
from .catalog import DEFAULT_SOURCES
from .registry import (
    SourceRegistry, get_default_registry, reset_default_registry,
    list_all, list_domains, domains_joined, build_site_restriction,
    build_country_site_restriction, is_whitelisted, source_for_url,
    by_category, by_country
)

__all__ = [
    'SourceRecord', 'DEFAULT_SOURCES', 'SourceRegistry', 'get_default_registry',
    'reset_default_registry', 'list_all', 'list_domains', 'domains_joined',
    'build_site_restriction', 'build_country_site_restriction', 'is_whitelisted',
    'source_for_url', 'by_category', 'by_country'
]
