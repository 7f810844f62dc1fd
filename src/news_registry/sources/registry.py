#!/usr/bin/env python3
"""
News source registry.

Read-only lookup over the curated source table: listing, filtering,
search-engine site restrictions and URL classification.
"""

import logging
from typing import Callable, Iterator, List, Optional

from ..config import RegistryConfig, get_config
from ..url_utils import extract_host
from .base import SourceRecord

logger = logging.getLogger(__name__)


class SourceRegistry:
    """Immutable registry of curated news sources."""
    
    def __init__(self, config: Optional[RegistryConfig] = None):
        """
        Initialize registry from configuration.
        
        Args:
            config: Registry configuration (uses the default config if not provided)
        """
        self.config = config or get_config()
        self.config.validate()
        self._sources = tuple(self.config.sources)
        # snapshot formatting so later config changes cannot alter results
        self._site_prefix = self.config.site_prefix
        self._restriction_joiner = self.config.restriction_joiner
        self._domain_separator = self.config.domain_separator
        
        for domain in self.find_duplicate_domains():
            logger.warning(f"Duplicate domain in source registry: {domain}")
        
        logger.info(f"Loaded {len(self._sources)} news sources")
    
    def __len__(self) -> int:
        return len(self._sources)
    
    def __iter__(self) -> Iterator[SourceRecord]:
        return iter(self._sources)
    
    def list_all(self) -> List[SourceRecord]:
        """Get all sources in declared order."""
        return list(self._sources)
    
    def list_domains(self) -> List[str]:
        """Get the domain of every source, in declared order."""
        return [source.domain for source in self._sources]
    
    def domains_joined(self, separator: Optional[str] = None) -> str:
        """
        Join all domains with a separator.
        
        Args:
            separator: Separator string (default: config.domain_separator, ``|``)
            
        Returns:
            Joined domains, empty string for an empty registry
        """
        if separator is None:
            separator = self._domain_separator
        return separator.join(self.list_domains())
    
    def build_site_restriction(self, category: Optional[str] = None) -> str:
        """
        Build a search-engine site restriction string.
        
        E.g. ``site:emol.com OR site:latercera.com OR ...``
        
        Args:
            category: Only include sources of this category (exact match)
            
        Returns:
            Restriction string, empty if no source matches
        """
        if category is None:
            domains = self.list_domains()
        else:
            domains = [source.domain for source in self.by_category(category)]
        return self._restriction_for(domains)
    
    def build_country_site_restriction(self, country: str) -> str:
        """
        Build a site restriction string for sources of one country.
        
        Args:
            country: Country code, e.g. 'CL'
            
        Returns:
            Restriction string, empty if no source matches
        """
        return self._restriction_for([source.domain for source in self.by_country(country)])
    
    def is_whitelisted(self, url: str) -> bool:
        """Check whether a URL's host belongs to any registered source."""
        return self.source_for_url(url) is not None
    
    def source_for_url(self, url: str) -> Optional[SourceRecord]:
        """
        Find the source a URL belongs to.
        
        A source matches when its domain appears anywhere in the URL host
        (substring containment, case-sensitive). The first match in
        declared order wins.
        
        Args:
            url: Article or page URL
            
        Returns:
            Matching SourceRecord, or None
        """
        host = extract_host(url)
        if not host:
            return None
        
        for source in self._sources:
            if source.domain in host:
                return source
        return None
    
    def by_category(self, category: str) -> List[SourceRecord]:
        """Get sources with the given category, in declared order."""
        return self._filter(lambda source: source.category == category)
    
    def by_country(self, country: str) -> List[SourceRecord]:
        """Get sources from the given country, in declared order."""
        return self._filter(lambda source: source.country == country)
    
    def list_categories(self) -> List[str]:
        """Get distinct categories in order of first appearance."""
        return list(dict.fromkeys(source.category for source in self._sources))
    
    def list_countries(self) -> List[str]:
        """Get distinct country codes in order of first appearance."""
        return list(dict.fromkeys(source.country for source in self._sources))
    
    def find_duplicate_domains(self) -> List[str]:
        """Get domains declared more than once (each reported once)."""
        seen = set()
        duplicates = []
        for source in self._sources:
            if source.domain in seen and source.domain not in duplicates:
                duplicates.append(source.domain)
            seen.add(source.domain)
        return duplicates
    
    def _filter(self, predicate: Callable[[SourceRecord], bool]) -> List[SourceRecord]:
        return [source for source in self._sources if predicate(source)]
    
    def _restriction_for(self, domains: List[str]) -> str:
        prefix = self._site_prefix
        return self._restriction_joiner.join(f"{prefix}{domain}" for domain in domains)


# Global registry instance
_default_registry: Optional[SourceRegistry] = None


def get_default_registry() -> SourceRegistry:
    """Get the process-wide registry built from the default configuration."""
    global _default_registry
    if _default_registry is None:
        _default_registry = SourceRegistry()
    return _default_registry


def reset_default_registry() -> None:
    """Drop the cached default registry (useful for testing)."""
    global _default_registry
    _default_registry = None


def list_all() -> List[SourceRecord]:
    """Get all sources from the default registry."""
    return get_default_registry().list_all()


def list_domains() -> List[str]:
    """Get all domains from the default registry."""
    return get_default_registry().list_domains()


def domains_joined(separator: Optional[str] = None) -> str:
    """Join default registry domains with a separator."""
    return get_default_registry().domains_joined(separator)


def build_site_restriction(category: Optional[str] = None) -> str:
    """Build a site restriction from the default registry."""
    return get_default_registry().build_site_restriction(category)


def build_country_site_restriction(country: str) -> str:
    """Build a country site restriction from the default registry."""
    return get_default_registry().build_country_site_restriction(country)


def is_whitelisted(url: str) -> bool:
    """Check a URL against the default registry."""
    return get_default_registry().is_whitelisted(url)


def source_for_url(url: str) -> Optional[SourceRecord]:
    """Find the source of a URL in the default registry."""
    return get_default_registry().source_for_url(url)


def by_category(category: str) -> List[SourceRecord]:
    """Get sources by category from the default registry."""
    return get_default_registry().by_category(category)


def by_country(country: str) -> List[SourceRecord]:
    """Get sources by country from the default registry."""
    return get_default_registry().by_country(country)
