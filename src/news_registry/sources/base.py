#!/usr/bin/env python3
"""
Source record data model.

Describes one curated news outlet in the allowlist.
"""

from dataclasses import dataclass
from typing import Dict, Any

from ..exceptions import ValidationError


@dataclass(frozen=True)
class SourceRecord:
    """
    Metadata about a curated news source.
    
    ``country`` and ``category`` are open strings, new values need no code change.
    """
    name: str
    domain: str
    country: str
    category: str
    
    def __post_init__(self):
        """Clean and validate fields."""
        for field_name in ('name', 'domain', 'country', 'category'):
            value = getattr(self, field_name)
            if not isinstance(value, str):
                raise ValidationError(field_name, value, "str")
            # frozen dataclass, so bypass __setattr__
            object.__setattr__(self, field_name, value.strip())
        
        if not self.name:
            raise ValidationError('name', self.name, "non-empty string")
        if not self.category:
            raise ValidationError('category', self.category, "non-empty string")
        if not self.domain or '://' in self.domain or '/' in self.domain or any(c.isspace() for c in self.domain):
            raise ValidationError('domain', self.domain, "bare hostname without scheme or path")
        if len(self.country) != 2:
            raise ValidationError('country', self.country, "2-character country code")
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'name': self.name,
            'domain': self.domain,
            'country': self.country,
            'category': self.category
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SourceRecord':
        """Create SourceRecord from dictionary (accepts legacy ``type`` key)."""
        category = data.get('category')
        if category is None:
            category = data.get('type', '')
        
        return cls(
            name=data.get('name', ''),
            domain=data.get('domain', ''),
            country=data.get('country', ''),
            category=category
        )
    
    def __repr__(self):
        return f"SourceRecord(name='{self.name}', domain='{self.domain}', country='{self.country}', category='{self.category}')"
