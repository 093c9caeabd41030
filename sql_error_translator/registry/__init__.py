"""
Registry package for the SQL error translator.

This package provides the vendor profile registry and the wildcard
matching used to resolve database product names.
"""

from .matching import simple_match, match_any
from .factory import ProfileRegistry, get_registry, reset_registry

__all__ = [
    "simple_match",
    "match_any",
    "ProfileRegistry",
    "get_registry",
    "reset_registry",
]
