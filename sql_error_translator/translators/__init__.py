"""
Translators package for the SQL error translator.

This package provides the fallback-chaining translator base and the
error code, subclass and SQL state translators built on it.
"""

from .base import FallbackTranslator
from .sql_state import SqlStateTranslator
from .subclass import SubclassTranslator, KIND_CATEGORIES
from .error_code import ErrorCodeTranslator

__all__ = [
    "FallbackTranslator",
    "SqlStateTranslator",
    "SubclassTranslator",
    "KIND_CATEGORIES",
    "ErrorCodeTranslator",
]
