#!/usr/bin/env python3
"""
SQL Error Translator Package

A Python package for translating vendor-specific database errors (error
codes, SQL state codes and driver exception kinds) into a small,
vendor-neutral taxonomy of failure categories.

Application code can branch on "duplicate key" or "transient resource
failure" instead of parsing vendor error codes directly.
"""

__version__ = "1.0.0"
__author__ = "SQL Error Translator"
__description__ = "Translate vendor-specific database errors into vendor-neutral failure categories"
__license__ = "Apache-2.0"
__maintainer__ = "SQL Error Translator"
__email__ = "support@example.com"
__url__ = "https://github.com/example/sql-error-translator"
__status__ = "Production"

# Import models for public API
from .models import (
    FailureCategory,
    CODE_CATEGORY_ORDER,
    ErrorKind,
    RawErrorInfo,
    VendorProfile,
    EMPTY_PROFILE,
    ClassificationResult,
)

# Import translators for public API
from .translators import (
    FallbackTranslator,
    ErrorCodeTranslator,
    SubclassTranslator,
    SqlStateTranslator,
)

# Import registry for public API
from .registry import (
    ProfileRegistry,
    get_registry,
    reset_registry,
)

# Import configuration for public API
from .config import (
    ConfigError,
    RegistrySettings,
    SettingsLoader,
)

# Import entry points for public API
from .core import translator_for, translate_error
from .errors import DataAccessError

# Import utilities for public API
from .utils import setup_logging

# Public API exports
__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Data models
    "FailureCategory",
    "CODE_CATEGORY_ORDER",
    "ErrorKind",
    "RawErrorInfo",
    "VendorProfile",
    "EMPTY_PROFILE",
    "ClassificationResult",
    # Translators
    "FallbackTranslator",
    "ErrorCodeTranslator",
    "SubclassTranslator",
    "SqlStateTranslator",
    # Registry
    "ProfileRegistry",
    "get_registry",
    "reset_registry",
    # Configuration
    "ConfigError",
    "RegistrySettings",
    "SettingsLoader",
    # Entry points
    "translator_for",
    "translate_error",
    "DataAccessError",
    # Utilities
    "setup_logging",
]
