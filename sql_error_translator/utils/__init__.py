"""
Utilities module for the SQL error translator.

This module provides shared utility functions:
- Logging utilities for consistent logging setup and translation records
"""

from .logging import setup_logging, log_translation

__all__ = [
    "setup_logging",
    "log_translation",
]
