"""
Configuration management for the SQL error translator.

This module provides settings handling with support for environment
variables, .env files and explicit overrides, plus loading of the vendor
error code tables. Uses a schema-driven approach with Pydantic for
validation.
"""

from .env import ConfigError
from .schema import RegistrySettings, VendorEntry
from .loader import SettingsLoader, load_profile_table, parse_profile_entry

__all__ = [
    "ConfigError",
    "RegistrySettings",
    "VendorEntry",
    "SettingsLoader",
    "load_profile_table",
    "parse_profile_entry",
]
