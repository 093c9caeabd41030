#!/usr/bin/env python3
"""
Application Constants

This module contains the configuration constants and generic SQL state
tables used throughout the SQL error translator.
"""

import os

# Environment variables read by the registry settings loader
ENV_DEFAULT_TABLE_PATH = "SQL_ERROR_CODES_DEFAULT_PATH"
ENV_OVERRIDE_TABLE_PATH = "SQL_ERROR_CODES_OVERRIDE_PATH"
ENV_SORT_DUPLICATE_KEYS = "SQL_ERROR_CODES_SORT_DUPLICATE_KEYS"

# Local dotenv file consulted before the process environment
DOTENV_FILE = ".env.local"

# Bundled vendor table shipped with the package
DEFAULT_TABLE_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "data", "sql-error-codes.json"
)

# Optional user table; entries replace bundled entries with the same id
OVERRIDE_TABLE_PATH = "sql-error-codes.json"

# Generic SQL state classes (first two characters of the state code)
BAD_GRAMMAR_STATE_CLASSES = frozenset({"07", "21", "2A", "37", "42", "65"})
DATA_INTEGRITY_STATE_CLASSES = frozenset({"01", "02", "22", "23", "27", "44"})
RESOURCE_FAILURE_STATE_CLASSES = frozenset({"08", "53", "54", "57", "58"})
TRANSIENT_RESOURCE_STATE_CLASSES = frozenset({"JW", "JZ", "S1"})
CONCURRENCY_FAILURE_STATE_CLASSES = frozenset({"40", "61"})
