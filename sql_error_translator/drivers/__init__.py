"""
Driver adapters for the SQL error translator.

This package converts driver exceptions into the RawErrorInfo view the
translators classify.
"""

from .dbapi import from_dbapi_error, product_name, translate_dbapi_error

__all__ = [
    "from_dbapi_error",
    "product_name",
    "translate_dbapi_error",
]
