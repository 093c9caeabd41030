"""
Translation entry points.

This module wires the default translator chain for a database product:
error codes from the vendor profile, then the driver exception kind, then
the generic SQL state class.
"""

from typing import Optional

from .models import ClassificationResult, RawErrorInfo
from .registry import get_registry
from .translators import ErrorCodeTranslator, FallbackTranslator, SubclassTranslator


def translator_for(db_name: Optional[str] = None) -> FallbackTranslator:
    """
    Return the default translator chain for a database product.

    Args:
        db_name: Database product name; None skips vendor-specific codes

    Returns:
        ErrorCodeTranslator for the product, or a SubclassTranslator when
        no product name is known
    """
    if db_name is None:
        return SubclassTranslator()
    return ErrorCodeTranslator(get_registry().get_error_codes(db_name))


def translate_error(
    task: Optional[str],
    sql: Optional[str],
    error: RawErrorInfo,
    db_name: Optional[str] = None,
) -> ClassificationResult:
    """Translate an error with the default chain for db_name."""
    return translator_for(db_name).translate(task, sql, error)
