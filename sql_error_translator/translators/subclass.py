"""
Subclass-based translator.

Classifies by the kind of exception the driver raised rather than by
codes. Falls back to the generic SQL state translator for drivers that
only raise generic errors.
"""

from typing import Optional

from ..models import ClassificationResult, ErrorKind, FailureCategory, RawErrorInfo
from .base import FallbackTranslator
from .sql_state import SqlStateTranslator

# Kinds absent from this table (generic transient/non-transient, batch,
# generic) are left to the fallback.
KIND_CATEGORIES = {
    ErrorKind.TRANSIENT_CONNECTION: FailureCategory.TRANSIENT_RESOURCE_FAILURE,
    ErrorKind.TRANSACTION_ROLLBACK: FailureCategory.CONCURRENCY_FAILURE,
    ErrorKind.TIMEOUT: FailureCategory.QUERY_TIMEOUT,
    ErrorKind.NON_TRANSIENT_CONNECTION: FailureCategory.DATA_ACCESS_RESOURCE_FAILURE,
    ErrorKind.DATA: FailureCategory.DATA_INTEGRITY_VIOLATION,
    ErrorKind.INTEGRITY_CONSTRAINT: FailureCategory.DATA_INTEGRITY_VIOLATION,
    ErrorKind.INVALID_AUTHORIZATION: FailureCategory.PERMISSION_DENIED,
    ErrorKind.SYNTAX_ERROR: FailureCategory.BAD_GRAMMAR,
    ErrorKind.FEATURE_NOT_SUPPORTED: FailureCategory.INVALID_USAGE,
    ErrorKind.RECOVERABLE: FailureCategory.RECOVERABLE,
}


class SubclassTranslator(FallbackTranslator):
    """Translator keyed on the driver exception kind."""

    def __init__(self, fallback: Optional[FallbackTranslator] = None):
        super().__init__(fallback if fallback is not None else SqlStateTranslator())

    def _do_translate(
        self, task: str, sql: str, error: RawErrorInfo
    ) -> Optional[ClassificationResult]:
        category = KIND_CATEGORIES.get(error.kind)
        if category is None:
            return None
        return self._build_result(category, task, sql, error)
