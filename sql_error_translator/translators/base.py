"""
Fallback-chaining translator base.

Every translator attempts its own classification first and hands the
error to its fallback when it finds nothing. The last link in the chain
produces an UNCATEGORIZED result, so translation never comes back empty.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..models import ClassificationResult, FailureCategory, RawErrorInfo
from ..utils.logging import log_translation

logger = logging.getLogger(__name__)


class FallbackTranslator(ABC):
    """Base class for translators that delegate to a fallback on a miss."""

    def __init__(self, fallback: Optional["FallbackTranslator"] = None):
        self._fallback = fallback

    @property
    def fallback(self) -> Optional["FallbackTranslator"]:
        return self._fallback

    def translate(
        self, task: Optional[str], sql: Optional[str], error: RawErrorInfo
    ) -> ClassificationResult:
        """
        Translate a database error into a vendor-neutral classification.

        Args:
            task: Readable text describing the task being attempted
            sql: SQL query or update that caused the problem (may be None)
            error: The offending database error

        Returns:
            ClassificationResult wrapping the original error

        Raises:
            ValueError: If error is None
        """
        if error is None:
            raise ValueError("Cannot translate a null database error")
        task = task or ""
        sql = sql or ""

        result = self._do_translate(task, sql, error)
        if result is not None:
            return result

        if self._fallback is not None:
            return self._fallback.translate(task, sql, error)

        return ClassificationResult(
            category=FailureCategory.UNCATEGORIZED, task=task, sql=sql, cause=error
        )

    @abstractmethod
    def _do_translate(
        self, task: str, sql: str, error: RawErrorInfo
    ) -> Optional[ClassificationResult]:
        """Return a result when this translator recognizes the error, else None."""

    def _build_result(
        self, category: FailureCategory, task: str, sql: str, error: RawErrorInfo
    ) -> ClassificationResult:
        result = ClassificationResult(category=category, task=task, sql=sql, cause=error)
        log_translation(result, type(self).__name__, logger=logger)
        return result

    def chain(self):
        """Return the translators in this chain, starting with self."""
        translators = []
        current: Optional[FallbackTranslator] = self
        while current is not None:
            translators.append(current)
            current = current.fallback
        return translators
