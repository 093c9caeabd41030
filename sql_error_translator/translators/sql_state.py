"""
Generic SQL state translator.

Classifies by the two-character class of the SQL state code only, with no
vendor knowledge. Used as the last layer of the default chain.
"""

import logging
from typing import Optional

from ..constants import (
    BAD_GRAMMAR_STATE_CLASSES,
    DATA_INTEGRITY_STATE_CLASSES,
    RESOURCE_FAILURE_STATE_CLASSES,
    TRANSIENT_RESOURCE_STATE_CLASSES,
    CONCURRENCY_FAILURE_STATE_CLASSES,
)
from ..models import ClassificationResult, FailureCategory, RawErrorInfo
from .base import FallbackTranslator

logger = logging.getLogger(__name__)

_STATE_CLASS_TABLE = (
    (BAD_GRAMMAR_STATE_CLASSES, FailureCategory.BAD_GRAMMAR),
    (DATA_INTEGRITY_STATE_CLASSES, FailureCategory.DATA_INTEGRITY_VIOLATION),
    (RESOURCE_FAILURE_STATE_CLASSES, FailureCategory.DATA_ACCESS_RESOURCE_FAILURE),
    (TRANSIENT_RESOURCE_STATE_CLASSES, FailureCategory.TRANSIENT_RESOURCE_FAILURE),
    (CONCURRENCY_FAILURE_STATE_CLASSES, FailureCategory.CONCURRENCY_FAILURE),
)


def _state_code(error: RawErrorInfo) -> Optional[str]:
    # Batch failures often carry the state only on the chained error
    if error.state_code:
        return error.state_code
    if error.next_error is not None:
        return error.next_error.state_code
    return None


class SqlStateTranslator(FallbackTranslator):
    """Translator keyed on the generic SQL state class."""

    def _do_translate(
        self, task: str, sql: str, error: RawErrorInfo
    ) -> Optional[ClassificationResult]:
        state_code = _state_code(error)
        if state_code is None or len(state_code) < 2:
            return None

        state_class = state_code[:2].upper()
        for state_classes, category in _STATE_CLASS_TABLE:
            if state_class in state_classes:
                return self._build_result(category, task, sql, error)

        logger.debug(f"No generic mapping for SQL state '{state_code}'")
        return None
