"""
Error code translator.

Classifies database errors with a vendor profile's error code tables,
keyed either by the vendor's numeric error code or by the SQL state,
depending on the profile.
"""

import bisect
import logging
from typing import Optional, Sequence

from ..models import (
    CODE_CATEGORY_ORDER,
    ClassificationResult,
    ErrorKind,
    RawErrorInfo,
    VendorProfile,
)
from ..registry import get_registry
from .base import FallbackTranslator
from .subclass import SubclassTranslator

logger = logging.getLogger(__name__)


def _contains(codes: Sequence[str], key: str) -> bool:
    """Binary search membership test; codes must be sorted."""
    index = bisect.bisect_left(codes, key)
    return index < len(codes) and codes[index] == key


def _unwrap_batch_error(error: RawErrorInfo) -> RawErrorInfo:
    """Use the chained error of a batch failure when it carries real codes."""
    if error.kind is ErrorKind.BATCH_UPDATE and error.next_error is not None:
        if error.next_error.has_codes:
            logger.debug("Using nested error from the batch update failure")
            return error.next_error
    return error


def _first_error_code(error: RawErrorInfo) -> str:
    # Some drivers attach the real code only to a nested cause (e.g. truncation)
    for current in error.iter_causes():
        if current.error_code != 0:
            return str(current.error_code)
    return "0"


class ErrorCodeTranslator(FallbackTranslator):
    """
    Translator driven by a vendor profile's error code tables.

    Falls back to SubclassTranslator by default, so errors the profile
    does not cover are still classified by exception kind and SQL state.
    """

    def __init__(
        self,
        profile: VendorProfile,
        fallback: Optional[FallbackTranslator] = None,
    ):
        super().__init__(fallback if fallback is not None else SubclassTranslator())
        self._profile = profile

    @classmethod
    def for_database(
        cls, db_name: str, fallback: Optional[FallbackTranslator] = None
    ) -> "ErrorCodeTranslator":
        """
        Create a translator for a database product name.

        Args:
            db_name: Database product name (e.g. "PostgreSQL", "DB2/NT")
            fallback: Optional fallback translator

        Returns:
            ErrorCodeTranslator using the registry profile for db_name
        """
        return cls(get_registry().get_error_codes(db_name), fallback=fallback)

    @property
    def profile(self) -> VendorProfile:
        return self._profile

    def lookup_key(self, error: RawErrorInfo) -> Optional[str]:
        """Return the code this translator would look up for an error."""
        if self._profile.use_sql_state_for_translation:
            return error.state_code
        return _first_error_code(error)

    def _do_translate(
        self, task: str, sql: str, error: RawErrorInfo
    ) -> Optional[ClassificationResult]:
        if self._profile.is_empty():
            logger.debug(
                f"No error codes configured for '{self._profile.primary_name}', using the fallback translator"
            )
            return None

        working = _unwrap_batch_error(error)
        key = self.lookup_key(working)

        if key is not None:
            for category in CODE_CATEGORY_ORDER:
                if _contains(self._profile.codes_for(category), key):
                    return self._build_result(category, task, sql, working)

        if logger.isEnabledFor(logging.DEBUG):
            if self._profile.use_sql_state_for_translation:
                codes = f"SQL state '{working.state_code}', error code '{working.error_code}'"
            else:
                codes = f"error code '{working.error_code}'"
            logger.debug(
                f"Unable to translate database error with {codes}, will now try the fallback translator"
            )
        return None
