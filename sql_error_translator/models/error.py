#!/usr/bin/env python3
"""
Raw Error Models

This module contains the read-only view of a driver-level database error
that translators classify.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


class ErrorKind(str, Enum):
    """
    Closed set of driver exception kinds.

    Mirrors the structured exception taxonomy most drivers expose
    (transient vs. non-transient, then the specific condition).
    """

    TRANSIENT_CONNECTION = "transient/connection"
    TRANSACTION_ROLLBACK = "transient/rollback"
    TIMEOUT = "transient/timeout"
    TRANSIENT = "transient"
    NON_TRANSIENT_CONNECTION = "non-transient/connection"
    DATA = "non-transient/data"
    INTEGRITY_CONSTRAINT = "non-transient/integrity-constraint"
    INVALID_AUTHORIZATION = "non-transient/authorization"
    SYNTAX_ERROR = "non-transient/syntax"
    FEATURE_NOT_SUPPORTED = "non-transient/feature-unsupported"
    NON_TRANSIENT = "non-transient"
    RECOVERABLE = "recoverable"
    BATCH_UPDATE = "batch-update"
    GENERIC = "generic"


@dataclass(frozen=True)
class RawErrorInfo:
    """
    Read-only view of a database error as reported by the driver.

    Attributes:
        message: Driver error message
        state_code: Standardized SQL state code, if the driver supplied one
        error_code: Vendor-specific numeric error code (0 when absent)
        cause: Nested cause, for drivers that attach the real code one level down
        next_error: Chained error carried by batch failures
        kind: Driver exception kind, used by subclass-based translation
        original: Driver exception this view was built from, if any
    """

    message: str
    state_code: Optional[str] = None
    error_code: int = 0
    cause: Optional["RawErrorInfo"] = None
    next_error: Optional["RawErrorInfo"] = None
    kind: ErrorKind = ErrorKind.GENERIC
    original: Optional[BaseException] = field(default=None, compare=False, repr=False)

    def iter_causes(self) -> Iterator["RawErrorInfo"]:
        """Yield this error followed by each nested cause."""
        current: Optional[RawErrorInfo] = self
        while current is not None:
            yield current
            current = current.cause

    @property
    def has_codes(self) -> bool:
        """Whether the error carries a numeric code or a state code."""
        return self.error_code != 0 or bool(self.state_code)
