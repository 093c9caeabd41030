#!/usr/bin/env python3
"""
Failure Category Models

This module contains the vendor-neutral taxonomy that database errors
are translated into.
"""

from enum import Enum


class FailureCategory(str, Enum):
    """Vendor-neutral failure categories produced by translation."""

    BAD_GRAMMAR = "bad_grammar"
    INVALID_RESULT_SET_ACCESS = "invalid_result_set_access"
    DUPLICATE_KEY = "duplicate_key"
    DATA_INTEGRITY_VIOLATION = "data_integrity_violation"
    PERMISSION_DENIED = "permission_denied"
    DATA_ACCESS_RESOURCE_FAILURE = "data_access_resource_failure"
    TRANSIENT_RESOURCE_FAILURE = "transient_resource_failure"
    CANNOT_ACQUIRE_LOCK = "cannot_acquire_lock"
    DEADLOCK_LOSER = "deadlock_loser"
    CANNOT_SERIALIZE_TRANSACTION = "cannot_serialize_transaction"
    QUERY_TIMEOUT = "query_timeout"
    CONCURRENCY_FAILURE = "concurrency_failure"
    RECOVERABLE = "recoverable"
    INVALID_USAGE = "invalid_usage"
    UNCATEGORIZED = "uncategorized"

    @property
    def is_transient(self) -> bool:
        """Whether retrying the same operation may succeed."""
        return self in _TRANSIENT_CATEGORIES


_TRANSIENT_CATEGORIES = frozenset(
    {
        FailureCategory.TRANSIENT_RESOURCE_FAILURE,
        FailureCategory.CANNOT_ACQUIRE_LOCK,
        FailureCategory.DEADLOCK_LOSER,
        FailureCategory.CANNOT_SERIALIZE_TRANSACTION,
        FailureCategory.QUERY_TIMEOUT,
        FailureCategory.CONCURRENCY_FAILURE,
    }
)

# Order in which a vendor profile's code sets are consulted. A code listed
# under two categories resolves to the earlier one.
CODE_CATEGORY_ORDER = (
    FailureCategory.BAD_GRAMMAR,
    FailureCategory.INVALID_RESULT_SET_ACCESS,
    FailureCategory.DUPLICATE_KEY,
    FailureCategory.DATA_INTEGRITY_VIOLATION,
    FailureCategory.PERMISSION_DENIED,
    FailureCategory.DATA_ACCESS_RESOURCE_FAILURE,
    FailureCategory.TRANSIENT_RESOURCE_FAILURE,
    FailureCategory.CANNOT_ACQUIRE_LOCK,
    FailureCategory.DEADLOCK_LOSER,
    FailureCategory.CANNOT_SERIALIZE_TRANSACTION,
)
