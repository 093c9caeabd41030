#!/usr/bin/env python3
"""
Classification Result Models

This module contains the value produced by a translation call.
"""

from dataclasses import dataclass

from .category import FailureCategory
from .error import RawErrorInfo


def build_message(task: str, sql: str, error: RawErrorInfo) -> str:
    """Standard message for translated errors: ``<task>; SQL [<sql>]; <message>``."""
    return f"{task}; SQL [{sql}]; {error.message}"


@dataclass(frozen=True)
class ClassificationResult:
    """
    Outcome of translating one database error.

    Attributes:
        category: Vendor-neutral failure category
        task: Description of the task being attempted
        sql: SQL that caused the problem (empty when unknown)
        cause: The error that was classified, always preserved
    """

    category: FailureCategory
    task: str
    sql: str
    cause: RawErrorInfo

    @property
    def message(self) -> str:
        return build_message(self.task, self.sql, self.cause)

    @property
    def is_uncategorized(self) -> bool:
        return self.category is FailureCategory.UNCATEGORIZED

    def to_exception(self):
        """Return a raisable DataAccessError for this result."""
        from ..errors import DataAccessError

        return DataAccessError(self)
