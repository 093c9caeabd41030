"""
Exception types for callers that prefer raising over branching on results.
"""

from .models import ClassificationResult, FailureCategory


class DataAccessError(Exception):
    """Raisable form of a ClassificationResult."""

    def __init__(self, result: ClassificationResult):
        super().__init__(result.message)
        self.result = result
        # Chain to the driver exception so tracebacks keep the raw diagnostic
        if result.cause.original is not None:
            self.__cause__ = result.cause.original

    @property
    def category(self) -> FailureCategory:
        return self.result.category

    @property
    def is_transient(self) -> bool:
        return self.result.category.is_transient
