#!/usr/bin/env python3
"""
Tests for failure categories, raw errors, results and DataAccessError.
"""

import unittest

from sql_error_translator.errors import DataAccessError
from sql_error_translator.models import (
    CODE_CATEGORY_ORDER,
    ClassificationResult,
    ErrorKind,
    FailureCategory,
    RawErrorInfo,
)


class TestFailureCategory(unittest.TestCase):
    """Test cases for the failure taxonomy."""

    def test_code_category_order(self):
        """Test the precedence order of code-driven categories."""
        self.assertEqual(len(CODE_CATEGORY_ORDER), 10)
        self.assertEqual(CODE_CATEGORY_ORDER[0], FailureCategory.BAD_GRAMMAR)
        self.assertEqual(CODE_CATEGORY_ORDER[2], FailureCategory.DUPLICATE_KEY)
        self.assertEqual(CODE_CATEGORY_ORDER[-1], FailureCategory.CANNOT_SERIALIZE_TRANSACTION)
        self.assertNotIn(FailureCategory.UNCATEGORIZED, CODE_CATEGORY_ORDER)

    def test_is_transient(self):
        """Test transient flag on categories."""
        self.assertTrue(FailureCategory.DEADLOCK_LOSER.is_transient)
        self.assertTrue(FailureCategory.QUERY_TIMEOUT.is_transient)
        self.assertFalse(FailureCategory.DUPLICATE_KEY.is_transient)
        self.assertFalse(FailureCategory.UNCATEGORIZED.is_transient)


class TestRawErrorInfo(unittest.TestCase):
    """Test cases for the raw error view."""

    def test_iter_causes(self):
        """Test walking the cause chain."""
        root = RawErrorInfo(message="root", error_code=1406)
        middle = RawErrorInfo(message="middle", cause=root)
        top = RawErrorInfo(message="top", cause=middle)

        self.assertEqual([e.message for e in top.iter_causes()], ["top", "middle", "root"])

    def test_has_codes(self):
        """Test detection of numeric or state codes."""
        self.assertFalse(RawErrorInfo(message="x").has_codes)
        self.assertFalse(RawErrorInfo(message="x", state_code="").has_codes)
        self.assertTrue(RawErrorInfo(message="x", state_code="23505").has_codes)
        self.assertTrue(RawErrorInfo(message="x", error_code=-803).has_codes)

    def test_original_excluded_from_equality(self):
        """Test that the driver exception does not affect equality."""
        a = RawErrorInfo(message="x", original=RuntimeError("a"))
        b = RawErrorInfo(message="x", original=RuntimeError("b"))
        self.assertEqual(a, b)

    def test_error_kind_values(self):
        """Test that kinds round-trip through their string values."""
        self.assertIs(ErrorKind("transient/timeout"), ErrorKind.TIMEOUT)
        self.assertIs(ErrorKind("batch-update"), ErrorKind.BATCH_UPDATE)
        self.assertEqual(RawErrorInfo(message="x").kind, ErrorKind.GENERIC)


class TestClassificationResult(unittest.TestCase):
    """Test cases for classification results."""

    def setUp(self):
        self.error = RawErrorInfo(message="Duplicate entry 'a' for key 'PRIMARY'", error_code=1062)

    def test_message_template(self):
        """Test the standard message template."""
        result = ClassificationResult(
            FailureCategory.DUPLICATE_KEY, "insert user", "INSERT INTO users", self.error
        )
        self.assertEqual(
            result.message,
            "insert user; SQL [INSERT INTO users]; Duplicate entry 'a' for key 'PRIMARY'",
        )
        self.assertFalse(result.is_uncategorized)

    def test_is_uncategorized(self):
        result = ClassificationResult(FailureCategory.UNCATEGORIZED, "", "", self.error)
        self.assertTrue(result.is_uncategorized)

    def test_to_exception(self):
        """Test converting a result to a raisable error."""
        original = RuntimeError("driver failure")
        error = RawErrorInfo(message="driver failure", error_code=1213, original=original)
        result = ClassificationResult(FailureCategory.DEADLOCK_LOSER, "task", "sql", error)

        exc = result.to_exception()

        self.assertIsInstance(exc, DataAccessError)
        self.assertIs(exc.result, result)
        self.assertEqual(exc.category, FailureCategory.DEADLOCK_LOSER)
        self.assertTrue(exc.is_transient)
        self.assertIs(exc.__cause__, original)
        self.assertEqual(str(exc), "task; SQL [sql]; driver failure")

    def test_to_exception_without_original(self):
        """Test that no chaining happens when there is no driver exception."""
        result = ClassificationResult(FailureCategory.BAD_GRAMMAR, "t", "s", self.error)
        self.assertIsNone(result.to_exception().__cause__)


if __name__ == '__main__':
    unittest.main()
