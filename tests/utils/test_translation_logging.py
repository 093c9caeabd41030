#!/usr/bin/env python3
"""
Tests for translation logging functionality.
"""

import json
import logging
import unittest
from unittest.mock import MagicMock, patch

from sql_error_translator.models import (
    ClassificationResult,
    ErrorKind,
    FailureCategory,
    RawErrorInfo,
    VendorProfile,
)
from sql_error_translator.translators import ErrorCodeTranslator
from sql_error_translator.utils.logging import log_translation, setup_logging


class TestTranslationLogging(unittest.TestCase):
    def setUp(self):
        """Set up test fixtures."""
        self.mock_logger = MagicMock(spec=logging.Logger)
        self.error = RawErrorInfo(
            message="duplicate key value",
            state_code="23505",
            kind=ErrorKind.INTEGRITY_CONSTRAINT,
        )
        self.result = ClassificationResult(
            FailureCategory.DUPLICATE_KEY, "insert user", "INSERT INTO users", self.error
        )

    def test_log_translation_record(self):
        """Test that translation logging creates structured records."""
        self.mock_logger.isEnabledFor.return_value = True

        log_translation(self.result, "ErrorCodeTranslator", logger=self.mock_logger)

        self.mock_logger.debug.assert_called_once()

        call_args = self.mock_logger.debug.call_args[0][0]
        self.assertTrue(call_args.startswith("TRANSLATION: "))

        record = json.loads(call_args[len("TRANSLATION: "):])

        self.assertEqual(record["event_type"], "error_translation")
        self.assertEqual(record["translator"], "ErrorCodeTranslator")
        self.assertEqual(record["category"], "duplicate_key")
        self.assertEqual(record["state_code"], "23505")
        self.assertEqual(record["error_code"], 0)
        self.assertEqual(record["kind"], "non-transient/integrity-constraint")
        self.assertEqual(record["message"], "duplicate key value")
        self.assertEqual(record["sql"], "INSERT INTO users")
        self.assertEqual(record["task"], "insert user")

    def test_log_translation_skipped_when_debug_disabled(self):
        """Test that nothing is formatted unless DEBUG is enabled."""
        self.mock_logger.isEnabledFor.return_value = False

        log_translation(self.result, "ErrorCodeTranslator", logger=self.mock_logger)

        self.mock_logger.debug.assert_not_called()

    def test_translators_emit_records(self):
        """Test that a successful translation is logged by the chain."""
        profile = VendorProfile.create(
            "PostgreSQL",
            use_sql_state_for_translation=True,
            codes={FailureCategory.DUPLICATE_KEY: ["23505"]},
        )
        translator = ErrorCodeTranslator(profile)

        with self.assertLogs("sql_error_translator.translators.base", level="DEBUG") as logs:
            translator.translate("insert user", "INSERT INTO users", self.error)

        self.assertEqual(len(logs.output), 1)
        self.assertIn("TRANSLATION: ", logs.output[0])
        self.assertIn('"translator": "ErrorCodeTranslator"', logs.output[0])


class TestSetupLogging(unittest.TestCase):
    """Test cases for logging configuration."""

    @patch("sql_error_translator.utils.logging.logging.basicConfig")
    def test_levels(self, mock_basic_config):
        setup_logging(verbose=True)
        self.assertEqual(mock_basic_config.call_args.kwargs["level"], logging.DEBUG)

        setup_logging()
        self.assertEqual(mock_basic_config.call_args.kwargs["level"], logging.INFO)

        self.assertEqual(logging.getLogger("psycopg").level, logging.WARNING)


if __name__ == '__main__':
    unittest.main()
