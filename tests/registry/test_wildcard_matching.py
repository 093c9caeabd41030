#!/usr/bin/env python3
"""
Tests for product name wildcard matching.
"""

import unittest

from sql_error_translator.registry import match_any, simple_match


class TestSimpleMatch(unittest.TestCase):
    """Test cases for simple_match."""

    def test_literal_pattern(self):
        self.assertTrue(simple_match("H2", "H2"))
        self.assertFalse(simple_match("H2", "H2X"))
        self.assertFalse(simple_match("H2", "h2"))

    def test_prefix_pattern(self):
        self.assertTrue(simple_match("DB2*", "DB2/NT"))
        self.assertTrue(simple_match("DB2*", "DB2"))
        self.assertFalse(simple_match("DB2*", "UDB2"))

    def test_suffix_pattern(self):
        self.assertTrue(simple_match("*Oracle", "My Oracle"))
        self.assertFalse(simple_match("*Oracle", "Oracle Thin Client"))

    def test_substring_pattern(self):
        self.assertTrue(simple_match("*Oracle*", "Oracle Thin Client"))
        self.assertTrue(simple_match("*Oracle*", "Oracle"))
        self.assertFalse(simple_match("*Oracle*", "Orac"))

    def test_star_matches_everything(self):
        self.assertTrue(simple_match("*", ""))
        self.assertTrue(simple_match("*", "anything"))
        self.assertTrue(simple_match("**", "anything"))

    def test_inner_wildcards(self):
        """Test patterns with literal text between wildcards."""
        self.assertTrue(simple_match("A*B*C", "AxxBxxC"))
        self.assertTrue(simple_match("*B*C", "aBcBC"))
        self.assertFalse(simple_match("A*B*C", "AxxCxxB"))

    def test_none_never_matches(self):
        self.assertFalse(simple_match(None, "DB2"))
        self.assertFalse(simple_match("DB2*", None))


class TestMatchAny(unittest.TestCase):
    """Test cases for match_any."""

    def test_match_any(self):
        patterns = ("MySQL", "MariaDB")
        self.assertTrue(match_any(patterns, "MariaDB"))
        self.assertFalse(match_any(patterns, "PostgreSQL"))
        self.assertFalse(match_any((), "MySQL"))


if __name__ == '__main__':
    unittest.main()
