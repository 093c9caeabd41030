#!/usr/bin/env python3
"""
Tests for the VendorProfile model.
"""

import dataclasses
import unittest

from sql_error_translator.models import (
    CODE_CATEGORY_ORDER,
    EMPTY_PROFILE,
    FailureCategory,
    VendorProfile,
)


class TestVendorProfileCreate(unittest.TestCase):
    """Test cases for building vendor profiles."""

    def test_code_sets_are_sorted(self):
        """Test that every code set is stored sorted."""
        profile = VendorProfile.create(
            "MySQL",
            codes={
                FailureCategory.BAD_GRAMMAR: ["1146", "1054", "1064"],
                FailureCategory.DEADLOCK_LOSER: ["1213"],
            },
        )

        self.assertEqual(profile.bad_grammar_codes, ("1054", "1064", "1146"))
        self.assertEqual(profile.deadlock_loser_codes, ("1213",))

    def test_duplicate_key_codes_sorted_by_default(self):
        """Test that duplicate-key codes are sorted like the others by default."""
        profile = VendorProfile.create(
            "Sybase", codes={FailureCategory.DUPLICATE_KEY: ["2626", "2601", "2615"]}
        )
        self.assertEqual(profile.duplicate_key_codes, ("2601", "2615", "2626"))

    def test_duplicate_key_codes_keep_configured_order(self):
        """Test that the legacy policy keeps duplicate-key codes in configured order."""
        profile = VendorProfile.create(
            "Sybase",
            codes={
                FailureCategory.DUPLICATE_KEY: ["2626", "2601", "2615"],
                FailureCategory.BAD_GRAMMAR: ["102", "101"],
            },
            sort_duplicate_key_codes=False,
        )
        self.assertEqual(profile.duplicate_key_codes, ("2626", "2601", "2615"))
        self.assertEqual(profile.bad_grammar_codes, ("101", "102"))

    def test_missing_categories_are_empty(self):
        """Test that categories without codes get empty tuples."""
        profile = VendorProfile.create("H2")
        for category in CODE_CATEGORY_ORDER:
            with self.subTest(category=category):
                self.assertEqual(profile.codes_for(category), ())
        self.assertTrue(profile.is_empty())

    def test_non_code_category_rejected(self):
        """Test that categories outside the code tables cannot be configured."""
        with self.assertRaises(ValueError) as cm:
            VendorProfile.create("H2", codes={FailureCategory.QUERY_TIMEOUT: ["1"]})
        self.assertIn("query_timeout", str(cm.exception))

    def test_codes_for_non_code_category_raises(self):
        """Test that codes_for only accepts code-driven categories."""
        with self.assertRaises(KeyError):
            EMPTY_PROFILE.codes_for(FailureCategory.UNCATEGORIZED)


class TestVendorProfileNames(unittest.TestCase):
    """Test cases for product names."""

    def test_product_names_start_with_primary_name(self):
        """Test that the primary name is the first product name."""
        profile = VendorProfile.create("MySQL", aliases=["MySQL", "MariaDB"])
        self.assertEqual(profile.product_names, ("MySQL", "MySQL", "MariaDB"))
        self.assertEqual(profile.aliases, ("MySQL", "MariaDB"))

    def test_empty_profile(self):
        """Test the sentinel profile."""
        self.assertEqual(EMPTY_PROFILE.product_names, ())
        self.assertFalse(EMPTY_PROFILE.use_sql_state_for_translation)
        self.assertTrue(EMPTY_PROFILE.is_empty())

    def test_profile_is_immutable(self):
        """Test that profiles cannot be modified after construction."""
        profile = VendorProfile.create("H2")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            profile.primary_name = "Other"


if __name__ == '__main__':
    unittest.main()
