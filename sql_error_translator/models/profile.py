#!/usr/bin/env python3
"""
Vendor Profile Models

This module contains the immutable per-vendor classification rules
loaded from the error code tables.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from .category import CODE_CATEGORY_ORDER, FailureCategory


def _sorted_codes(codes: Optional[Iterable[str]]) -> Tuple[str, ...]:
    if not codes:
        return ()
    return tuple(sorted(codes))


@dataclass(frozen=True)
class VendorProfile:
    """
    Error code classification rules for one database vendor.

    Every code tuple is kept sorted so it can be searched with bisect.
    The duplicate-key codes are the exception when the profile was built
    with ``sort_duplicate_key_codes=False``, which keeps the order they
    were configured in.

    Attributes:
        primary_name: Canonical vendor key (e.g. "MySQL")
        aliases: Additional product names or wildcard patterns
        use_sql_state_for_translation: Classify by SQL state instead of error code
    """

    primary_name: str
    aliases: Tuple[str, ...] = ()
    use_sql_state_for_translation: bool = False
    bad_grammar_codes: Tuple[str, ...] = ()
    invalid_result_set_access_codes: Tuple[str, ...] = ()
    duplicate_key_codes: Tuple[str, ...] = ()
    data_integrity_violation_codes: Tuple[str, ...] = ()
    permission_denied_codes: Tuple[str, ...] = ()
    data_access_resource_failure_codes: Tuple[str, ...] = ()
    transient_resource_failure_codes: Tuple[str, ...] = ()
    cannot_acquire_lock_codes: Tuple[str, ...] = ()
    deadlock_loser_codes: Tuple[str, ...] = ()
    cannot_serialize_transaction_codes: Tuple[str, ...] = ()

    @classmethod
    def create(
        cls,
        primary_name: str,
        aliases: Iterable[str] = (),
        use_sql_state_for_translation: bool = False,
        codes: Optional[Dict[FailureCategory, Iterable[str]]] = None,
        sort_duplicate_key_codes: bool = True,
    ) -> "VendorProfile":
        """
        Build a profile, sorting the code sets.

        Args:
            primary_name: Canonical vendor key
            aliases: Additional product names or wildcard patterns
            use_sql_state_for_translation: Classify by SQL state instead of error code
            codes: Mapping of code-driven category to its codes
            sort_duplicate_key_codes: Sort the duplicate-key codes like the others

        Returns:
            VendorProfile instance

        Raises:
            ValueError: If a category in ``codes`` is not code-driven
        """
        codes = codes or {}
        unknown = [c for c in codes if c not in _CODE_FIELDS]
        if unknown:
            raise ValueError(
                f"Categories cannot be configured by code: {', '.join(c.value for c in unknown)}"
            )

        values = {}
        for category, field_name in _CODE_FIELDS.items():
            category_codes = codes.get(category)
            if category is FailureCategory.DUPLICATE_KEY and not sort_duplicate_key_codes:
                values[field_name] = tuple(category_codes or ())
            else:
                values[field_name] = _sorted_codes(category_codes)

        return cls(
            primary_name=primary_name,
            aliases=tuple(aliases),
            use_sql_state_for_translation=use_sql_state_for_translation,
            **values,
        )

    @property
    def product_names(self) -> Tuple[str, ...]:
        """Primary name followed by the aliases, as used for lookups."""
        if not self.primary_name:
            return self.aliases
        return (self.primary_name,) + self.aliases

    def codes_for(self, category: FailureCategory) -> Tuple[str, ...]:
        """
        Return the configured codes for a code-driven category.

        Raises:
            KeyError: If the category is not code-driven
        """
        return getattr(self, _CODE_FIELDS[category])

    def is_empty(self) -> bool:
        return not any(self.codes_for(category) for category in CODE_CATEGORY_ORDER)


_CODE_FIELDS = {
    FailureCategory.BAD_GRAMMAR: "bad_grammar_codes",
    FailureCategory.INVALID_RESULT_SET_ACCESS: "invalid_result_set_access_codes",
    FailureCategory.DUPLICATE_KEY: "duplicate_key_codes",
    FailureCategory.DATA_INTEGRITY_VIOLATION: "data_integrity_violation_codes",
    FailureCategory.PERMISSION_DENIED: "permission_denied_codes",
    FailureCategory.DATA_ACCESS_RESOURCE_FAILURE: "data_access_resource_failure_codes",
    FailureCategory.TRANSIENT_RESOURCE_FAILURE: "transient_resource_failure_codes",
    FailureCategory.CANNOT_ACQUIRE_LOCK: "cannot_acquire_lock_codes",
    FailureCategory.DEADLOCK_LOSER: "deadlock_loser_codes",
    FailureCategory.CANNOT_SERIALIZE_TRANSACTION: "cannot_serialize_transaction_codes",
}

# Returned when no vendor matches; never classifies anything.
EMPTY_PROFILE = VendorProfile(primary_name="")
