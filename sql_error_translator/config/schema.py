"""
Configuration schema definitions using Pydantic.

This module defines the registry settings schema and the schema of one
vendor entry in an error code table.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..constants import (
    DEFAULT_TABLE_PATH,
    OVERRIDE_TABLE_PATH,
    ENV_DEFAULT_TABLE_PATH,
    ENV_OVERRIDE_TABLE_PATH,
    ENV_SORT_DUPLICATE_KEYS,
)
from ..models import FailureCategory, VendorProfile


def _parse_bool(v: Any) -> bool:
    """Parse boolean from string values."""
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        v_lower = v.strip().lower()
        if v_lower in ('1', 'true', 'yes', 'on'):
            return True
        elif v_lower in ('0', 'false', 'no', 'off', ''):
            return False
        else:
            raise ValueError(f"Invalid boolean value: {v}")
    return bool(v)


class RegistrySettings(BaseModel):
    """
    Declarative settings for the profile registry.

    Each field can be set via environment variables or explicit overrides.
    """

    default_table_path: str = Field(
        DEFAULT_TABLE_PATH,
        description="Bundled vendor table, the authoritative baseline",
        json_schema_extra={"env_var": ENV_DEFAULT_TABLE_PATH},
    )

    override_table_path: Optional[str] = Field(
        OVERRIDE_TABLE_PATH,
        description="Optional vendor table whose entries replace bundled entries",
        json_schema_extra={"env_var": ENV_OVERRIDE_TABLE_PATH},
    )

    sort_duplicate_key_codes: bool = Field(
        True,
        description="Sort duplicate-key codes like every other code set",
        json_schema_extra={"env_var": ENV_SORT_DUPLICATE_KEYS},
    )

    @field_validator('sort_duplicate_key_codes', mode='before')
    @classmethod
    def parse_bool(cls, v: Any) -> bool:
        return _parse_bool(v)

    model_config = {
        "validate_assignment": True,
        "extra": "forbid"
    }


# Table key for each code-driven category
CODE_LIST_KEYS = {
    FailureCategory.BAD_GRAMMAR: "badSqlGrammarCodes",
    FailureCategory.INVALID_RESULT_SET_ACCESS: "invalidResultSetAccessCodes",
    FailureCategory.DUPLICATE_KEY: "duplicateKeyCodes",
    FailureCategory.DATA_INTEGRITY_VIOLATION: "dataIntegrityViolationCodes",
    FailureCategory.PERMISSION_DENIED: "permissionDeniedCodes",
    FailureCategory.DATA_ACCESS_RESOURCE_FAILURE: "dataAccessResourceFailureCodes",
    FailureCategory.TRANSIENT_RESOURCE_FAILURE: "transientDataAccessResourceCodes",
    FailureCategory.CANNOT_ACQUIRE_LOCK: "cannotAcquireLockCodes",
    FailureCategory.DEADLOCK_LOSER: "deadlockLoserCodes",
    FailureCategory.CANNOT_SERIALIZE_TRANSACTION: "cannotSerializeTransactionCodes",
}


class VendorEntry(BaseModel):
    """One vendor entry of an error code table."""

    id: str = Field(..., min_length=1, description="Primary database product name")
    database_product_names: List[str] = Field(default_factory=list, alias="databaseProductNames")
    use_sql_state_for_translation: bool = Field(False, alias="useSqlStateForTranslation")

    bad_sql_grammar_codes: List[str] = Field(default_factory=list, alias="badSqlGrammarCodes")
    invalid_result_set_access_codes: List[str] = Field(default_factory=list, alias="invalidResultSetAccessCodes")
    duplicate_key_codes: List[str] = Field(default_factory=list, alias="duplicateKeyCodes")
    data_integrity_violation_codes: List[str] = Field(default_factory=list, alias="dataIntegrityViolationCodes")
    permission_denied_codes: List[str] = Field(default_factory=list, alias="permissionDeniedCodes")
    data_access_resource_failure_codes: List[str] = Field(default_factory=list, alias="dataAccessResourceFailureCodes")
    transient_data_access_resource_codes: List[str] = Field(default_factory=list, alias="transientDataAccessResourceCodes")
    cannot_acquire_lock_codes: List[str] = Field(default_factory=list, alias="cannotAcquireLockCodes")
    deadlock_loser_codes: List[str] = Field(default_factory=list, alias="deadlockLoserCodes")
    cannot_serialize_transaction_codes: List[str] = Field(default_factory=list, alias="cannotSerializeTransactionCodes")

    @field_validator(
        'database_product_names',
        'bad_sql_grammar_codes',
        'invalid_result_set_access_codes',
        'duplicate_key_codes',
        'data_integrity_violation_codes',
        'permission_denied_codes',
        'data_access_resource_failure_codes',
        'transient_data_access_resource_codes',
        'cannot_acquire_lock_codes',
        'deadlock_loser_codes',
        'cannot_serialize_transaction_codes',
        mode='before',
    )
    @classmethod
    def split_comma_list(cls, v: Any) -> Any:
        """Accept either a comma-separated string or a list of values."""
        if v is None:
            return []
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        if isinstance(v, list):
            return [str(item).strip() for item in v if str(item).strip()]
        return v

    @field_validator('use_sql_state_for_translation', mode='before')
    @classmethod
    def parse_bool(cls, v: Any) -> bool:
        return _parse_bool(v)

    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
    }

    def codes_by_category(self) -> dict:
        return {
            category: getattr(self, _ENTRY_FIELDS[key])
            for category, key in CODE_LIST_KEYS.items()
        }

    def to_profile(self, sort_duplicate_key_codes: bool = True) -> VendorProfile:
        """Build the immutable VendorProfile for this entry."""
        return VendorProfile.create(
            primary_name=self.id,
            aliases=self.database_product_names,
            use_sql_state_for_translation=self.use_sql_state_for_translation,
            codes=self.codes_by_category(),
            sort_duplicate_key_codes=sort_duplicate_key_codes,
        )


_ENTRY_FIELDS = {
    field_info.alias: field_name
    for field_name, field_info in VendorEntry.model_fields.items()
    if field_info.alias
}
