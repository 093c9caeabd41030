"""
Schema-driven configuration loaders.

This module provides the SettingsLoader, which merges registry settings
from multiple sources, and the loader that turns an error code table file
into vendor profiles.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from ..models import VendorProfile
from .env import ConfigError, load_dotenv_file, read_env_values
from .schema import RegistrySettings, VendorEntry

logger = logging.getLogger(__name__)


def _format_validation_error(prefix: str, error: ValidationError) -> str:
    errors = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<entry>"
        errors.append(f"{location}: {item['msg']}")
    return prefix + "\n" + "\n".join(f"  - {err}" for err in errors)


class SettingsLoader:
    """Loads and validates registry settings using a schema-driven approach."""

    @staticmethod
    def load(
        schema: type[RegistrySettings] = RegistrySettings,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> RegistrySettings:
        """
        Load settings from all sources with precedence handling.

        Loading order (lowest to highest priority):
        1. Schema defaults
        2. .env.local file (variables already set in the environment win)
        3. OS environment variables
        4. Explicit overrides, keyed by field name

        Args:
            schema: The settings schema class to use
            overrides: Direct overrides mapping

        Returns:
            Validated settings instance

        Raises:
            ConfigError: If settings validation fails
        """
        load_dotenv_file()

        settings_dict: Dict[str, Any] = read_env_values(schema)

        if overrides:
            for field_name, value in overrides.items():
                if value is None:
                    continue
                if isinstance(value, str):
                    # Explicit empty string clears the value
                    stripped = value.strip()
                    settings_dict[field_name] = stripped or None
                else:
                    settings_dict[field_name] = value

        try:
            settings = schema(**settings_dict)
            logger.debug("Registry settings loaded and validated successfully")
            return settings
        except ValidationError as e:
            raise ConfigError(_format_validation_error("Registry settings validation failed:", e)) from e


def parse_profile_entry(
    raw: Any, sort_duplicate_key_codes: bool = True
) -> VendorProfile:
    """
    Parse one error code table entry into a VendorProfile.

    Args:
        raw: Decoded JSON entry
        sort_duplicate_key_codes: Sort the duplicate-key codes like the others

    Returns:
        VendorProfile for the entry

    Raises:
        ConfigError: If the entry is malformed
    """
    try:
        entry = VendorEntry.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(_format_validation_error("Invalid vendor entry:", e)) from e
    return entry.to_profile(sort_duplicate_key_codes=sort_duplicate_key_codes)


def load_profile_table(
    path: Optional[str], sort_duplicate_key_codes: bool = True
) -> Dict[str, VendorProfile]:
    """
    Load an error code table file into profiles keyed by primary name.

    A missing file yields an empty table. An unreadable or unparsable file
    is logged and also yields an empty table. Malformed entries are logged
    and dropped; the remaining entries are still loaded.

    Args:
        path: Path of the JSON table (None disables loading)
        sort_duplicate_key_codes: Sort the duplicate-key codes like the others

    Returns:
        Mapping of primary name to VendorProfile, in table order
    """
    if not path:
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except FileNotFoundError:
        logger.debug(f"Error code table {path} not found, skipping")
        return {}
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error(f"Unable to read error code table {path}: {str(e)}")
        return {}

    entries = document.get("vendors") if isinstance(document, dict) else None
    if not isinstance(entries, list):
        logger.error(f"Error code table {path} has no 'vendors' list")
        return {}

    profiles: Dict[str, VendorProfile] = {}
    for index, raw in enumerate(entries):
        try:
            profile = parse_profile_entry(raw, sort_duplicate_key_codes)
        except ConfigError as e:
            logger.error(f"Dropping entry {index} of {path}: {str(e)}")
            continue
        if profile.primary_name in profiles:
            logger.warning(f"Duplicate vendor id '{profile.primary_name}' in {path}, keeping the later entry")
        profiles[profile.primary_name] = profile

    logger.debug(f"Loaded {len(profiles)} vendor profiles from {path}")
    return profiles
