"""
Vendor profile registry.

This module loads the bundled and override error code tables, merges them
by vendor id and resolves database product names to vendor profiles. A
single process-wide registry is built on first access.
"""

import logging
import threading
from typing import Dict, List, Mapping, Optional

from ..config import ConfigError, RegistrySettings, SettingsLoader, load_profile_table
from ..models import EMPTY_PROFILE, VendorProfile
from .matching import match_any

logger = logging.getLogger(__name__)

# Module-level singleton instance
_REGISTRY: Optional["ProfileRegistry"] = None
_REGISTRY_LOCK = threading.Lock()


class ProfileRegistry:
    """Immutable lookup of vendor profiles by database product name."""

    def __init__(self, profiles: Mapping[str, VendorProfile]):
        self._profiles: Dict[str, VendorProfile] = dict(profiles)

    @classmethod
    def load(cls, settings: Optional[RegistrySettings] = None) -> "ProfileRegistry":
        """
        Build a registry from the configured error code tables.

        The bundled table is read first. Entries of the override table then
        replace bundled entries with the same id as a whole; fields are
        never merged individually.

        Args:
            settings: Registry settings (loaded from the environment if None;
                invalid environment values are logged and defaults used)

        Returns:
            ProfileRegistry instance
        """
        if settings is None:
            try:
                settings = SettingsLoader.load()
            except ConfigError as e:
                logger.error(f"{str(e)}\nFalling back to default registry settings")
                settings = RegistrySettings()

        profiles = load_profile_table(
            settings.default_table_path, settings.sort_duplicate_key_codes
        )
        if not profiles:
            logger.error(
                f"Unable to load default error codes from {settings.default_table_path}; "
                "vendor-specific translation is unavailable"
            )

        overrides = load_profile_table(
            settings.override_table_path, settings.sort_duplicate_key_codes
        )
        if overrides:
            logger.info(
                f"Overriding error codes for {', '.join(overrides)} from {settings.override_table_path}"
            )
        profiles.update(overrides)

        logger.info(f"Error code registry loaded with {len(profiles)} vendor profiles")
        return cls(profiles)

    def get_error_codes(self, db_name: Optional[str]) -> VendorProfile:
        """
        Return the profile for a database product name.

        An exact id match wins. Otherwise the first profile whose product
        names match db_name (wildcards allowed) is returned.

        Args:
            db_name: Database product name (e.g. "PostgreSQL", "DB2/NT")

        Returns:
            Matching VendorProfile, or EMPTY_PROFILE when nothing matches
        """
        if db_name is None:
            return EMPTY_PROFILE

        profile = self._profiles.get(db_name)
        if profile is not None:
            return profile

        for candidate in self._profiles.values():
            if match_any(candidate.product_names, db_name):
                return candidate

        logger.debug(f"Error codes for '{db_name}' not found")
        return EMPTY_PROFILE

    def profile_names(self) -> List[str]:
        """Return the primary names of all loaded profiles."""
        return list(self._profiles.keys())

    def __contains__(self, db_name: str) -> bool:
        return db_name in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)


def get_registry() -> ProfileRegistry:
    """
    Return the process-wide registry, loading it on first access.

    Concurrent first callers block until the single load completes and
    all observe the same instance. Reads after that take no lock.
    """
    global _REGISTRY

    registry = _REGISTRY
    if registry is not None:
        return registry

    with _REGISTRY_LOCK:
        if _REGISTRY is None:
            _REGISTRY = ProfileRegistry.load()
        return _REGISTRY


def reset_registry() -> None:
    """Drop the process-wide registry so the next access reloads it."""
    global _REGISTRY

    with _REGISTRY_LOCK:
        _REGISTRY = None
