"""
Environment configuration helpers.

This module reads schema-declared settings from the process environment
and a local dotenv file.
"""

import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv
from pydantic import BaseModel

from ..constants import DOTENV_FILE

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration validation fails."""
    pass


def load_dotenv_file(path: str = DOTENV_FILE) -> None:
    """Load values from a local dotenv file without replacing set variables."""
    if os.path.exists(path):
        load_dotenv(path, override=False)
        logger.debug(f"Loaded configuration from {path} file")
    else:
        logger.debug(f"{path} file not found, skipping")


def read_env_values(schema: type[BaseModel]) -> Dict[str, Any]:
    """
    Collect values for schema fields that declare an ``env_var``.

    Empty or whitespace-only variables are ignored so schema defaults apply.

    Args:
        schema: Pydantic model class whose fields carry json_schema_extra

    Returns:
        Mapping of field name to raw environment value
    """
    values: Dict[str, Any] = {}
    for field_name, field_info in schema.model_fields.items():
        env_var = field_info.json_schema_extra.get("env_var") if field_info.json_schema_extra else None
        if not env_var:
            continue
        env_value = os.getenv(env_var)
        if env_value is not None:
            stripped = env_value.strip()
            if stripped:
                values[field_name] = stripped
    return values
