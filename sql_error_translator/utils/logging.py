"""
Logging utilities for the SQL error translator.

This module provides centralized logging configuration and the structured
records emitted when an error is translated.
"""

import json
import logging
from typing import Optional

from ..models import ClassificationResult


def setup_logging(verbose: bool = False):
    """Setup logging configuration with appropriate level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    format_string = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")

    # Drivers are chatty at DEBUG
    logging.getLogger("psycopg").setLevel(logging.WARNING)


def log_translation(
    result: ClassificationResult,
    translator: str,
    logger: Optional[logging.Logger] = None,
):
    """
    Log a structured record describing one successful translation.

    The record is machine-readable so translation decisions can be
    audited from logs. Nothing is formatted unless DEBUG is enabled.

    Args:
        result: The classification that was produced
        translator: Name of the translator that produced it
        logger: Logger instance to use (defaults to current module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if not logger.isEnabledFor(logging.DEBUG):
        return

    cause = result.cause
    translation_record = {
        "event_type": "error_translation",
        "translator": translator,
        "category": result.category.value,
        "state_code": cause.state_code,
        "error_code": cause.error_code,
        "kind": cause.kind.value,
        "message": cause.message,
        "sql": result.sql,
        "task": result.task,
    }

    logger.debug(f"TRANSLATION: {json.dumps(translation_record, ensure_ascii=False)}")
