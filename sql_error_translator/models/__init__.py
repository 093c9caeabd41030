#!/usr/bin/env python3
"""
Data Models Module

This module contains all data structures and type definitions used
throughout the SQL error translator.
"""

from .category import FailureCategory, CODE_CATEGORY_ORDER
from .error import ErrorKind, RawErrorInfo
from .profile import VendorProfile, EMPTY_PROFILE
from .result import ClassificationResult, build_message

__all__ = [
    "FailureCategory",
    "CODE_CATEGORY_ORDER",
    "ErrorKind",
    "RawErrorInfo",
    "VendorProfile",
    "EMPTY_PROFILE",
    "ClassificationResult",
    "build_message",
]
