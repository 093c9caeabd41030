"""
DB-API driver adapter.

This module builds RawErrorInfo views from exceptions raised by DB-API 2.0
drivers. psycopg exceptions are recognized precisely; other drivers are
classified from their DB-API base exception class.
"""

import logging
from typing import Any, List, Optional

import psycopg
from psycopg import errors as pg_errors

from ..models import ClassificationResult, ErrorKind, RawErrorInfo

logger = logging.getLogger(__name__)

# Checked in order, most specific first
_PSYCOPG_KINDS = (
    (pg_errors.SerializationFailure, ErrorKind.TRANSACTION_ROLLBACK),
    (pg_errors.DeadlockDetected, ErrorKind.TRANSACTION_ROLLBACK),
    (pg_errors.QueryCanceled, ErrorKind.TIMEOUT),
    (pg_errors.InvalidAuthorizationSpecification, ErrorKind.INVALID_AUTHORIZATION),
    (pg_errors.InsufficientPrivilege, ErrorKind.INVALID_AUTHORIZATION),
    (pg_errors.FeatureNotSupported, ErrorKind.FEATURE_NOT_SUPPORTED),
    (pg_errors.SyntaxErrorOrAccessRuleViolation, ErrorKind.SYNTAX_ERROR),
    (pg_errors.ConnectionException, ErrorKind.NON_TRANSIENT_CONNECTION),
)

# DB-API 2.0 exception class names, matched anywhere in the class hierarchy
_DBAPI_KINDS = {
    "IntegrityError": ErrorKind.INTEGRITY_CONSTRAINT,
    "DataError": ErrorKind.DATA,
    "NotSupportedError": ErrorKind.FEATURE_NOT_SUPPORTED,
    "ProgrammingError": ErrorKind.SYNTAX_ERROR,
}


def _error_kind(exc: BaseException) -> ErrorKind:
    if isinstance(exc, psycopg.Error):
        for error_class, kind in _PSYCOPG_KINDS:
            if isinstance(exc, error_class):
                return kind

    for klass in type(exc).__mro__:
        kind = _DBAPI_KINDS.get(klass.__name__)
        if kind is not None:
            return kind

    # Some drivers signal timeouts only through the class name
    if "Timeout" in type(exc).__name__:
        return ErrorKind.TIMEOUT
    return ErrorKind.GENERIC


def _state_code(exc: BaseException) -> Optional[str]:
    for attr in ("sqlstate", "pgcode"):
        value = getattr(exc, attr, None)
        if isinstance(value, str) and value:
            return value
    return None


def _error_code(exc: BaseException) -> int:
    errno = getattr(exc, "errno", None)
    if isinstance(errno, int) and not isinstance(errno, bool):
        return errno
    args = getattr(exc, "args", ())
    if args and isinstance(args[0], int) and not isinstance(args[0], bool):
        return args[0]
    return 0


def _message(exc: BaseException) -> str:
    # MySQL drivers raise (errno, message) pairs
    args = getattr(exc, "args", ())
    if len(args) >= 2 and isinstance(args[0], int) and isinstance(args[1], str):
        return args[1]
    return str(exc)


def _cause_chain(exc: BaseException) -> List[BaseException]:
    """Return exc followed by its chained causes, stopping at a repeat."""
    chain = [exc]
    seen = {id(exc)}
    nested = exc.__cause__
    while isinstance(nested, Exception) and id(nested) not in seen:
        chain.append(nested)
        seen.add(id(nested))
        nested = nested.__cause__
    return chain


def from_dbapi_error(exc: BaseException) -> RawErrorInfo:
    """
    Build a RawErrorInfo view of a driver exception.

    Args:
        exc: Exception raised by a DB-API driver

    Returns:
        RawErrorInfo carrying the exception's codes, kind and cause chain

    Raises:
        ValueError: If exc is None
    """
    if exc is None:
        raise ValueError("Cannot adapt a null driver exception")

    # Built from the innermost cause outwards
    error: Optional[RawErrorInfo] = None
    for current in reversed(_cause_chain(exc)):
        error = RawErrorInfo(
            message=_message(current),
            state_code=_state_code(current),
            error_code=_error_code(current),
            cause=error,
            kind=_error_kind(current),
            original=current,
        )
    return error


def product_name(connection: Any) -> Optional[str]:
    """
    Return the database product name reported by a connection.

    psycopg connections expose it as ``connection.info.vendor``.
    """
    info = getattr(connection, "info", None)
    vendor = getattr(info, "vendor", None)
    if isinstance(vendor, str) and vendor:
        return vendor
    logger.debug(f"Connection {type(connection).__name__} does not report a product name")
    return None


def translate_dbapi_error(
    task: Optional[str],
    sql: Optional[str],
    exc: BaseException,
    db_name: Optional[str] = None,
    connection: Any = None,
) -> ClassificationResult:
    """
    Translate a DB-API driver exception.

    The vendor profile is resolved from db_name, or from the connection's
    reported product name when db_name is not given.

    Args:
        task: Readable text describing the task being attempted
        sql: SQL that caused the problem (may be None)
        exc: Exception raised by the driver
        db_name: Database product name, if known
        connection: Connection the error came from, used to find the product name

    Returns:
        ClassificationResult wrapping the adapted error
    """
    from ..core import translator_for

    if db_name is None and connection is not None:
        db_name = product_name(connection)
    return translator_for(db_name).translate(task, sql, from_dbapi_error(exc))
