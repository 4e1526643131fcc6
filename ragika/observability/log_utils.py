"""
Logging utilities for operator-facing failure logs.

Client responses carry only generic messages; the full error context,
including RagikaError details and the cause chain, goes to the log.

Dependencies: logging (stdlib), ragika.core.exceptions
System role: Logging helper functions
"""

import logging
from typing import Any

from ragika.core.exceptions import RagikaError


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Convert a value to a bounded string for log context.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        val_str = f"{type(value).__name__}({len(value)} items)"
    else:
        val_str = str(value)

    if len(val_str) > max_length:
        return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
    return val_str


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an exception with its type, details and cause.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context key-value pairs
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    safe_context.update({
        "error_type": type(exc).__name__,
        "error_msg": safe_log_value(exc),
    })
    if isinstance(exc, RagikaError) and exc.details:
        safe_context["error_details"] = safe_log_value(exc.details)
    if exc.__cause__ is not None:
        safe_context["error_cause"] = f"{type(exc.__cause__).__name__}: {exc.__cause__}"
    logger.error(message, extra=safe_context, exc_info=exc)
