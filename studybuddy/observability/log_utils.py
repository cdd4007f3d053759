"""
Logging utilities for safe structured logging.

Keeps embedding vectors and raw PDF payloads out of log lines, and logs
application exceptions by message and details rather than traceback.

Dependencies: logging (stdlib), numpy, studybuddy.core.exceptions
System role: Logging helper functions
"""

import logging
from typing import Any

import numpy as np

from studybuddy.core.exceptions import StudyBuddyException

# Keys logging refuses in `extra`
_RESERVED_KEYS = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


def _safe_extra(fields: dict[str, Any]) -> dict[str, str]:
    return {
        (f"ctx_{key}" if key in _RESERVED_KEYS else key): safe_log_value(val)
        for key, val in fields.items()
    }


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Convert a value to a short string for a log record.

    Vectors, arrays, payloads and mappings are summarised by size.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            val_str = value
        elif isinstance(value, (bytes, bytearray)):
            val_str = f"{type(value).__name__}({len(value)} bytes)"
        elif isinstance(value, np.ndarray):
            val_str = f"ndarray(shape={value.shape})"
        elif isinstance(value, (list, tuple, set)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """Log ``message`` with every context value passed through safe_log_value."""
    logger.log(level, message, extra=_safe_extra(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception at ERROR with structured context.

    Application exceptions contribute their message and details as fields
    (explicit context wins on key clashes) and skip the traceback. Any
    other exception is logged with exc_info.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context fields
    """
    is_domain_error = isinstance(exc, StudyBuddyException)
    fields: dict[str, Any] = dict(exc.details) if is_domain_error else {}
    fields.update(context)

    safe_context = _safe_extra(fields)
    safe_context.update({
        "error_type": type(exc).__name__,
        "error_msg": exc.message if is_domain_error else str(exc),
    })
    logger.error(message, exc_info=None if is_domain_error else exc, extra=safe_context)
