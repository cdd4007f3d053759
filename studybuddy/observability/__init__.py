"""
Observability module.

Provides logging configuration, structured logging helpers, correlation
IDs and request logging middleware.
"""

from studybuddy.observability.correlation import get_correlation_id, set_correlation_id
from studybuddy.observability.logger import CorrelationIdFilter, configure_logging, get_logger

__all__ = [
    "CorrelationIdFilter",
    "configure_logging",
    "get_logger",
    "get_correlation_id",
    "set_correlation_id",
]
