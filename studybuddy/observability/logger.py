"""
Logger configuration.

Installs one stdout handler on the root logger. Every record passing
through it is stamped with the request correlation ID, so lines from
routers, services and background indexing of the same request share it.

Dependencies: logging (stdlib), studybuddy.observability.correlation
System role: Centralized logging configuration
"""

import logging
import sys
from collections.abc import Iterable

from studybuddy.observability.correlation import get_correlation_id

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] - %(message)s"
NO_CORRELATION_ID = "-"


class CorrelationIdFilter(logging.Filter):
    """Attach ``correlation_id`` to every record; "-" outside a request."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or NO_CORRELATION_ID
        return True


def configure_logging(level: str = "INFO", quiet_loggers: Iterable[str] = ()) -> None:
    """
    Configure root logging for the API process and its background tasks.

    Args:
        level: Root log level name (DEBUG, INFO, WARNING, ...)
        quiet_loggers: Third-party logger names capped at WARNING
    """
    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger.setLevel(level.upper())
    root_logger.addHandler(handler)

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)
    # pypdf warns once per malformed object; only errors matter here
    logging.getLogger("pypdf").setLevel(logging.ERROR)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
