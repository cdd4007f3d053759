"""
FastAPI middleware for observability.

Assigns a correlation ID to each request and logs the outcome with timing.
The ID lives in a ContextVar, so the root handler filter stamps it on
every log line written while the request (and its background tasks) run.

Dependencies: fastapi, starlette, studybuddy.observability.correlation
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from studybuddy.observability.correlation import set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its correlation ID, status and duration."""

    async def dispatch(self, request: Request, call_next):
        """
        Tag the request with a correlation ID and log its outcome.

        The ID is taken from the incoming header when present and echoed
        back on the response.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response with correlation ID header
        """
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} - Exception",
                extra={
                    "method": method,
                    "path": path,
                    "process_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
                    "error_type": type(e).__name__,
                    "error_msg": str(e),
                },
            )
            raise

        response.headers[CORRELATION_HEADER] = correlation_id
        logger.info(
            f"{method} {path} - {response.status_code}",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "process_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
            },
        )
        return response
