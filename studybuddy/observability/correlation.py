"""
Correlation ID context.

Carries the request correlation ID across async boundaries using contextvars.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

import uuid
from contextvars import ContextVar

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Set correlation ID in context.

    Args:
        correlation_id: Optional correlation ID (generates new if None)

    Returns:
        str: The correlation ID that was set
    """
    correlation_id = correlation_id or uuid.uuid4().hex
    correlation_id_ctx.set(correlation_id)
    return correlation_id


def get_correlation_id() -> str:
    return correlation_id_ctx.get()
