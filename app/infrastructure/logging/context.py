"""Request scoped logging context.

Values bound here are merged into every log entry emitted while the request
is handled (see ``structlog.contextvars.merge_contextvars`` in setup).
"""

import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

import structlog

CORRELATION_ID_KEY = "correlation_id"


def new_correlation_id() -> str:
    return uuid.uuid4().hex


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    **extra_context: Any,
) -> Iterator[str]:
    """Bind request metadata for the duration of the block.

    Args:
        correlation_id: Id sent by the caller; a new one is generated if empty.
        request_path: HTTP request path (e.g., "/locale").
        request_method: HTTP method (e.g., "POST").
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The correlation id in effect.
    """
    context: Dict[str, Any] = {
        CORRELATION_ID_KEY: correlation_id or new_correlation_id(),
        "request_path": request_path,
        "request_method": request_method,
        **extra_context,
    }
    context = {key: value for key, value in context.items() if value is not None}

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context[CORRELATION_ID_KEY]
    finally:
        structlog.contextvars.unbind_contextvars(*context)


def get_correlation_id() -> Optional[str]:
    return structlog.contextvars.get_contextvars().get(CORRELATION_ID_KEY)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
