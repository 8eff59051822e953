"""
Context management for structured logging.
"""

import uuid
from contextvars import ContextVar
from typing import Any, Callable, Optional, TypeVar

import structlog

_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

T = TypeVar("T")


def with_request_context(
    request_id: Optional[str] = None,
    correlation_id: Optional[str] = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator to add request context to all logs within a function.

    Args:
        request_id: Unique request identifier
        correlation_id: Correlation ID for distributed tracing

    Returns:
        Decorated function with logging context
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        def wrapper(*args: Any, **kwargs: Any) -> T:
            req_id = request_id or generate_request_id()
            corr_id = correlation_id or req_id

            _request_id.set(req_id)
            _correlation_id.set(corr_id)

            structlog.contextvars.clear_contextvars()
            structlog.contextvars.bind_contextvars(
                request_id=req_id,
                correlation_id=corr_id,
            )

            try:
                return func(*args, **kwargs)
            finally:
                structlog.contextvars.clear_contextvars()
                _request_id.set(None)
                _correlation_id.set(None)

        return wrapper
    return decorator


def generate_request_id() -> str:
    """Generate a unique request ID."""
    return f"req_{uuid.uuid4().hex[:16]}"


def get_correlation_id() -> str:
    """Get the current correlation ID, generating one if none is set."""
    corr_id = _correlation_id.get()
    if not corr_id:
        corr_id = generate_request_id()
        _correlation_id.set(corr_id)
    return corr_id


def inject_correlation_id(correlation_id: str) -> None:
    """
    Inject an externally supplied correlation ID (e.g. from a request header).

    Args:
        correlation_id: Correlation ID to use for subsequent logs
    """
    _correlation_id.set(correlation_id)
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)
