"""
Structured logging for formrules.

This module provides:
- structlog configuration (JSON or key/value output)
- Masking of sensitive fields in log events
- Correlation ID management
"""

from .factory import configure_logging, get_logger
from .sanitizers import sanitize_for_log
from .context import (
    with_request_context,
    get_correlation_id,
    inject_correlation_id,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "sanitize_for_log",
    "with_request_context",
    "get_correlation_id",
    "inject_correlation_id",
]
