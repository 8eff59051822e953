"""
Data sanitizers for logging.
"""

import re
from typing import Any

from structlog.types import EventDict, WrappedLogger

# Field name patterns that should never reach the logs
SENSITIVE_PATTERNS = [
    r"password",
    r"secret",
    r"token",
    r"api_key",
    r"credential",
    r"credit_card",
    r"cvv",
]

# Fields that should be partially masked
PARTIAL_MASK_FIELDS = {
    "email": lambda v: _mask_email(v),
    "identity": lambda v: _mask_identity(v),
}


class SensitiveDataProcessor:
    """
    Structlog processor that masks sensitive data in log events.
    """

    def __call__(
        self,
        logger: WrappedLogger,
        name: str,
        event_dict: EventDict,
    ) -> EventDict:
        """Process log event and mask sensitive data."""
        return sanitize_for_log(event_dict)


def sanitize_for_log(data: dict[str, Any]) -> dict[str, Any]:
    """
    Sanitize a dictionary for logging.

    Args:
        data: Dictionary to sanitize

    Returns:
        Sanitized dictionary with masked sensitive data
    """
    sanitized = {}

    for key, value in data.items():
        if _is_sensitive_field(key):
            sanitized[key] = "***REDACTED***"
        elif key in PARTIAL_MASK_FIELDS:
            if value is not None:
                sanitized[key] = PARTIAL_MASK_FIELDS[key](str(value))
            else:
                sanitized[key] = None
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_log(value)
        elif isinstance(value, list):
            sanitized[key] = [
                sanitize_for_log(item) if isinstance(item, dict) else item for item in value
            ]
        else:
            sanitized[key] = value

    return sanitized


def _is_sensitive_field(field_name: str) -> bool:
    """Check if a field name indicates sensitive data."""
    field_lower = field_name.lower()
    return any(re.search(pattern, field_lower) for pattern in SENSITIVE_PATTERNS)


def _mask_email(value: str) -> str:
    """Mask email keeping domain."""
    if "@" in value:
        local, domain = value.rsplit("@", 1)
        if len(local) > 2:
            return f"{local[0]}***@{domain}"
        return f"***@{domain}"
    return "***"


def _mask_identity(value: str) -> str:
    """Mask record identities keeping the last 2 chars."""
    if len(value) > 4:
        return f"***{value[-2:]}"
    return value
