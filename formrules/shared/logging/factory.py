"""
Logging factory with structured logging.
"""

import logging
import os

import structlog
from structlog.contextvars import merge_contextvars
from structlog.processors import (
    TimeStamper,
    add_log_level,
    JSONRenderer,
    KeyValueRenderer,
)
from structlog.stdlib import (
    ProcessorFormatter,
    add_logger_name,
    BoundLogger,
)

from .sanitizers import SensitiveDataProcessor


def get_logger(name: str) -> BoundLogger:
    """
    Get a structured logger bound to the formrules service.

    Args:
        name: Logger name (e.g., "domain.rule_set", "application.validate_form")

    Returns:
        Configured structured logger
    """
    return structlog.get_logger(name).bind(
        service="formrules",
        environment=os.getenv("ENVIRONMENT", "development"),
    )


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
) -> None:
    """
    Configure structured logging for formrules.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Whether to output JSON formatted logs
    """
    processors = [
        merge_contextvars,
        TimeStamper(fmt="ISO", utc=True),
        add_log_level,
        add_logger_name,
        # Mask sensitive data
        SensitiveDataProcessor(),
    ]

    if json_logs:
        processors.append(JSONRenderer(sort_keys=True))
    else:
        processors.append(KeyValueRenderer(key_order=["timestamp", "level", "event", "logger"]))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level_int(log_level)),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(ProcessorFormatter(processors=processors))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(_get_log_level_int(log_level))


def _get_log_level_int(level: str) -> int:
    """Convert string log level to integer."""
    levels = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return levels.get(level.upper(), logging.INFO)
