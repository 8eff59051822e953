"""FastAPI glue: request phase detection and validation error responses."""

from .fastapi_adapter import (
    FormValidationErrorModel,
    install_exception_handlers,
    phase_from_request,
    validate_submission,
    validation_failed_handler,
)

__all__ = [
    "FormValidationErrorModel",
    "install_exception_handlers",
    "phase_from_request",
    "validate_submission",
    "validation_failed_handler",
]
