"""FastAPI adapter for form validation.

Maps the HTTP method of the incoming request to a request phase, runs the
fields of a form against the submitted body and renders failures as HTTP 422
responses.
"""

from typing import Any, Dict, List, Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from formrules.application.form_field import FormField
from formrules.application.ports import ValidatorFactory
from formrules.application.use_cases.validate_form import (
    ValidateFormRequest,
    ValidateFormUseCase,
)
from formrules.domain.errors import ValidationFailedError
from formrules.domain.rules import RequestPhase
from formrules.shared.logging import get_logger
from formrules.shared.logging.context import get_correlation_id

logger = get_logger("infrastructure.http")


class FormValidationErrorModel(BaseModel):
    """Body of a 422 response for a form that failed validation."""
    message: str = Field(..., description="Summary of the failure")
    errors: Dict[str, List[str]] = Field(..., description="Input key -> validation messages")
    correlation_id: Optional[str] = Field(None, description="Correlation ID for tracing")


def phase_from_request(request: Request) -> RequestPhase:
    """Request phase of an incoming request (POST creates, PUT/PATCH update)."""
    return RequestPhase.from_method(request.method)


def form_to_dict(form: Any) -> Dict[str, Any]:
    """Form data as a dict; keys sent more than once become lists."""
    data: Dict[str, Any] = {}
    for key in form.keys():
        values = form.getlist(key)
        data[key] = values if len(values) > 1 else values[0]
    return data


async def validate_submission(
    request: Request,
    fields: Sequence[FormField],
    factory: Optional[ValidatorFactory] = None,
) -> Dict[str, Any]:
    """
    Validate the submitted body of a request against form fields.

    JSON bodies are read as JSON, anything else as form data.

    Args:
        request: Incoming request
        fields: Fields of the form
        factory: Validator factory

    Returns:
        The submitted data

    Raises:
        ValidationFailedError: If any field fails
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            raise ValidationFailedError({"_body": ["The submitted body must be valid JSON."]})
    else:
        data = form_to_dict(await request.form())

    if not isinstance(data, dict):
        raise ValidationFailedError({"_body": ["The submitted body must be an object."]})

    use_case = ValidateFormUseCase(fields, factory=factory)
    response = use_case.execute(ValidateFormRequest(data=data, method=request.method))
    response.raise_for_errors()
    return data


async def validation_failed_handler(request: Request, exc: ValidationFailedError) -> JSONResponse:
    """Render a validation failure as HTTP 422."""
    correlation_id = get_correlation_id()
    logger.info(
        "form_validation_rejected",
        method=request.method,
        path=request.url.path,
        failed_keys=sorted(exc.errors),
        correlation_id=correlation_id,
    )

    body = FormValidationErrorModel(
        message=exc.message,
        errors=exc.errors,
        correlation_id=correlation_id,
    )
    return JSONResponse(
        status_code=422,
        content=body.model_dump(),
    )


def install_exception_handlers(app: FastAPI) -> None:
    """Register the validation failure handler on an application."""
    app.add_exception_handler(ValidationFailedError, validation_failed_handler)
