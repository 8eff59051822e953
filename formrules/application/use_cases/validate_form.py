"""Validate form use case for formrules."""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from formrules.application.form_field import FormField
from formrules.application.ports import ValidatorFactory, ValidatorLike
from formrules.domain.errors import ValidationFailedError
from formrules.domain.rules import RequestPhase
from formrules.shared.logging import get_logger
from formrules.shared.logging.context import get_correlation_id


@dataclass(frozen=True)
class ValidateFormRequest:
    """Request DTO for form validation."""
    data: Mapping[str, Any]
    method: str = "POST"


@dataclass(frozen=True)
class ValidateFormResponse:
    """Response DTO for form validation."""
    passed: bool
    errors: Dict[str, List[str]] = field(default_factory=dict)
    validated_fields: int = 0
    skipped_fields: int = 0

    def raise_for_errors(self) -> None:
        """
        Raises:
            ValidationFailedError: If any field failed
        """
        if not self.passed:
            raise ValidationFailedError(self.errors)


class ValidateFormUseCase:
    """Use case validating every field of a form for one request."""

    def __init__(
        self,
        fields: Sequence[FormField],
        factory: Optional[ValidatorFactory] = None,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            fields: Fields of the submitted form
            factory: Validator factory; the built-in engine when omitted
        """
        self._fields = list(fields)
        self._factory = factory
        self._logger = get_logger("application.validate_form")

    def execute(self, request: ValidateFormRequest) -> ValidateFormResponse:
        """
        Execute form validation.

        Args:
            request: Submitted data and HTTP method

        Returns:
            Merged result of every field's validation
        """
        start_time = time.time()
        correlation_id = get_correlation_id()
        phase = RequestPhase.from_method(request.method)

        self._logger.info(
            "form_validation_started",
            phase=phase.value,
            fields=len(self._fields),
            input_keys=len(request.data),
            correlation_id=correlation_id,
        )

        errors: Dict[str, List[str]] = {}
        validated = skipped = 0

        for form_field in self._fields:
            result = form_field.get_validator(request.data, phase, factory=self._factory)

            if result is None:
                skipped += 1
                self._logger.debug(
                    "field_validation_skipped",
                    column=str(form_field.column),
                    phase=phase.value,
                    correlation_id=correlation_id,
                )
                continue

            validated += 1
            for key, messages in self._field_errors(result).items():
                errors.setdefault(key, []).extend(messages)

        duration_ms = (time.time() - start_time) * 1000
        self._logger.info(
            "form_validation_completed",
            phase=phase.value,
            passed=not errors,
            failed_keys=sorted(errors),
            validated_fields=validated,
            skipped_fields=skipped,
            duration_ms=duration_ms,
            correlation_id=correlation_id,
        )

        return ValidateFormResponse(
            passed=not errors,
            errors=errors,
            validated_fields=validated,
            skipped_fields=skipped,
        )

    @staticmethod
    def _field_errors(result: Any) -> Dict[str, List[str]]:
        """Error bag of a validator object or a custom validator's return value."""
        if isinstance(result, ValidatorLike):
            return {} if result.passes() else result.errors()
        if isinstance(result, Mapping):
            return {key: list(value) if isinstance(value, (list, tuple)) else [str(value)]
                    for key, value in result.items()}
        return {}
