"""Structural contracts between a rule set and the form layer around it."""

from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Union, runtime_checkable


@runtime_checkable
class FormContext(Protocol):
    """Form a field is bound to."""

    def get_key(self) -> Any:
        """Persisted identity of the record being edited, or None for new records."""
        ...


@runtime_checkable
class FieldContext(Protocol):
    """Field whose rules are being validated."""

    column: Union[str, Sequence[str], Mapping[str, str]]
    label: str
    form: Optional[FormContext]

    def sanitize_input(self, data: Mapping[str, Any], column: str) -> Dict[str, Any]:
        ...


@runtime_checkable
class ValidatorLike(Protocol):
    """Validator object returned by a validator factory."""

    def passes(self) -> bool:
        ...

    def errors(self) -> Dict[str, List[str]]:
        ...


class ValidatorFactory(Protocol):
    """Builds a validator from input, rules, messages and attribute labels."""

    def __call__(
        self,
        data: Mapping[str, Any],
        rules: Mapping[str, Any],
        messages: Mapping[str, str],
        attributes: Mapping[str, str],
    ) -> ValidatorLike:
        ...
