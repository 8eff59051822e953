"""Form field carrying validation rules."""

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from formrules.application.ports import FormContext, ValidatorFactory
from formrules.domain.rules import RequestPhase, RuleSet, SlotName


class FormField:
    """
    A form field bound to one or more input columns.

    Rule configuration calls are chainable::

        FormField("email", "Email").rules("required|email").creation_rules("unique:users,email")
    """

    def __init__(
        self,
        column: Union[str, Sequence[str], Mapping[str, str]],
        label: Optional[str] = None,
        form: Optional[FormContext] = None,
        composite_key_separator: str = "",
    ) -> None:
        """
        Initialize field.

        Args:
            column: Input column, or several columns for a multi-column field
            label: Display label (defaults to the column name)
            form: Owning form
            composite_key_separator: Separator for multi-column keys
        """
        self.column = column
        self.label = label if label is not None else self._default_label(column)
        self.form = form
        self.rule_set = RuleSet(composite_key_separator=composite_key_separator)

    @staticmethod
    def _default_label(column: Any) -> str:
        if isinstance(column, str):
            return column.replace("_", " ").capitalize()
        return ""

    def set_form(self, form: Optional[FormContext]) -> "FormField":
        self.form = form
        return self

    def rules(self, rules: Any = None, messages: Optional[Dict[str, str]] = None) -> "FormField":
        self.rule_set.rules(rules, messages)
        return self

    def creation_rules(self, rules: Any = None, messages: Optional[Dict[str, str]] = None) -> "FormField":
        self.rule_set.creation_rules(rules, messages)
        return self

    def update_rules(self, rules: Any = None, messages: Optional[Dict[str, str]] = None) -> "FormField":
        self.rule_set.update_rules(rules, messages)
        return self

    def set_validation_messages(self, slot: Union[SlotName, str], messages: Dict[str, str]) -> "FormField":
        self.rule_set.set_messages(SlotName(slot), messages)
        return self

    def remove_rule(self, name: str) -> "FormField":
        self.rule_set.remove_rule(name)
        return self

    def has_rule(self, name: str) -> bool:
        return self.rule_set.has_rule(name)

    def validator(self, validator: Callable[[Mapping], Any]) -> "FormField":
        self.rule_set.validator(validator)
        return self

    def get_rules(self, phase: RequestPhase) -> List[Any]:
        return self.rule_set.resolve(phase, self, self.form)

    def get_validation_messages(self, phase: RequestPhase) -> Dict[str, str]:
        return self.rule_set.messages_for(phase)

    def sanitize_input(self, data: Mapping[str, Any], column: str) -> Dict[str, Any]:
        """Prepare input before validation; subclasses may normalize values."""
        return dict(data)

    def get_validator(
        self,
        data: Mapping[str, Any],
        phase: RequestPhase,
        factory: Optional[ValidatorFactory] = None,
    ) -> Any:
        """Validator for this field, or None when the field is skipped."""
        return self.rule_set.build_validation(data, self, phase, form=self.form, factory=factory)

    def __repr__(self) -> str:
        return f"FormField(column={self.column!r}, label={self.label!r})"
