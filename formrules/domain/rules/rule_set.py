"""Per-field rule set.

A ``RuleSet`` carries three rule slots (creation, update, default), the
message overrides for each slot and an optional custom validator. It is
mutated while a form is being configured and read once per validation pass.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional

from .contracts import FieldContext, FormContext, ValidatorFactory
from .input_data import get_path, has_path
from .value_objects import (
    EMPTY_SLOT,
    DeferredRules,
    RequestPhase,
    RuleSlot,
    SlotName,
    StaticRules,
    format_rules,
    join_rules,
    rule_name,
    substitute_identity,
)

logger = logging.getLogger(__name__)


class RuleSet:
    """Validation rules of a single form field."""

    def __init__(self, composite_key_separator: str = "") -> None:
        """
        Initialize an empty rule set.

        Args:
            composite_key_separator: Text placed between a sub-column name and
                its position when building keys for multi-column fields
        """
        self.composite_key_separator = composite_key_separator
        self._slots: Dict[SlotName, RuleSlot] = {slot: EMPTY_SLOT for slot in SlotName}
        self._messages: Dict[SlotName, Dict[str, str]] = {}
        self._validator: Optional[Callable[[Mapping], Any]] = None

    def slot(self, slot: SlotName) -> RuleSlot:
        return self._slots[slot]

    def merge_into(self, slot: SlotName, rules: Any) -> "RuleSet":
        """
        Merge rules into a slot.

        A callable replaces the slot with a deferred computation. Anything
        else is normalized to tokens and appended after the tokens already in
        the slot, keeping order and duplicates.

        Args:
            slot: Target slot
            rules: Delimited text, list of tokens, callable or None

        Returns:
            self, for chaining
        """
        if callable(rules) and not isinstance(rules, str):
            self._slots[slot] = DeferredRules(rules)
            return self

        current = self._slots[slot]
        existing: List[Any] = list(current.tokens) if isinstance(current, StaticRules) else []
        delimited = (rules is None or isinstance(rules, str)) and (
            not existing or (isinstance(current, StaticRules) and current.delimited)
        )

        self._slots[slot] = StaticRules(
            tokens=tuple(existing + format_rules(rules)),
            delimited=delimited,
        )
        return self

    def creation_rules(self, rules: Any = None, messages: Optional[Dict[str, str]] = None) -> "RuleSet":
        """Merge rules applied when a record is created."""
        self.merge_into(SlotName.CREATION, rules)
        if messages is not None:
            self.set_messages(SlotName.CREATION, messages)
        return self

    def update_rules(self, rules: Any = None, messages: Optional[Dict[str, str]] = None) -> "RuleSet":
        """Merge rules applied when a record is updated."""
        self.merge_into(SlotName.UPDATE, rules)
        if messages is not None:
            self.set_messages(SlotName.UPDATE, messages)
        return self

    def rules(self, rules: Any = None, messages: Optional[Dict[str, str]] = None) -> "RuleSet":
        """Merge default rules, used when no phase-specific slot applies."""
        self.merge_into(SlotName.DEFAULT, rules)
        if messages is not None:
            self.set_messages(SlotName.DEFAULT, messages)
        return self

    def set_messages(self, slot: SlotName, messages: Dict[str, str]) -> "RuleSet":
        """Replace the message overrides stored for a slot."""
        self._messages[slot] = dict(messages)
        return self

    def messages_for(self, phase: RequestPhase) -> Dict[str, str]:
        """
        Message overrides for a phase.

        Creation or update messages replace the default mapping wholesale
        when they are set and non-empty.
        """
        messages = self._messages.get(SlotName.DEFAULT, {})
        if phase is not RequestPhase.OTHER:
            messages = self._messages.get(SlotName.for_phase(phase)) or messages
        return dict(messages)

    def remove_rule(self, name: str) -> "RuleSet":
        """Drop every token named ``name`` from delimited default rules."""
        current = self._slots[SlotName.DEFAULT]
        if not isinstance(current, StaticRules) or not current.delimited or not current:
            return self

        remaining = tuple(
            token for token in current.tokens
            if not (isinstance(token, str) and rule_name(token) == name)
        )
        self._slots[SlotName.DEFAULT] = StaticRules(tokens=remaining, delimited=True)
        return self

    def has_rule(self, name: str) -> bool:
        """Whether delimited default rules contain a token named ``name``."""
        current = self._slots[SlotName.DEFAULT]
        if not isinstance(current, StaticRules) or not current.delimited:
            return False
        return any(isinstance(token, str) and rule_name(token) == name for token in current.tokens)

    def validator(self, validator: Callable[[Mapping], Any]) -> "RuleSet":
        """Register a custom validator that replaces rule-based validation."""
        self._validator = validator
        return self

    @property
    def has_custom_validator(self) -> bool:
        return self._validator is not None

    def resolve(
        self,
        phase: RequestPhase,
        field: Optional[FieldContext] = None,
        form: Optional[FormContext] = None,
    ) -> List[Any]:
        """
        Effective rule tokens for one validation pass.

        Args:
            phase: Current request phase
            field: Field passed to deferred computations
            form: Owning form; its persisted key replaces ``{{id}}``

        Returns:
            Ordered tokens, empty when the field has no rules
        """
        selected = self._slots[SlotName.for_phase(phase)]
        if not selected:
            selected = self._slots[SlotName.DEFAULT]

        if isinstance(selected, DeferredRules):
            tokens = selected.evaluate(field, form)
        else:
            tokens = list(selected.tokens)

        identity = form.get_key() if form is not None else None
        if identity:
            tokens = substitute_identity(tokens, identity)

        logger.debug(
            "rule_set_resolved phase=%s tokens=%d deferred=%s",
            phase.value, len(tokens), isinstance(selected, DeferredRules),
        )
        return tokens

    def build_validation(
        self,
        data: Mapping,
        field: FieldContext,
        phase: RequestPhase,
        form: Optional[FormContext] = None,
        factory: Optional[ValidatorFactory] = None,
    ) -> Any:
        """
        Build the validator for one field against submitted input.

        Args:
            data: Submitted input
            field: Field exposing ``column``, ``label`` and ``sanitize_input``
            phase: Current request phase
            form: Owning form, if bound
            factory: Validator factory taking (data, rules, messages, attributes)

        Returns:
            The custom validator's result when one is registered, otherwise a
            validator object, or None when the field is not validated
        """
        if self._validator is not None:
            return self._validator(data)

        field_rules = self.resolve(phase, field, form)
        if not field_rules:
            return None

        rules: Dict[str, List[Any]] = {}
        attributes: Dict[str, str] = {}
        column = field.column
        label = field.label

        if isinstance(column, str):
            if not has_path(data, column):
                return None

            data = field.sanitize_input(data, column)
            rules[column] = field_rules
            attributes[column] = label
        else:
            data = dict(data)
            positions = column.items() if isinstance(column, Mapping) else enumerate(column)
            for position, sub_column in positions:
                if sub_column not in data:
                    continue
                key = f"{sub_column}{self.composite_key_separator}{position}"
                data[key] = get_path(data, sub_column)
                rules[key] = field_rules
                attributes[key] = f"{label}[{sub_column}]"

        if factory is None:
            from .engine import make_validator
            factory = make_validator

        return factory(data, rules, self.messages_for(phase), attributes)

    def __repr__(self) -> str:
        parts = []
        for slot, value in self._slots.items():
            shown = "<deferred>" if isinstance(value, DeferredRules) else join_rules(value.tokens)
            parts.append(f"{slot.value}={shown!r}")
        return f"RuleSet({', '.join(parts)})"
