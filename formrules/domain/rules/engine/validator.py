"""Validator evaluating rule tokens against submitted input."""

import logging
from functools import partial
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from opentelemetry import trace

from ...errors import UnknownRuleError, ValidationFailedError
from ..input_data import MISSING, get_path
from ..value_objects import format_rules, rule_name
from .checks import (
    IMPLICIT_RULES,
    MODIFIER_RULES,
    RULES,
    UNSPLIT_PARAMETER_RULES,
    is_empty,
    is_number,
)
from .messages import DEFAULT_MESSAGES, FALLBACK_MESSAGE

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

# Rules whose message depends on the kind of value being measured
SIZE_RULES = frozenset({"min", "max", "between", "size"})
NUMERIC_RULES = frozenset({"numeric", "integer"})


def parse_rule(token: str) -> Tuple[str, List[str]]:
    """Split ``name:p1,p2`` into the rule name and its parameters."""
    name = rule_name(token)
    if ":" not in token:
        return name, []
    raw = token.split(":", 1)[1]
    if name in UNSPLIT_PARAMETER_RULES:
        return name, [raw]
    return name, raw.split(",")


class Validator:
    """
    Validates input against a mapping of key -> rule tokens.

    Messages are taken from ``messages`` first (``"key.rule"`` then
    ``"rule"``), then from the built-in templates. ``attributes`` maps keys
    to the display names substituted for ``:attribute``.
    """

    def __init__(
        self,
        data: Mapping[str, Any],
        rules: Mapping[str, Any],
        messages: Optional[Mapping[str, str]] = None,
        attributes: Optional[Mapping[str, str]] = None,
        presence_verifier: Any = None,
        stop_on_first_failure: bool = False,
    ) -> None:
        """
        Initialize validator.

        Args:
            data: Submitted input
            rules: Key -> delimited rule text or list of tokens
            messages: Custom message overrides
            attributes: Key -> display name
            presence_verifier: Backend for ``unique``/``exists`` rules
            stop_on_first_failure: Stop after the first key that fails
        """
        self.data = data
        self.rules: Dict[str, List[Any]] = {key: format_rules(value) for key, value in rules.items()}
        self.custom_messages = dict(messages or {})
        self.custom_attributes = dict(attributes or {})
        self.presence_verifier = presence_verifier
        self.stop_on_first_failure = stop_on_first_failure
        self._errors: Optional[Dict[str, List[str]]] = None

    def passes(self) -> bool:
        """Run every rule and report whether the input is valid."""
        errors: Dict[str, List[str]] = {}

        with tracer.start_as_current_span(
            "formrules.validate",
            attributes={"formrules.keys": len(self.rules)},
        ) as span:
            for key, tokens in self.rules.items():
                self._validate_attribute(key, tokens, errors)
                if errors and self.stop_on_first_failure:
                    break
            span.set_attribute("formrules.failed_keys", len(errors))

        self._errors = errors
        logger.debug("validation_completed keys=%d failed=%d", len(self.rules), len(errors))
        return not errors

    def fails(self) -> bool:
        return not self.passes()

    def errors(self) -> Dict[str, List[str]]:
        """Key -> messages of the last run (runs validation if needed)."""
        if self._errors is None:
            self.passes()
        return {key: list(messages) for key, messages in self._errors.items()}

    def validated(self) -> Dict[str, Any]:
        """
        Input restricted to the validated keys.

        Raises:
            ValidationFailedError: If the input does not pass
        """
        if not self.passes():
            raise ValidationFailedError(self.errors())

        result: Dict[str, Any] = {}
        for key in self.rules:
            value = get_path(self.data, key)
            if value is not MISSING:
                result[key] = value
        return result

    def validate(self) -> Dict[str, Any]:
        return self.validated()

    def size_of(self, key: str, value: Any) -> Optional[float]:
        """Numeric size used by min/max/between/size."""
        if self._has_numeric_rule(key) and is_number(value):
            return float(value)
        if isinstance(value, (str, list, tuple, dict, set)):
            return float(len(value))
        if is_number(value):
            return float(value)
        return None

    def _has_numeric_rule(self, key: str) -> bool:
        return any(
            isinstance(token, str) and rule_name(token) in NUMERIC_RULES
            for token in self.rules.get(key, [])
        )

    def _validate_attribute(self, key: str, tokens: List[Any], errors: Dict[str, List[str]]) -> None:
        value = get_path(self.data, key)
        names = {rule_name(token) for token in tokens if isinstance(token, str)}

        if "sometimes" in names and value is MISSING:
            return
        nulled = "nullable" in names and value is None

        bail = "bail" in names
        for token in tokens:
            if callable(token):
                if nulled:
                    continue
                failures: List[str] = []
                token(key, None if value is MISSING else value, failures.append)
                if failures:
                    errors.setdefault(key, []).extend(
                        self._replace_placeholders(message, key, "", []) for message in failures
                    )
                    if bail:
                        return
                continue

            if not isinstance(token, str):
                raise UnknownRuleError(repr(token))

            name, parameters = parse_rule(token)
            if name in MODIFIER_RULES:
                continue

            check = RULES.get(name)
            if check is None:
                raise UnknownRuleError(name)

            if name not in IMPLICIT_RULES and (
                nulled or value is MISSING or (isinstance(value, str) and is_empty(value))
            ):
                continue

            if not check(self, key, value, parameters):
                errors.setdefault(key, []).append(self._message(key, name, value, parameters))
                if bail:
                    return

    def _message(self, key: str, name: str, value: Any, parameters: List[str]) -> str:
        template = self.custom_messages.get(f"{key}.{name}") or self.custom_messages.get(name)
        if template is None:
            template = DEFAULT_MESSAGES.get(name, FALLBACK_MESSAGE)
            if isinstance(template, dict):
                template = template[self._value_kind(key, value)]
        return self._replace_placeholders(template, key, name, parameters)

    def _value_kind(self, key: str, value: Any) -> str:
        if self._has_numeric_rule(key) and is_number(value):
            return "numeric"
        if isinstance(value, (list, tuple, dict, set)):
            return "array"
        if isinstance(value, str):
            return "string"
        return "numeric" if is_number(value) else "string"

    def _display_name(self, key: str) -> str:
        if key in self.custom_attributes:
            return self.custom_attributes[key]
        return key.rsplit(".", 1)[-1].replace("_", " ")

    def _replace_placeholders(self, message: str, key: str, name: str, parameters: List[str]) -> str:
        message = message.replace(":attribute", self._display_name(key))

        if name in ("min", "max", "size", "digits") and parameters:
            message = message.replace(f":{name}", parameters[0])
        elif name == "between" and len(parameters) >= 2:
            message = message.replace(":min", parameters[0]).replace(":max", parameters[1])
        elif name in ("in", "not_in"):
            message = message.replace(":values", ", ".join(parameters))
        elif name in ("same", "different") and parameters:
            message = message.replace(":other", self._display_name(parameters[0]))
        return message


def make_validator(
    data: Mapping[str, Any],
    rules: Mapping[str, Any],
    messages: Optional[Mapping[str, str]] = None,
    attributes: Optional[Mapping[str, str]] = None,
    presence_verifier: Any = None,
    stop_on_first_failure: bool = False,
) -> Validator:
    """Default validator factory."""
    return Validator(
        data,
        rules,
        messages,
        attributes,
        presence_verifier=presence_verifier,
        stop_on_first_failure=stop_on_first_failure,
    )


def validator_factory(
    presence_verifier: Any = None,
    stop_on_first_failure: bool = False,
) -> Callable[..., Validator]:
    """Factory with a presence verifier and failure policy bound in."""
    return partial(
        make_validator,
        presence_verifier=presence_verifier,
        stop_on_first_failure=stop_on_first_failure,
    )
