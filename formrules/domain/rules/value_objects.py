"""Value objects for the rules bounded context.

Rule slots are immutable: every mutation on a ``RuleSet`` swaps the slot for a
new value object.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

DELIMITER = "|"
ID_PLACEHOLDER = "{{id}}"


class RequestPhase(Enum):
    """Phase of the request lifecycle a validation pass runs in."""

    CREATE = "create"
    UPDATE = "update"
    OTHER = "other"

    @classmethod
    def from_method(cls, method: Optional[str]) -> "RequestPhase":
        """Map an HTTP method to a request phase."""
        normalized = (method or "").strip().upper()
        if normalized == "POST":
            return cls.CREATE
        if normalized in ("PUT", "PATCH"):
            return cls.UPDATE
        return cls.OTHER


class SlotName(Enum):
    """Named rule slots carried by every field."""

    CREATION = "creation"
    UPDATE = "update"
    DEFAULT = "default"

    @classmethod
    def for_phase(cls, phase: RequestPhase) -> "SlotName":
        """Slot consulted first for the given phase."""
        if phase is RequestPhase.CREATE:
            return cls.CREATION
        if phase is RequestPhase.UPDATE:
            return cls.UPDATE
        return cls.DEFAULT


@dataclass(frozen=True)
class StaticRules:
    """Rules known at configuration time.

    ``delimited`` is True when the slot was configured from pipe-delimited
    text; only such slots support ``remove_rule``/``has_rule``.
    """

    tokens: Tuple[Any, ...] = ()
    delimited: bool = False

    def __bool__(self) -> bool:
        return bool(self.tokens)

    def as_text(self) -> str:
        return join_rules(self.tokens)


@dataclass(frozen=True)
class DeferredRules:
    """Rules computed at validation time from the field and its form."""

    compute: Callable[[Any, Any], Union[str, Iterable[Any], None]]

    def __bool__(self) -> bool:
        return True

    def evaluate(self, field: Any, form: Any) -> List[Any]:
        return format_rules(self.compute(field, form))


RuleSlot = Union[StaticRules, DeferredRules]

EMPTY_SLOT = StaticRules()


def split_rules(text: str) -> List[str]:
    """Split pipe-delimited rule text, dropping empty segments."""
    return [token for token in text.split(DELIMITER) if token]


def format_rules(value: Any) -> List[Any]:
    """Normalize a rule definition to an ordered list of non-empty tokens.

    Strings are split on the delimiter. Iterables are flattened one level so
    a list may itself hold delimited strings. Non-string tokens (rule
    callables) pass through untouched.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return split_rules(value)
    if isinstance(value, StaticRules):
        return list(value.tokens)
    if callable(value):
        return [value]

    tokens: List[Any] = []
    for item in value:
        if isinstance(item, str):
            tokens.extend(split_rules(item))
        elif item:
            tokens.append(item)
    return tokens


def join_rules(tokens: Iterable[Any]) -> str:
    """Join string tokens back into delimited text."""
    return DELIMITER.join(token for token in tokens if isinstance(token, str) and token)


def rule_name(token: str) -> str:
    """Rule name of a token (``max:10`` -> ``max``)."""
    return token.split(":", 1)[0]


def substitute_identity(tokens: Iterable[Any], identity: Any) -> List[Any]:
    """Replace the identity placeholder in every string token."""
    replacement = str(identity)
    return [
        token.replace(ID_PLACEHOLDER, replacement) if isinstance(token, str) else token
        for token in tokens
    ]
