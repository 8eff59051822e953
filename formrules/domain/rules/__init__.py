"""Rules bounded context: rule slots, rule sets and the validator engine."""

from .value_objects import (
    DELIMITER,
    ID_PLACEHOLDER,
    DeferredRules,
    RequestPhase,
    SlotName,
    StaticRules,
    format_rules,
    join_rules,
    rule_name,
    split_rules,
    substitute_identity,
)
from .rule_set import RuleSet

__all__ = [
    "DELIMITER",
    "ID_PLACEHOLDER",
    "DeferredRules",
    "RequestPhase",
    "RuleSet",
    "SlotName",
    "StaticRules",
    "format_rules",
    "join_rules",
    "rule_name",
    "split_rules",
    "substitute_identity",
]
