"""
Default validator engine.

Evaluates rule tokens (``required``, ``max:10``, ``unique:users,email``...)
against submitted input and produces per-key error messages.
"""

from .validator import Validator, make_validator, validator_factory
from .checks import RULES, IMPLICIT_RULES, rule

__all__ = [
    "IMPLICIT_RULES",
    "RULES",
    "Validator",
    "make_validator",
    "rule",
    "validator_factory",
]
