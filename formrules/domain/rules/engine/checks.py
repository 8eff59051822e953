"""Rule checks.

Each check receives the validator, the attribute key, the value and the
rule parameters, and returns True when the value passes. Implicit rules run
even when the attribute is missing or blank.
"""

import re
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Set
from urllib.parse import urlparse

from ...errors import PresenceVerifierMissingError
from ..input_data import MISSING, get_path

Check = Callable[[Any, str, Any, List[str]], bool]

RULES: Dict[str, Check] = {}
IMPLICIT_RULES: Set[str] = set()

# Rules that only steer evaluation and never fail on their own
MODIFIER_RULES = frozenset({"bail", "nullable", "sometimes"})

# Rules whose single parameter is kept whole (patterns may contain commas)
UNSPLIT_PARAMETER_RULES = frozenset({"regex"})

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
REGEX_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL, "x": re.VERBOSE, "u": 0}


def rule(name: str, implicit: bool = False) -> Callable[[Check], Check]:
    """Register a check under a rule name."""
    def decorator(func: Check) -> Check:
        RULES[name] = func
        if implicit:
            IMPLICIT_RULES.add(name)
        return func
    return decorator


def is_empty(value: Any) -> bool:
    if value is None or value is MISSING:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        try:
            float(value)
        except ValueError:
            return False
        return value.strip().lower() not in ("nan", "inf", "-inf", "infinity", "-infinity")
    return False


def _require_parameters(name: str, parameters: List[str], count: int) -> None:
    if len(parameters) < count:
        raise ValueError(f"Validation rule {name} requires at least {count} parameters.")


@rule("required", implicit=True)
def check_required(validator, key, value, parameters) -> bool:
    return not is_empty(value)


@rule("filled", implicit=True)
def check_filled(validator, key, value, parameters) -> bool:
    if value is MISSING:
        return True
    return not is_empty(value)


@rule("string")
def check_string(validator, key, value, parameters) -> bool:
    return isinstance(value, str)


@rule("integer")
def check_integer(validator, key, value, parameters) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and re.fullmatch(r"[+-]?\d+", value.strip()) is not None


@rule("numeric")
def check_numeric(validator, key, value, parameters) -> bool:
    return is_number(value)


@rule("boolean")
def check_boolean(validator, key, value, parameters) -> bool:
    return value in (True, False, 0, 1, "0", "1")


@rule("array")
def check_array(validator, key, value, parameters) -> bool:
    return isinstance(value, (list, tuple, dict))


@rule("email")
def check_email(validator, key, value, parameters) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None


@rule("url")
def check_url(validator, key, value, parameters) -> bool:
    if not isinstance(value, str):
        return False
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https", "ftp") and bool(parsed.netloc)


@rule("alpha")
def check_alpha(validator, key, value, parameters) -> bool:
    return isinstance(value, str) and re.fullmatch(r"[^\W\d_]+", value) is not None


@rule("alpha_num")
def check_alpha_num(validator, key, value, parameters) -> bool:
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    return isinstance(value, str) and re.fullmatch(r"[^\W_]+", value) is not None


@rule("alpha_dash")
def check_alpha_dash(validator, key, value, parameters) -> bool:
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    return isinstance(value, str) and re.fullmatch(r"[\w-]+", value) is not None


@rule("min")
def check_min(validator, key, value, parameters) -> bool:
    _require_parameters("min", parameters, 1)
    size = validator.size_of(key, value)
    return size is not None and size >= float(parameters[0])


@rule("max")
def check_max(validator, key, value, parameters) -> bool:
    _require_parameters("max", parameters, 1)
    size = validator.size_of(key, value)
    return size is not None and size <= float(parameters[0])


@rule("between")
def check_between(validator, key, value, parameters) -> bool:
    _require_parameters("between", parameters, 2)
    size = validator.size_of(key, value)
    return size is not None and float(parameters[0]) <= size <= float(parameters[1])


@rule("size")
def check_size(validator, key, value, parameters) -> bool:
    _require_parameters("size", parameters, 1)
    size = validator.size_of(key, value)
    return size is not None and size == float(parameters[0])


@rule("digits")
def check_digits(validator, key, value, parameters) -> bool:
    _require_parameters("digits", parameters, 1)
    if isinstance(value, bool):
        return False
    text = str(value)
    return text.isdigit() and len(text) == int(parameters[0])


@rule("in")
def check_in(validator, key, value, parameters) -> bool:
    if isinstance(value, (list, tuple)):
        return all(str(item) in parameters for item in value)
    return not isinstance(value, dict) and str(value) in parameters


@rule("not_in")
def check_not_in(validator, key, value, parameters) -> bool:
    if isinstance(value, (list, tuple)):
        return not any(str(item) in parameters for item in value)
    return str(value) not in parameters


@rule("regex")
def check_regex(validator, key, value, parameters) -> bool:
    _require_parameters("regex", parameters, 1)
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        return False
    return compile_pattern(parameters[0]).search(str(value)) is not None


@rule("confirmed")
def check_confirmed(validator, key, value, parameters) -> bool:
    return get_path(validator.data, f"{key}_confirmation") == value


@rule("same")
def check_same(validator, key, value, parameters) -> bool:
    _require_parameters("same", parameters, 1)
    return get_path(validator.data, parameters[0], None) == value


@rule("different")
def check_different(validator, key, value, parameters) -> bool:
    _require_parameters("different", parameters, 1)
    other = get_path(validator.data, parameters[0])
    return other is MISSING or other != value


@rule("date")
def check_date(validator, key, value, parameters) -> bool:
    if isinstance(value, (date, datetime)):
        return True
    if not isinstance(value, str):
        return False
    try:
        datetime.fromisoformat(value.strip())
    except ValueError:
        return False
    return True


@rule("unique")
def check_unique(validator, key, value, parameters) -> bool:
    """unique:table[,column[,except_id[,id_column]]]"""
    _require_parameters("unique", parameters, 1)
    verifier = validator.presence_verifier
    if verifier is None:
        raise PresenceVerifierMissingError("unique")

    table = parameters[0]
    column = _column_parameter(parameters, key)
    excluded_id = parameters[2] if len(parameters) > 2 else None
    if excluded_id in ("", "NULL", "null"):
        excluded_id = None
    id_column = parameters[3] if len(parameters) > 3 and parameters[3] else "id"

    return verifier.count(table, column, value, excluded_id=excluded_id, id_column=id_column) == 0


@rule("exists")
def check_exists(validator, key, value, parameters) -> bool:
    """exists:table[,column]"""
    _require_parameters("exists", parameters, 1)
    verifier = validator.presence_verifier
    if verifier is None:
        raise PresenceVerifierMissingError("exists")

    table = parameters[0]
    column = _column_parameter(parameters, key)
    if isinstance(value, (list, tuple)):
        return all(verifier.count(table, column, item) > 0 for item in value)
    return verifier.count(table, column, value) > 0


def _column_parameter(parameters: List[str], key: str) -> str:
    if len(parameters) > 1 and parameters[1] and parameters[1] != "NULL":
        return parameters[1]
    return key.rsplit(".", 1)[-1]


def compile_pattern(pattern: str) -> "re.Pattern[str]":
    """Compile ``/body/flags`` patterns; bare patterns compile as-is."""
    if len(pattern) >= 2 and pattern[0] == "/":
        end = pattern.rfind("/")
        if end > 0:
            flags = 0
            for flag in pattern[end + 1:]:
                flags |= REGEX_FLAGS.get(flag, 0)
            return re.compile(pattern[1:end], flags)
    return re.compile(pattern)
