"""Lookups into submitted input using dotted paths (``address.city``)."""

from typing import Any, Mapping

MISSING = object()


def get_path(data: Mapping[str, Any], key: str, default: Any = MISSING) -> Any:
    """Read ``key`` from nested input, returning ``default`` when absent.

    A literal key wins over a dotted path with the same spelling.
    """
    if isinstance(data, Mapping) and key in data:
        return data[key]

    current: Any = data
    for segment in key.split("."):
        if isinstance(current, Mapping) and segment in current:
            current = current[segment]
        elif isinstance(current, (list, tuple)) and segment.isdigit() and int(segment) < len(current):
            current = current[int(segment)]
        else:
            return default
    return current


def has_path(data: Mapping[str, Any], key: str) -> bool:
    return get_path(data, key) is not MISSING
