"""Settings sources backed by the process environment or a plain mapping."""

import os
from typing import Mapping, Optional

from formrules.application.ports import SettingsSource


class EnvironmentSettings(SettingsSource):
    """Settings read from environment variables, optionally prefixed."""

    def __init__(self, prefix: str = "FORMRULES_", environ: Optional[Mapping[str, str]] = None):
        self.prefix = prefix
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._environ.get(f"{self.prefix}{key}", default)


class DictSettings(SettingsSource):
    """Settings from an in-memory mapping (tests, embedded use)."""

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values = dict(values or {})

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(key, default)
