"""Application ports (interfaces) for formrules.

This module defines the contracts between the rule layer and the form
framework, the validator engine and external storage.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from formrules.domain.rules.contracts import (  # noqa: F401
    FieldContext,
    FormContext,
    ValidatorFactory,
    ValidatorLike,
)


class PresenceVerifier(ABC):
    """Port for database presence checks used by ``unique`` and ``exists``."""

    @abstractmethod
    def count(
        self,
        table: str,
        column: str,
        value: Any,
        excluded_id: Optional[Any] = None,
        id_column: str = "id",
    ) -> int:
        """
        Count rows where ``column`` equals ``value``.

        Args:
            table: Table name
            column: Column compared against the value
            value: Submitted value
            excluded_id: Identity of a row to ignore (the record being edited)
            id_column: Column holding the row identity

        Returns:
            Number of matching rows
        """
        pass


class SettingsSource(ABC):
    """Port for configuration values."""

    @abstractmethod
    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        pass
