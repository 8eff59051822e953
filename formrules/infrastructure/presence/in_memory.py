"""In-memory presence verifier for tests and development."""

from typing import Any, Dict, List, Optional

from formrules.application.ports import PresenceVerifier
from formrules.shared.logging import get_logger


class InMemoryPresenceVerifier(PresenceVerifier):
    """Presence checks against tables held as lists of row dicts."""

    def __init__(self, tables: Optional[Dict[str, List[Dict[str, Any]]]] = None):
        self._tables: Dict[str, List[Dict[str, Any]]] = {
            name: list(rows) for name, rows in (tables or {}).items()
        }
        self._logger = get_logger("infrastructure.presence.in_memory")

    def add_row(self, table: str, row: Dict[str, Any]) -> None:
        self._tables.setdefault(table, []).append(dict(row))

    def count(
        self,
        table: str,
        column: str,
        value: Any,
        excluded_id: Optional[Any] = None,
        id_column: str = "id",
    ) -> int:
        rows = self._tables.get(table, [])
        matches = [
            row for row in rows
            if column in row and str(row[column]) == str(value)
            and (excluded_id is None or str(row.get(id_column)) != str(excluded_id))
        ]

        self._logger.debug(
            "presence_count",
            table=table,
            column=column,
            has_exclusion=excluded_id is not None,
            matches=len(matches),
        )
        return len(matches)
