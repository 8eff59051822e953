"""SQLAlchemy implementation of the PresenceVerifier port."""

import time
from typing import Any, Optional

from sqlalchemy import column as sa_column, func, select, table as sa_table
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from formrules.application.ports import PresenceVerifier
from formrules.shared.logging import get_logger
from formrules.shared.logging.context import get_correlation_id


class SqlAlchemyPresenceVerifier(PresenceVerifier):
    """
    Presence checks executed as ``SELECT count(*)`` queries.

    Table and column names come from rule definitions written by developers,
    never from submitted input.
    """

    def __init__(self, session: Session):
        """
        Initialize verifier with a database session.

        Args:
            session: SQLAlchemy session
        """
        self.session = session
        self.logger = get_logger("infrastructure.presence.sqlalchemy")

    def count(
        self,
        table: str,
        column: str,
        value: Any,
        excluded_id: Optional[Any] = None,
        id_column: str = "id",
    ) -> int:
        start_time = time.time()
        names = [column] if column == id_column else [column, id_column]
        target = sa_table(table, *(sa_column(name) for name in names))

        query = select(func.count()).select_from(target).where(target.c[column] == value)
        if excluded_id is not None:
            query = query.where(target.c[id_column] != excluded_id)

        try:
            result = self.session.execute(query).scalar_one()
        except SQLAlchemyError as e:
            self.logger.error(
                "presence_count_failed",
                table=table,
                column=column,
                error=str(e),
                correlation_id=get_correlation_id(),
            )
            raise

        self.logger.debug(
            "presence_count_completed",
            table=table,
            column=column,
            has_exclusion=excluded_id is not None,
            matches=result,
            duration_ms=(time.time() - start_time) * 1000,
            correlation_id=get_correlation_id(),
        )
        return int(result)
