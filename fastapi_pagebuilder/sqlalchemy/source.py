"""SQLAlchemy query source for query-backed pagination."""

from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session


class SQLAlchemyQuerySource:
    """Bridge a SQLAlchemy ``Select`` statement with the pagination builder.

    ``slice`` rebinds :attr:`statement`; execute it afterwards with
    :meth:`scalars` or :meth:`all` to fetch the current page.
    """

    def __init__(self, session: Session, statement: Select) -> None:
        """Store the session and the unpaginated statement."""
        self.session = session
        self.statement = statement

    def count_statement(self) -> Select:
        """Return ``SELECT count(*)`` over the statement without ordering."""
        subquery = self.statement.order_by(None).subquery()
        return select(func.count()).select_from(subquery)

    def count(self) -> int:
        """Return the number of rows matched by the statement."""
        return int(self.session.execute(self.count_statement()).scalar_one())

    def slice(self, offset: int, limit: int) -> "SQLAlchemyQuerySource":
        """Restrict the statement to ``limit`` rows starting at ``offset``."""
        self.statement = self.statement.offset(offset).limit(limit)
        return self

    def scalars(self) -> Sequence[Any]:
        """Execute the statement and return the first column of each row."""
        return self.session.execute(self.statement).scalars().all()

    def all(self) -> Sequence[Any]:
        """Execute the statement and return full rows."""
        return self.session.execute(self.statement).all()
