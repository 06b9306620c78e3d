"""Shared plumbing for PostgreSQL repositories."""

from typing import Any

import logfire
from sqlalchemy import Executable, Result
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.error import StoreFailureError


class PostgresRepository:
    """Base for repositories backed by an async SQLAlchemy session.

    Constraint violations (IntegrityError) propagate unchanged so domain
    services can classify them; every other database error is reported as
    StoreFailureError.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(
        self, stmt: Executable, operation: str, savepoint: bool = False
    ) -> Result[Any]:
        """Execute a statement, translating storage failures.

        Args:
            stmt: Statement to execute
            operation: Human-readable name used in error reports
            savepoint: Run inside a SAVEPOINT so a failure only rolls back
                this statement and leaves the request transaction usable

        Returns:
            Statement result

        Raises:
            IntegrityError: On constraint violations
            StoreFailureError: On any other database error
        """
        try:
            if savepoint:
                async with self.session.begin_nested():
                    return await self.session.execute(stmt)
            return await self.session.execute(stmt)
        except IntegrityError:
            raise
        except SQLAlchemyError as e:
            logfire.error(
                "Store failure",
                operation=operation,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise StoreFailureError(operation) from e
