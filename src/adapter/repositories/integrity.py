"""
Translation of SQLAlchemy integrity errors into repository errors.

The constraint that fired is resolved structurally: PostgreSQL drivers expose
the constraint name, SQLite reports the offending columns which are matched
against the table's declared unique constraints.
"""

from typing import Optional

from sqlalchemy import Table, UniqueConstraint
from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import PersistenceFailure, UniqueViolation

SQLITE_UNIQUE_PREFIX = "UNIQUE constraint failed:"


def _unique_constraints(table: Table) -> list[UniqueConstraint]:
    return [c for c in table.constraints if isinstance(c, UniqueConstraint)]


def _driver_constraint_name(orig: BaseException) -> Optional[str]:
    # psycopg exposes diag.constraint_name, asyncpg chains its own exception
    diag = getattr(orig, "diag", None)
    if diag is not None and getattr(diag, "constraint_name", None):
        return diag.constraint_name
    cause = getattr(orig, "__cause__", None)
    return getattr(cause, "constraint_name", None)


def resolve_unique_constraint(exc: IntegrityError, table: Table) -> Optional[str]:
    """Name of the unique constraint of table that rejected the write, if any"""
    constraints = _unique_constraints(table)

    name = _driver_constraint_name(exc.orig)
    if name is not None:
        return name if name in {c.name for c in constraints} else None

    message = str(exc.orig)
    if not message.startswith(SQLITE_UNIQUE_PREFIX):
        return None
    columns = {
        part.strip().split(".")[-1]
        for part in message[len(SQLITE_UNIQUE_PREFIX):].split(",")
    }
    for constraint in constraints:
        if {column.name for column in constraint.columns} == columns:
            return constraint.name
    return None


async def flush_checked(session: AsyncSession, table: Table) -> None:
    """Flush pending writes, raising UniqueViolation or PersistenceFailure"""
    try:
        await session.flush()
    except IntegrityError as exc:
        constraint = resolve_unique_constraint(exc, table)
        if constraint is not None:
            raise UniqueViolation(constraint) from exc
        raise PersistenceFailure(str(exc.orig)) from exc
