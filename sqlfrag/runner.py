"""Execution helpers for SQLAlchemy connections.

These helpers render a statement (or any fragment) and hand the text and
positional arguments to :meth:`sqlalchemy.engine.Connection.exec_driver_sql`.
They never open, pool or close connections; the caller owns the connection
and its transaction.

Install the optional dependency before using this module::

    pip install "sqlfrag[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from sqlfrag import select
    from sqlfrag.runner import query

    engine = create_engine("sqlite://")
    with engine.connect() as conn:
        rows = query(conn, select("id").from_("users").where({"active": 1})).all()

The placeholder format of the statement must match the driver's DB-API
``paramstyle``: ``question`` for ``sqlite3``, ``dollar`` for drivers that
take ``$1`` (e.g. through ``asyncpg``'s adapted dialect).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlfrag.fragment.base import CompiledSQL, Fragment
from sqlfrag.format.placeholders import QUESTION, PlaceholderFormat
from sqlfrag.statement.base import Statement

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, CursorResult, Row

logger = logging.getLogger(__name__)


def compile_fragment(
    fragment: Fragment, placeholder: PlaceholderFormat | None = None
) -> CompiledSQL:
    """Render ``fragment`` for execution.

    Statements are built with their own placeholder format unless
    ``placeholder`` overrides it; other fragments default to ``?``.
    """
    if isinstance(fragment, Statement):
        if placeholder is not None:
            fragment = fragment.placeholder_format(placeholder)
        return fragment.build()
    fmt = placeholder or QUESTION
    sql, args = fragment.to_sql()
    return CompiledSQL(sql=fmt.replace_placeholders(sql), args=args, placeholder=fmt.name)


def execute(
    connection: Connection,
    fragment: Fragment,
    placeholder: PlaceholderFormat | None = None,
) -> CursorResult[Any]:
    """Render ``fragment`` and execute it on ``connection``.

    Returns:
        The driver-level result from ``exec_driver_sql``.
    """
    compiled = compile_fragment(fragment, placeholder)
    logger.debug("Executing %s with %d args", compiled.sql, len(compiled.args))
    return connection.exec_driver_sql(compiled.sql, tuple(compiled.args))


def query(
    connection: Connection,
    fragment: Fragment,
    placeholder: PlaceholderFormat | None = None,
) -> CursorResult[Any]:
    """Execute a row-returning statement; alias of :func:`execute` for readability."""
    return execute(connection, fragment, placeholder)


def query_row(
    connection: Connection,
    fragment: Fragment,
    placeholder: PlaceholderFormat | None = None,
) -> Row[Any] | None:
    """Execute ``fragment`` and return its first row, or ``None`` if there is none."""
    return execute(connection, fragment, placeholder).first()
