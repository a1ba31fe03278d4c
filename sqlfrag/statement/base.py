"""Statement base class and clause rendering shared by all SQL verbs.

Statements are immutable: every fluent method returns a new statement built
with :func:`dataclasses.replace`, so a partially-built statement can be
reused as a template without copies leaking changes into each other::

    base = select("id", "name").from_("users")
    active = base.where("active = ?", True)
    admins = base.where({"role": "admin"})

A statement is itself a :class:`~sqlfrag.fragment.base.Fragment`.  Its
``to_sql`` keeps generic ``?`` marks so it can be nested as a sub-query;
:meth:`Statement.build` is the terminal call that applies the placeholder
format once, over the whole text.
"""
from __future__ import annotations

import dataclasses
import logging
from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar

from sqlfrag.errors import StatementError
from sqlfrag.fragment.base import CompiledSQL, Fragment, render_all
from sqlfrag.fragment.expr import Expr
from sqlfrag.fragment.parts import where_part
from sqlfrag.format.placeholders import QUESTION, PlaceholderFormat

logger = logging.getLogger(__name__)

_S = TypeVar("_S", bound="Statement")
_F = TypeVar("_F", bound="FilterMixin")


class SqlWriter:
    """Accumulates statement text and arguments clause by clause."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self.args: list[Any] = []

    def write(self, text: str) -> None:
        self._parts.append(text)

    def clause(self, keyword: str, fragments: tuple[Fragment, ...], sep: str) -> None:
        """Write ``<keyword> <rendered fragments>``; nothing if they render empty."""
        if not fragments:
            return
        sql, args = render_all(fragments, sep)
        if not sql:
            return
        self._parts.append(f"{keyword} {sql}" if keyword else sql)
        self.args.extend(args)

    def names(self, keyword: str, names: tuple[str, ...], sep: str = ", ") -> None:
        if names:
            self._parts.append(f"{keyword} {sep.join(names)}")

    def number(self, keyword: str, value: int | None) -> None:
        if value is not None:
            self._parts.append(f"{keyword} {value}")

    def getvalue(self) -> str:
        return " ".join(self._parts)


def _check_count(clause: str, value: int | None) -> int | None:
    if value is not None and value < 0:
        raise StatementError(f"{clause} must not be negative, got {value}.", clause=clause)
    return value


@dataclass(frozen=True)
class Statement(Fragment):
    """Base for the four statement builders.

    Attributes:
        placeholder: Format applied by :meth:`build`.
        prefixes: Raw SQL rendered before the statement (e.g. ``WITH ...``).
        suffixes: Raw SQL rendered after the statement (e.g. ``RETURNING``).
    """

    placeholder: PlaceholderFormat = QUESTION
    prefixes: tuple[Fragment, ...] = ()
    suffixes: tuple[Fragment, ...] = ()

    verb = "STATEMENT"
    subquery: ClassVar[bool] = True

    def _replace(self: _S, **changes: Any) -> _S:
        return dataclasses.replace(self, **changes)

    def placeholder_format(self: _S, fmt: PlaceholderFormat) -> _S:
        """Return a copy that renders with ``fmt``."""
        return self._replace(placeholder=fmt)

    def prefix(self: _S, sql: str, *args: Any) -> _S:
        """Add raw SQL before the statement; multiple prefixes join with a space."""
        return self._replace(prefixes=self.prefixes + (Expr(sql, *args),))

    def suffix(self: _S, sql: str, *args: Any) -> _S:
        """Add raw SQL after the statement; multiple suffixes join with a space."""
        return self._replace(suffixes=self.suffixes + (Expr(sql, *args),))

    def to_sql(self) -> tuple[str, list[Any]]:
        """Render with generic ``?`` marks (for nesting inside other fragments)."""
        writer = SqlWriter()
        writer.clause("", self.prefixes, " ")
        self._write_body(writer)
        writer.clause("", self.suffixes, " ")
        return writer.getvalue(), writer.args

    def build(self) -> CompiledSQL:
        """Render the statement and apply the placeholder format.

        Returns:
            :class:`~sqlfrag.fragment.base.CompiledSQL` ready for a driver.

        Raises:
            SqlFragError: (or subclass) if any clause fails to render.
        """
        sql, args = self.to_sql()
        sql = self.placeholder.replace_placeholders(sql)
        logger.debug("Rendered %s statement with %d args: %s", self.verb, len(args), sql)
        return CompiledSQL(sql=sql, args=args, placeholder=self.placeholder.name)

    @abstractmethod
    def _write_body(self, writer: SqlWriter) -> None:
        """Write everything between the prefixes and the suffixes."""


class FilterMixin:
    """``WHERE`` / ``ORDER BY`` / ``LIMIT`` / ``OFFSET`` for statements that have them.

    Concrete statements declare the ``where_parts``, ``order_bys``, ``limit``
    and ``offset`` fields.
    """

    where_parts: tuple[Fragment, ...]
    order_bys: tuple[str, ...]
    limit_value: int | None
    offset_value: int | None

    def where(self: _F, pred: Any, *args: Any) -> _F:
        """Add a WHERE expression; multiple calls are ANDed together.

        ``pred`` may be:

        * ``None`` or ``""`` – ignored;
        * a string – raw SQL with one argument per ``?``;
        * a mapping – rendered as :class:`~sqlfrag.fragment.predicates.Eq`;
        * any :class:`~sqlfrag.fragment.base.Fragment`.
        """
        return self._replace(where_parts=self.where_parts + (where_part(pred, *args),))  # type: ignore[attr-defined]

    def order_by(self: _F, *order_bys: str) -> _F:
        return self._replace(order_bys=self.order_bys + order_bys)  # type: ignore[attr-defined]

    def limit(self: _F, limit: int) -> _F:
        """Set LIMIT; ``0`` is rendered, only ``None`` omits the clause."""
        return self._replace(limit_value=_check_count("LIMIT", limit))  # type: ignore[attr-defined]

    def offset(self: _F, offset: int) -> _F:
        return self._replace(offset_value=_check_count("OFFSET", offset))  # type: ignore[attr-defined]

    def _write_filters(self, writer: SqlWriter) -> None:
        writer.clause("WHERE", self.where_parts, " AND ")
        writer.names("ORDER BY", self.order_bys)
        writer.number("LIMIT", self.limit_value)
        writer.number("OFFSET", self.offset_value)
