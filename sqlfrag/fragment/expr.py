"""Raw SQL templates and aliasing wrappers.

``Expr`` is the workhorse fragment: a piece of raw SQL with ``?`` marks and
positional arguments.  When an argument is itself a :class:`Fragment`, its
rendered text replaces the corresponding mark and its own arguments take
that argument's place in the output list::

    sub = Expr("SELECT id FROM users WHERE org = ?", 7)
    Expr("user_id IN (?) AND active = ?", sub, True).to_sql()
    # ('user_id IN (SELECT id FROM users WHERE org = ?) AND active = ?', [7, True])
"""
from __future__ import annotations

import logging
from typing import Any

from sqlfrag.errors import CompositionError
from sqlfrag.fragment.base import Fragment
from sqlfrag.format.placeholders import PLACEHOLDER

logger = logging.getLogger(__name__)


class Expr(Fragment):
    """A raw SQL template with positional arguments.

    Marks beyond the number of supplied arguments are left in place as-is.
    This leniency is kept for compatibility with existing callers; such a
    template breaks the mark/argument parity of the statement it ends up in.
    """

    def __init__(self, sql: str, *args: Any) -> None:
        self._sql = sql
        self._args = args

    @property
    def sql(self) -> str:
        return self._sql

    @property
    def args(self) -> tuple[Any, ...]:
        return self._args

    def to_sql(self) -> tuple[str, list[Any]]:
        if not any(isinstance(arg, Fragment) for arg in self._args):
            return self._sql, list(self._args)
        return self._expand()

    def _expand(self) -> tuple[str, list[Any]]:
        chunks = self._sql.split(PLACEHOLDER)
        out = [chunks[0]]
        args: list[Any] = []
        for position, chunk in enumerate(chunks[1:], start=1):
            if position > len(self._args):
                logger.debug(
                    "Template mark %d has no argument (%d supplied); left unresolved: %r",
                    position,
                    len(self._args),
                    self._sql,
                )
                out.append(PLACEHOLDER)
            else:
                arg = self._args[position - 1]
                if isinstance(arg, Fragment):
                    sub_sql, sub_args = arg.to_sql()
                    out.append(sub_sql)
                    args.extend(sub_args)
                else:
                    out.append(PLACEHOLDER)
                    args.append(arg)
            out.append(chunk)
        return "".join(out), args

    def __repr__(self) -> str:
        if self._args:
            inner = ", ".join(repr(a) for a in self._args)
            return f"Expr({self._sql!r}, {inner})"
        return f"Expr({self._sql!r})"


class Alias(Fragment):
    """``(<fragment>) AS <alias>`` – for sub-selects and CASE expressions."""

    keyword = ""

    def __init__(self, fragment: Fragment, alias: str) -> None:
        if not isinstance(fragment, Fragment):
            raise CompositionError(
                f"{type(self).__name__} expects a Fragment, got {type(fragment).__name__}."
            )
        self._fragment = fragment
        self._alias = alias

    def to_sql(self) -> tuple[str, list[Any]]:
        sql, args = self._fragment.to_sql()
        return f"{self.keyword}({sql}) AS {self._alias}", args

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fragment!r}, {self._alias!r})"


class Lateral(Alias):
    """``LATERAL (<fragment>) AS <alias>`` for lateral joins."""

    keyword = "LATERAL "
