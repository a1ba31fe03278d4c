"""Adapters that turn clause-slot inputs into fragments.

Statement builders accept loosely-typed inputs (``where("a = ?", 1)``,
``where({"a": 1})``, ``where(some_fragment)``).  These helpers normalise
those inputs into a :class:`Fragment` once, when the clause is added.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlfrag.errors import CompositionError
from sqlfrag.fragment.base import Fragment
from sqlfrag.fragment.expr import Expr
from sqlfrag.fragment.predicates import Eq


def _reject_args(kind: str, args: tuple[Any, ...]) -> None:
    if args:
        raise CompositionError(
            f"Arguments are only accepted together with a string, not a {kind}."
        )


def part(pred: str | Fragment, *args: Any) -> Fragment:
    """Column, FROM and JOIN entries: raw SQL with args, or a fragment."""
    if isinstance(pred, Fragment):
        _reject_args("Fragment", args)
        return pred
    if isinstance(pred, str):
        return Expr(pred, *args)
    raise CompositionError(f"Expected a string or Fragment, not {type(pred).__name__}.")


def where_part(pred: Any, *args: Any) -> Fragment:
    """WHERE / HAVING entries.

    ``None`` and ``""`` produce an empty fragment, which clause rendering
    skips.  A string is a raw SQL template; a mapping becomes :class:`Eq`.
    """
    if pred is None or pred == "":
        return Expr("")
    if isinstance(pred, Fragment):
        _reject_args("Fragment", args)
        return pred
    if isinstance(pred, str):
        return Expr(pred, *args)
    if isinstance(pred, Mapping):
        _reject_args("mapping", args)
        return Eq(pred)
    raise CompositionError(
        f"Expected a string, mapping or Fragment predicate, not {type(pred).__name__}."
    )


def union_part(query: str | Fragment, *args: Any) -> Fragment:
    """Right-hand side of ``UNION`` / ``UNION ALL``: a statement or raw SQL."""
    if isinstance(query, (str, Fragment)):
        return part(query, *args)
    raise CompositionError(
        f"Expected a string or select statement, not {type(query).__name__}."
    )
