"""Fragments that glue other fragments together.

``And`` / ``Or``: ``(a AND b)`` / ``(a OR b)``; empty children are dropped.
``ConcatExpr``: raw text and fragments concatenated verbatim.
``Fn``: ``name(arg1, arg2, ...)`` over fragment arguments.
``Any``: ``column = ANY(?)`` bound to an array literal.
"""
from __future__ import annotations

from typing import Any as AnyType

from sqlfrag.errors import CompositionError, InvalidSegmentError
from sqlfrag.fragment.base import Fragment, render_all
from sqlfrag.fragment.literals import Array


def _require_fragments(owner: str, items: tuple[AnyType, ...]) -> tuple[Fragment, ...]:
    for item in items:
        if not isinstance(item, Fragment):
            raise CompositionError(
                f"{owner} expects Fragment arguments, got {type(item).__name__}."
            )
    return items


class _Conjunction(Fragment):
    """Joins child fragments with an operator inside one pair of parentheses."""

    separator = " AND "

    def __init__(self, *children: Fragment) -> None:
        self._children = _require_fragments(type(self).__name__, children)

    @property
    def children(self) -> tuple[Fragment, ...]:
        return self._children

    def to_sql(self) -> tuple[str, list[AnyType]]:
        sql, args = render_all(self._children, self.separator)
        if not sql:
            return "", []
        return f"({sql})", args

    def __repr__(self) -> str:
        inner = ", ".join(repr(c) for c in self._children)
        return f"{type(self).__name__}({inner})"


class And(_Conjunction):
    """``(a AND b AND ...)``"""

    separator = " AND "


class Or(_Conjunction):
    """``(a OR b OR ...)``"""

    separator = " OR "


class ConcatExpr(Fragment):
    """Concatenates strings and fragments in order.

    Example::

        name = Expr("CONCAT(?, ' ', ?)", first, last)
        ConcatExpr("COALESCE(full_name,", name, ")")
    """

    def __init__(self, *segments: str | Fragment) -> None:
        self._segments = segments

    def to_sql(self) -> tuple[str, list[AnyType]]:
        parts: list[str] = []
        args: list[AnyType] = []
        for segment in self._segments:
            if isinstance(segment, str):
                parts.append(segment)
            elif isinstance(segment, Fragment):
                seg_sql, seg_args = segment.to_sql()
                parts.append(seg_sql)
                args.extend(seg_args)
            else:
                raise InvalidSegmentError(segment)
        return "".join(parts), args

    def __repr__(self) -> str:
        inner = ", ".join(repr(s) for s in self._segments)
        return f"ConcatExpr({inner})"


class Fn(Fragment):
    """A SQL function call over fragment arguments.

    Example::

        Fn("COALESCE", Expr("nickname"), Expr("?", "anonymous"))
        # ('COALESCE(nickname, ?)', ['anonymous'])
    """

    def __init__(self, name: str, *args: Fragment) -> None:
        self._name = name
        self._args = _require_fragments(f"Fn({name!r})", args)

    def to_sql(self) -> tuple[str, list[AnyType]]:
        parts: list[str] = []
        args: list[AnyType] = []
        for arg in self._args:
            arg_sql, arg_args = arg.to_sql()
            parts.append(arg_sql)
            args.extend(arg_args)
        return f"{self._name}({', '.join(parts)})", args

    def __repr__(self) -> str:
        inner = ", ".join(repr(a) for a in self._args)
        return f"Fn({self._name!r}, {inner})" if inner else f"Fn({self._name!r})"


class Any(Fragment):
    """``column = ANY(?)`` with ``values`` bound as one array literal."""

    def __init__(self, column: str, values: AnyType) -> None:
        self._column = column
        self._array = Array(values)

    def to_sql(self) -> tuple[str, list[AnyType]]:
        array_sql, array_args = self._array.to_sql()
        return f"{self._column} = ANY({array_sql})", array_args

    def __repr__(self) -> str:
        return f"Any({self._column!r}, {self._array!r})"
