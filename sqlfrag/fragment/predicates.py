"""Mapping-keyed predicate fragments: ``Eq``, ``NotEq``, ``Lt`` and friends.

Each predicate takes a mapping of column reference → value and renders one
clause per entry, joined with ``AND``::

    Eq({"id": [1, 2, 3], "deleted_at": None}).to_sql()
    # ('id IN (?,?,?) AND deleted_at IS NULL', [1, 2, 3])

Values are classified once, when the predicate is built, into a
:class:`PredicateValue` (NULL, LIST, SCALAR, or DEFERRED for a
:class:`~sqlfrag.fragment.base.Valuer` that resolves at render time).  The
mapping order is snapshotted at the same moment, so repeated renders always
emit the clauses in the same order.
"""
from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping, Set
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from sqlfrag.errors import UnrenderableValueError, UnsupportedOperandError
from sqlfrag.fragment.base import Fragment, Valuer, render_value
from sqlfrag.fragment.literals import is_array_like
from sqlfrag.format.placeholders import PLACEHOLDER, placeholders


class ValueKind(str, Enum):
    NULL = "null"
    LIST = "list"
    SCALAR = "scalar"
    DEFERRED = "deferred"


@dataclass(frozen=True)
class PredicateValue:
    """A predicate operand tagged with its shape.

    Attributes:
        kind: How the value renders.
        value: ``None`` for NULL, a tuple for LIST, the raw value otherwise.
    """

    kind: ValueKind
    value: Any = None

    @classmethod
    def of(cls, value: Any) -> PredicateValue:
        """Classify ``value``; sets are frozen into a tuple in iteration order."""
        if isinstance(value, PredicateValue):
            return value
        if value is None:
            return cls(ValueKind.NULL)
        if isinstance(value, Valuer) and not isinstance(value, Fragment):
            return cls(ValueKind.DEFERRED, value)
        if is_array_like(value) or isinstance(value, Set):
            return cls(ValueKind.LIST, tuple(value))
        return cls(ValueKind.SCALAR, value)

    @classmethod
    def null(cls) -> PredicateValue:
        return cls(ValueKind.NULL)

    @classmethod
    def sequence(cls, values: Any) -> PredicateValue:
        return cls(ValueKind.LIST, tuple(values))

    @classmethod
    def scalar(cls, value: Any) -> PredicateValue:
        return cls(ValueKind.SCALAR, value)

    def resolve(self, key: str) -> PredicateValue:
        """Unwrap a DEFERRED value; other kinds are returned unchanged."""
        if self.kind is not ValueKind.DEFERRED:
            return self
        resolved = PredicateValue.of(self.value.sql_value())
        if resolved.kind is ValueKind.DEFERRED:
            raise UnrenderableValueError(
                f"Value for column '{key}' resolved to another Valuer "
                f"({type(resolved.value).__name__}).",
                key=key,
                value=resolved.value,
            )
        return resolved


def _snapshot(
    mapping: Mapping[str, Any] | None, kwargs: dict[str, Any]
) -> tuple[tuple[str, PredicateValue], ...]:
    items = dict(mapping or {})
    items.update(kwargs)
    return tuple((key, PredicateValue.of(value)) for key, value in items.items())


def _scalar_clause(key: str, op: str, value: Any, args: list[Any]) -> str:
    return f"{key} {op} {render_value(value, args)}"


class _MapPredicate(Fragment):
    """Shared storage and rendering loop for mapping-keyed predicates."""

    def __init__(self, mapping: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        self._entries = _snapshot(mapping, kwargs)

    @property
    def entries(self) -> tuple[tuple[str, PredicateValue], ...]:
        return self._entries

    def to_sql(self) -> tuple[str, list[Any]]:
        args: list[Any] = []
        clauses = [
            self._clause(key, value.resolve(key), args) for key, value in self._entries
        ]
        return " AND ".join(clauses), args

    @abstractmethod
    def _clause(self, key: str, value: PredicateValue, args: list[Any]) -> str:
        """Render one entry, appending its arguments to ``args``."""

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v.value!r}" for k, v in self._entries)
        return f"{type(self).__name__}({{{body}}})"


class Eq(_MapPredicate):
    """Equality: ``=``, ``IN``, ``IS NULL`` depending on each value's shape.

    An empty list renders the portable FALSE ``(1=0)``.
    """

    negated: ClassVar[bool] = False

    def _clause(self, key: str, value: PredicateValue, args: list[Any]) -> str:
        if value.kind is ValueKind.NULL:
            return f"{key} IS NOT NULL" if self.negated else f"{key} IS NULL"
        if value.kind is ValueKind.LIST:
            items = value.value
            if not items:
                return "(1=1)" if self.negated else "(1=0)"
            args.extend(items)
            op = "NOT IN" if self.negated else "IN"
            return f"{key} {op} ({placeholders(len(items))})"
        return _scalar_clause(key, "<>" if self.negated else "=", value.value, args)


class NotEq(Eq):
    """Inequality: ``<>``, ``NOT IN``, ``IS NOT NULL``.

    An empty list renders the portable TRUE ``(1=1)``.
    """

    negated: ClassVar[bool] = True


class Lt(_MapPredicate):
    """``<key> < ?`` for every entry; NULL and lists are rejected."""

    operator: ClassVar[str] = "<"

    def _clause(self, key: str, value: PredicateValue, args: list[Any]) -> str:
        if value.kind is not ValueKind.SCALAR:
            raise UnsupportedOperandError(key, value.value, self.operator)
        return _scalar_clause(key, self.operator, value.value, args)


class LtOrEq(Lt):
    """``<key> <= ?``"""

    operator: ClassVar[str] = "<="


class Gt(Lt):
    """``<key> > ?``"""

    operator: ClassVar[str] = ">"


class GtOrEq(Lt):
    """``<key> >= ?``"""

    operator: ClassVar[str] = ">="


class Between(Fragment):
    """``<field> BETWEEN ? AND ?``"""

    def __init__(self, field: str, left: Any, right: Any) -> None:
        self._field = field
        self._left = left
        self._right = right

    def to_sql(self) -> tuple[str, list[Any]]:
        sql = f"{self._field} BETWEEN {PLACEHOLDER} AND {PLACEHOLDER}"
        return sql, [self._left, self._right]

    def __repr__(self) -> str:
        return f"Between({self._field!r}, {self._left!r}, {self._right!r})"
