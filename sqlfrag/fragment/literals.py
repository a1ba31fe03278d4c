"""Literal encoders: structured arrays and JSON values bound as one argument.

Both encoders render a single ``?`` mark and bind the encoded text, so
drivers receive a plain string and the server does the parsing::

    Array(["foo", "bar"]).to_sql()   # ('?', ['{"foo","bar"}'])
    Array([[1, 2], [3, 4]]).to_sql() # ('?', ['{{1,2},{3,4}}'])
    JSONB({"a": 1}).to_sql()         # ('?::jsonb', ['{"a":1}'])
"""
from __future__ import annotations

import json
import math
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from sqlfrag.errors import EncodingError, TypeMismatchError
from sqlfrag.fragment.base import Fragment
from sqlfrag.format.placeholders import PLACEHOLDER

_TEXT_TYPES = (str, bytes, bytearray, memoryview)

# Leaf kinds tracked while walking an array.
_STRING = "string"
_NUMBER = "number"
_SEQUENCE = "sequence"


def is_array_like(value: Any) -> bool:
    """Return ``True`` for ordered, non-text sequences (list, tuple, range ...)."""
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def _freeze(value: Any) -> Any:
    if is_array_like(value):
        return tuple(_freeze(v) for v in value)
    return value


def _kind(value: Any) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return _STRING
    if isinstance(value, (int, float, Decimal)):
        return _NUMBER
    if is_array_like(value):
        return _SEQUENCE
    return None


def _format_number(value: int | float | Decimal) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def _dump_model(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class _ArrayEncoder:
    """Walks a nested sequence, checking homogeneity level by level.

    Every level must hold elements of one kind, and every leaf in the whole
    tree must share the same kind and sit at the same depth.
    """

    def __init__(self, element: type | None) -> None:
        self._element = element
        self._leaf_kind: str | None = None
        self._leaf_depth: int | None = None

    def encode(self, values: Sequence[Any], depth: int = 1) -> str:
        kinds = {_kind(v) for v in values}
        if None in kinds:
            bad = next(v for v in values if _kind(v) is None)
            raise TypeMismatchError(
                f"Unsupported array element type: {type(bad).__name__}.", value=bad
            )
        if len(kinds) > 1:
            raise TypeMismatchError(
                f"Array level {depth} mixes element kinds: {sorted(kinds)}.",
                value=values,
            )
        if not values:
            return "{}"

        kind = kinds.pop()
        if kind == _SEQUENCE:
            items = [self.encode(v, depth + 1) for v in values]
        else:
            self._check_leaf(kind, depth, values)
            if kind == _STRING:
                items = [_quote(v) for v in values]
            else:
                items = [_format_number(v) for v in values]
        return "{" + ",".join(items) + "}"

    def _check_leaf(self, kind: str, depth: int, values: Sequence[Any]) -> None:
        if self._leaf_kind is None:
            self._leaf_kind, self._leaf_depth = kind, depth
        elif (kind, depth) != (self._leaf_kind, self._leaf_depth):
            raise TypeMismatchError(
                "Nested arrays must have the same element kind and depth "
                f"(expected {self._leaf_kind} at depth {self._leaf_depth}, "
                f"got {kind} at depth {depth}).",
                value=values,
            )
        if self._element is None:
            return
        for v in values:
            if not self._accepts(v):
                raise TypeMismatchError(
                    f"Expected {self._element.__name__} elements, "
                    f"got {type(v).__name__}.",
                    value=v,
                )

    def _accepts(self, value: Any) -> bool:
        if self._element is float:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        return isinstance(value, self._element) and not isinstance(value, bool)


class Array(Fragment):
    """Encodes a (possibly nested) sequence as a Postgres array literal.

    Args:
        value: A list, tuple or other non-text sequence of strings, numbers
            or further sequences.
        element: Optionally restrict leaves to ``str``, ``int`` or ``float``.
    """

    def __init__(self, value: Any, element: type | None = None) -> None:
        if element not in (None, str, int, float):
            raise ValueError(f"Unsupported array element type: {element!r}.")
        try:
            self._value = _freeze(value)
        except RecursionError:
            # Too deep to snapshot; rejected when rendered.
            self._value = value
        self._element = element

    @classmethod
    def of_strings(cls, values: Sequence[Any]) -> Array:
        return cls(values, element=str)

    @classmethod
    def of_ints(cls, values: Sequence[Any]) -> Array:
        return cls(values, element=int)

    @classmethod
    def of_floats(cls, values: Sequence[Any]) -> Array:
        return cls(values, element=float)

    def to_sql(self) -> tuple[str, list[Any]]:
        if not is_array_like(self._value):
            raise TypeMismatchError(
                f"Array expects a sequence, got {type(self._value).__name__}.",
                value=self._value,
            )
        try:
            literal = _ArrayEncoder(self._element).encode(self._value)
        except RecursionError as exc:
            raise TypeMismatchError(
                "Array is nested too deeply to encode.", value=self._value
            ) from exc
        return PLACEHOLDER, [literal]

    def __repr__(self) -> str:
        return f"Array({self._value!r})"


class _JSONValue(Fragment):
    """Serializes a value to JSON text bound with a ``::<type>`` cast."""

    type_name = "json"

    def __init__(self, value: Any) -> None:
        self._value = value

    def to_sql(self) -> tuple[str, list[Any]]:
        try:
            text = json.dumps(
                self._value,
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
                default=_dump_model,
            )
        except (TypeError, ValueError, RecursionError) as exc:
            raise EncodingError(
                f"Failed to serialize {self.type_name} value: {exc}",
                type_name=self.type_name,
            ) from exc
        return f"{PLACEHOLDER}::{self.type_name}", [text]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class JSON(_JSONValue):
    """Binds ``value`` as Postgres ``json``."""

    type_name = "json"


class JSONB(_JSONValue):
    """Binds ``value`` as Postgres ``jsonb``."""

    type_name = "jsonb"
