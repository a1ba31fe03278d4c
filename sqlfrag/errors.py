"""Custom exception hierarchy for sqlfrag.

All public errors inherit from SqlFragError so callers can catch the base
class for any sqlfrag-specific failure.

Errors raised while rendering a nested fragment travel up through every
enclosing combinator, template and statement unchanged; nothing is wrapped,
so the exception a caller sees is the one raised at the root cause.
"""
from __future__ import annotations

from typing import Any


class SqlFragError(Exception):
    """Base exception for all sqlfrag errors."""


class UnrenderableValueError(SqlFragError):
    """Raised when a predicate builder receives a value it cannot render.

    Args:
        message: Human-readable description.
        key: The column reference the value was bound to, if any.
        value: The offending value.
    """

    def __init__(
        self,
        message: str,
        key: str | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.key = key
        self.value = value


class UnsupportedOperandError(UnrenderableValueError):
    """Raised when an ordering operator is used with NULL or a collection."""

    def __init__(self, key: str, value: Any, operator: str) -> None:
        kind = "null" if value is None else "array or sequence"
        super().__init__(
            f"Cannot use {kind} with the '{operator}' operator (column '{key}').",
            key=key,
            value=value,
        )
        self.operator = operator


class TypeMismatchError(SqlFragError):
    """Raised when a structured array literal cannot be encoded.

    Args:
        message: Human-readable description.
        value: The value (or nested element) that failed the check.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class EncodingError(SqlFragError):
    """Raised when a value cannot be serialized to JSON.

    Args:
        message: Human-readable description.
        type_name: The target SQL type (``'json'`` or ``'jsonb'``).
    """

    def __init__(self, message: str, type_name: str) -> None:
        super().__init__(message)
        self.type_name = type_name


class InvalidSegmentError(SqlFragError):
    """Raised when a concatenation receives something other than text or a fragment."""

    def __init__(self, segment: Any) -> None:
        super().__init__(f"{segment!r} is not a string or Fragment.")
        self.segment = segment


class CompositionError(SqlFragError):
    """Raised when a composite fragment is handed a piece it cannot compose.

    Examples are a function call whose argument is not a fragment, or a
    WHERE part that is neither text, a mapping nor a fragment.  Failures of
    child fragments are *not* wrapped in this class; they propagate as-is.
    """


class StatementError(SqlFragError):
    """Raised when a statement builder is missing a required clause.

    Args:
        message: Human-readable description.
        clause: The clause that is missing or malformed.
    """

    def __init__(self, message: str, clause: str | None = None) -> None:
        super().__init__(message)
        self.clause = clause


class FormatConfigError(SqlFragError):
    """Raised when a placeholder format cannot be resolved from configuration.

    Args:
        message: Human-readable description.
        registered: Names known to the format registry at the time of failure.
    """

    def __init__(self, message: str, registered: list[str] | None = None) -> None:
        super().__init__(message)
        self.registered = registered or []
