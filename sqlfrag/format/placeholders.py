"""Placeholder formats: the final rewrite pass over a rendered statement.

Every fragment renders the generic mark ``?`` for each bound argument.
Once a whole statement is assembled, its text goes through exactly one
:class:`PlaceholderFormat`:

``Sequential``
    Leaves ``?`` untouched (``sqlite3``, ``mysqlclient`` in qmark mode ...).
``PositionalNumbered``
    Replaces the k-th mark, counted left to right from 1, with
    ``prefix + str(k)`` – ``$1`` for asyncpg / Postgres, ``:1`` for Oracle,
    ``@p1`` for SQL Server.

The scan is purely textual.  A ``?`` inside a quoted SQL literal or a
comment is rewritten like any other mark; callers that embed raw SQL with
literal question marks must bind them as arguments instead.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

#: The generic placeholder mark rendered by every fragment.
PLACEHOLDER = "?"


def placeholders(count: int) -> str:
    """Return ``count`` placeholder marks separated by commas (``?,?,?``)."""
    if count < 1:
        return ""
    return ",".join([PLACEHOLDER] * count)


def replace_placeholders(sql: str, replace: Callable[[int], str]) -> str:
    """Substitute every ``?`` in ``sql`` with ``replace(i)``.

    Args:
        sql: Text containing generic placeholder marks.
        replace: Called with the 1-based position of each mark, in order.

    Returns:
        The rewritten text.
    """
    chunks = sql.split(PLACEHOLDER)
    out = [chunks[0]]
    for position, chunk in enumerate(chunks[1:], start=1):
        out.append(replace(position))
        out.append(chunk)
    return "".join(out)


class PlaceholderFormat(ABC):
    """Abstract base for placeholder rewrite policies."""

    @abstractmethod
    def replace_placeholders(self, sql: str) -> str:
        """Rewrite every generic mark in ``sql`` into this format's syntax."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a short human-readable name for this format."""


class Sequential(PlaceholderFormat):
    """Keeps ``?`` marks as they are."""

    @property
    def name(self) -> str:
        return "question"

    def replace_placeholders(self, sql: str) -> str:
        return sql

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Sequential)

    def __hash__(self) -> int:
        return hash(Sequential)

    def __repr__(self) -> str:
        return "Sequential()"


class PositionalNumbered(PlaceholderFormat):
    """Numbers marks left to right behind a fixed prefix.

    Args:
        prefix: Text written immediately before each 1-based index
            (e.g. ``"$"`` gives ``$1, $2, ...``).
    """

    def __init__(self, prefix: str) -> None:
        if not prefix:
            raise ValueError("PositionalNumbered requires a non-empty prefix.")
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def name(self) -> str:
        return f"numbered({self._prefix})"

    def replace_placeholders(self, sql: str) -> str:
        return replace_placeholders(sql, lambda i: f"{self._prefix}{i}")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PositionalNumbered) and other.prefix == self._prefix

    def __hash__(self) -> int:
        return hash((PositionalNumbered, self._prefix))

    def __repr__(self) -> str:
        return f"PositionalNumbered({self._prefix!r})"


QUESTION = Sequential()
DOLLAR = PositionalNumbered("$")
COLON = PositionalNumbered(":")
AT_P = PositionalNumbered("@p")
