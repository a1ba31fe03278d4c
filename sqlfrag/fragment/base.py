"""Fragment abstractions: the Fragment ABC, CompiledSQL and the Valuer protocol.

Every composable piece of SQL implements :class:`Fragment`.  Rendering a
fragment returns its text, containing one generic ``?`` mark per bound
argument, together with the arguments in mark order.  Composite fragments
render their children and splice the results, so the text/argument parity
holds at every level of the tree.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, ClassVar, Protocol, runtime_checkable

from sqlfrag.format.placeholders import PLACEHOLDER


class Fragment(ABC):
    """Abstract base for everything that renders to SQL plus bound arguments.

    Implementations are immutable once constructed: ``to_sql`` must be a
    pure function of the constructor inputs, so a fragment can be rendered
    any number of times, from any thread, with identical results.
    """

    #: Set by statements, which need parentheses when used as a value.
    subquery: ClassVar[bool] = False

    @abstractmethod
    def to_sql(self) -> tuple[str, list[Any]]:
        """Render this fragment.

        Returns:
            ``(sql, args)`` where ``sql`` contains exactly ``len(args)``
            unresolved ``?`` marks.

        Raises:
            SqlFragError: (or subclass) if the fragment's inputs cannot be
                rendered.  No partial output is produced.
        """


@runtime_checkable
class Valuer(Protocol):
    """A value that knows how to resolve itself to a driver primitive.

    Predicate builders call :meth:`sql_value` before deciding between the
    NULL, list and scalar forms.  Exceptions raised here propagate to the
    caller of ``to_sql`` unchanged.
    """

    def sql_value(self) -> Any: ...


@dataclass
class CompiledSQL:
    """The output of rendering a whole statement.

    Attributes:
        sql: The statement text, already rewritten into the target
            placeholder format.
        args: Positional arguments in placeholder order.
        placeholder: Name of the placeholder format that was applied.
    """

    sql: str
    args: list[Any] = field(default_factory=list)
    placeholder: str = "question"

    def as_tuple(self) -> tuple[str, tuple[Any, ...]]:
        """Return ``(sql, args)`` in the shape DB-API ``execute`` expects."""
        return self.sql, tuple(self.args)


def render_all(fragments: Iterable[Fragment], sep: str) -> tuple[str, list[Any]]:
    """Render ``fragments`` in order, joining non-empty texts with ``sep``.

    Fragments that render to an empty string are skipped entirely and
    contribute neither a separator nor arguments.

    Args:
        fragments: Fragments to render.
        sep: Separator placed between non-empty rendered texts.

    Returns:
        The joined text and the accumulated argument list.
    """
    out_args: list[Any] = []
    parts: list[str] = []
    for fragment in fragments:
        part_sql, part_args = fragment.to_sql()
        if part_sql:
            parts.append(part_sql)
            out_args.extend(part_args)
    return sep.join(parts), out_args


def render_value(value: Any, args: list[Any]) -> str:
    """Render one operand, appending its arguments to ``args``.

    Fragments are spliced in place of the mark; statements are wrapped in
    parentheses so they read as scalar sub-queries.  Anything else is bound
    to a single ``?``.
    """
    if isinstance(value, Fragment):
        sql, sub_args = value.to_sql()
        args.extend(sub_args)
        return f"({sql})" if value.subquery else sql
    args.append(value)
    return PLACEHOLDER
