"""sqlfrag – composable SQL fragments with correctly ordered bound arguments.

Build statements from pieces, never from string concatenation.

Public API
----------
``select`` / ``insert`` / ``update`` / ``delete``
    Start a statement with the default ``?`` placeholder format.

``StatementBuilder``
    Start statements that share a placeholder format (``DOLLAR``,
    ``COLON``, ``AT_P`` or any ``PositionalNumbered`` prefix).

Fragments
---------
``Expr``, ``Eq``, ``NotEq``, ``Lt``, ``LtOrEq``, ``Gt``, ``GtOrEq``,
``Between``, ``And``, ``Or``, ``ConcatExpr``, ``Fn``, ``Any``, ``Alias``,
``Lateral``, ``Array``, ``JSON``, ``JSONB`` – each renders to
``(sql, args)`` via ``to_sql()`` and nests inside the others.

Example::

    import sqlfrag
    from sqlfrag import And, Eq, Expr

    compiled = (
        sqlfrag.StatementBuilder(placeholder=sqlfrag.DOLLAR)
        .select("id", "title")
        .from_("posts")
        .where(And(Eq({"id": [1, 2, 3]}), Expr("active = ?", True)))
        .build()
    )
    compiled.sql   # 'SELECT id, title FROM posts WHERE (id IN ($1,$2,$3) AND active = $4)'
    compiled.args  # [1, 2, 3, True]

Extensibility
-------------
Additional placeholder formats can be registered by name and then chosen
from configuration::

    from sqlfrag.format.registry import PlaceholderFormatFactory

    PlaceholderFormatFactory.register("snowflake", PositionalNumbered(":"))
    builder = StatementBuilder.from_config({"style": "snowflake"})
"""

from __future__ import annotations

from sqlfrag.errors import (
    CompositionError,
    EncodingError,
    FormatConfigError,
    InvalidSegmentError,
    SqlFragError,
    StatementError,
    TypeMismatchError,
    UnrenderableValueError,
    UnsupportedOperandError,
)
from sqlfrag.format.config import PlaceholderConfig
from sqlfrag.format.placeholders import (
    AT_P,
    COLON,
    DOLLAR,
    QUESTION,
    PlaceholderFormat,
    PositionalNumbered,
    Sequential,
    placeholders,
)
from sqlfrag.format.registry import PlaceholderFormatFactory
from sqlfrag.fragment.base import CompiledSQL, Fragment, Valuer
from sqlfrag.fragment.conjunctions import And, Any, ConcatExpr, Fn, Or
from sqlfrag.fragment.expr import Alias, Expr, Lateral
from sqlfrag.fragment.literals import JSON, JSONB, Array
from sqlfrag.fragment.predicates import (
    Between,
    Eq,
    Gt,
    GtOrEq,
    Lt,
    LtOrEq,
    NotEq,
    PredicateValue,
)
from sqlfrag.statement.builder import (
    StatementBuilder,
    delete,
    insert,
    select,
    statement_builder,
    update,
)
from sqlfrag.statement.delete import DeleteBuilder
from sqlfrag.statement.insert import InsertBuilder
from sqlfrag.statement.select import SelectBuilder
from sqlfrag.statement.update import UpdateBuilder

__all__ = [
    # Statements
    "select",
    "insert",
    "update",
    "delete",
    "statement_builder",
    "StatementBuilder",
    "SelectBuilder",
    "InsertBuilder",
    "UpdateBuilder",
    "DeleteBuilder",
    "CompiledSQL",
    # Fragments
    "Fragment",
    "Valuer",
    "Expr",
    "Alias",
    "Lateral",
    "Eq",
    "NotEq",
    "Lt",
    "LtOrEq",
    "Gt",
    "GtOrEq",
    "Between",
    "PredicateValue",
    "And",
    "Or",
    "ConcatExpr",
    "Fn",
    "Any",
    "Array",
    "JSON",
    "JSONB",
    # Placeholder formats
    "PlaceholderFormat",
    "Sequential",
    "PositionalNumbered",
    "QUESTION",
    "DOLLAR",
    "COLON",
    "AT_P",
    "placeholders",
    "PlaceholderFormatFactory",
    "PlaceholderConfig",
    # Errors
    "SqlFragError",
    "UnrenderableValueError",
    "UnsupportedOperandError",
    "TypeMismatchError",
    "EncodingError",
    "InvalidSegmentError",
    "CompositionError",
    "StatementError",
    "FormatConfigError",
]
