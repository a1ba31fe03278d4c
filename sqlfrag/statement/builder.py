"""``StatementBuilder``: entry point that stamps a placeholder format on new statements.

Usage::

    psql = StatementBuilder(placeholder=DOLLAR)

    compiled = (
        psql.select("id", "name")
        .from_("users")
        .where(Eq({"id": [1, 2, 3]}))
        .build()
    )
    compiled.sql   # 'SELECT id, name FROM users WHERE id IN ($1,$2,$3)'
    compiled.args  # [1, 2, 3]

The format can also come from configuration::

    psql = StatementBuilder.from_config({"style": "dollar"})
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sqlfrag.format.config import PlaceholderConfig
from sqlfrag.format.placeholders import QUESTION, PlaceholderFormat
from sqlfrag.fragment.expr import Expr
from sqlfrag.statement.delete import DeleteBuilder
from sqlfrag.statement.insert import InsertBuilder
from sqlfrag.statement.select import SelectBuilder
from sqlfrag.statement.update import UpdateBuilder


@dataclass(frozen=True)
class StatementBuilder:
    """Factory for statements sharing one placeholder format.

    Attributes:
        placeholder: Format given to every statement this builder creates.
    """

    placeholder: PlaceholderFormat = QUESTION

    @classmethod
    def from_config(
        cls, config: PlaceholderConfig | Mapping[str, Any]
    ) -> StatementBuilder:
        """Create a builder from a :class:`PlaceholderConfig` or a plain mapping.

        Raises:
            FormatConfigError: If the configured style cannot be resolved.
            pydantic.ValidationError: If the mapping has the wrong shape.
        """
        if not isinstance(config, PlaceholderConfig):
            config = PlaceholderConfig.model_validate(config)
        return cls(placeholder=config.to_format())

    def placeholder_format(self, fmt: PlaceholderFormat) -> StatementBuilder:
        return StatementBuilder(placeholder=fmt)

    def select(self, *columns: str) -> SelectBuilder:
        return SelectBuilder(
            placeholder=self.placeholder,
            columns_list=tuple(Expr(c) for c in columns),
        )

    def insert(self, into: str) -> InsertBuilder:
        return InsertBuilder(placeholder=self.placeholder, into_table=into)

    def update(self, table: str) -> UpdateBuilder:
        return UpdateBuilder(placeholder=self.placeholder, table_name=table)

    def delete(self, *what: str) -> DeleteBuilder:
        return DeleteBuilder(placeholder=self.placeholder, what=what)


#: Default builder using ``?`` placeholders.
statement_builder = StatementBuilder()


def select(*columns: str) -> SelectBuilder:
    """Start a SELECT with the default (``?``) placeholder format."""
    return statement_builder.select(*columns)


def insert(into: str) -> InsertBuilder:
    """Start an INSERT with the default (``?``) placeholder format."""
    return statement_builder.insert(into)


def update(table: str) -> UpdateBuilder:
    """Start an UPDATE with the default (``?``) placeholder format."""
    return statement_builder.update(table)


def delete(*what: str) -> DeleteBuilder:
    """Start a DELETE with the default (``?``) placeholder format."""
    return statement_builder.delete(*what)
