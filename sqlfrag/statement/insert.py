"""INSERT statement builder."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sqlfrag.errors import StatementError
from sqlfrag.fragment.base import render_value
from sqlfrag.statement.base import SqlWriter, Statement


@dataclass(frozen=True)
class InsertBuilder(Statement):
    """Builds ``INSERT`` statements.

    Example::

        insert("posts").columns("content", "tags").values("Lorem", Array(["a", "b"]))
        # INSERT INTO posts (content,tags) VALUES (?,?)
    """

    into_table: str = ""
    options_list: tuple[str, ...] = ()
    column_names: tuple[str, ...] = ()
    rows: tuple[tuple[Any, ...], ...] = ()
    select_query: Statement | None = None
    returning_columns: tuple[str, ...] = ()

    verb = "INSERT"

    def into(self, table: str) -> InsertBuilder:
        return self._replace(into_table=table)

    def options(self, *options: str) -> InsertBuilder:
        """Add keywords between ``INSERT`` and ``INTO`` (e.g. ``IGNORE``)."""
        return self._replace(options_list=self.options_list + options)

    def columns(self, *columns: str) -> InsertBuilder:
        return self._replace(column_names=self.column_names + columns)

    def values(self, *values: Any) -> InsertBuilder:
        """Add one row of values; fragments are rendered inline."""
        return self._replace(rows=self.rows + (tuple(values),))

    def set_map(self, clauses: Mapping[str, Any]) -> InsertBuilder:
        """Replace columns and rows with a single row taken from ``clauses``."""
        return self._replace(
            column_names=tuple(clauses.keys()),
            rows=(tuple(clauses.values()),),
        )

    def select(self, query: Statement) -> InsertBuilder:
        """Use ``INSERT ... (cols) SELECT ...`` instead of a VALUES list."""
        return self._replace(select_query=query)

    def returning(self, *columns: str) -> InsertBuilder:
        return self._replace(returning_columns=self.returning_columns + columns)

    def _write_body(self, writer: SqlWriter) -> None:
        if not self.into_table:
            raise StatementError("insert statements must specify a table", clause="INTO")
        if not self.rows and self.select_query is None:
            raise StatementError(
                "insert statements must have at least one set of values or select clause",
                clause="VALUES",
            )

        head = ["INSERT", *self.options_list, "INTO", self.into_table]
        if self.column_names:
            head.append(f"({','.join(self.column_names)})")
        writer.write(" ".join(head))

        if self.select_query is not None:
            sql, args = self.select_query.to_sql()
            writer.write(sql)
            writer.args.extend(args)
        else:
            row_sql = []
            for row in self.rows:
                row_sql.append(
                    "(" + ",".join(render_value(v, writer.args) for v in row) + ")"
                )
            writer.write("VALUES " + ",".join(row_sql))

        writer.names("RETURNING", self.returning_columns)
