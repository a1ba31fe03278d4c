"""UPDATE statement builder."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sqlfrag.errors import StatementError
from sqlfrag.fragment.base import Fragment, render_value
from sqlfrag.fragment.expr import Expr
from sqlfrag.statement.base import FilterMixin, SqlWriter, Statement


@dataclass(frozen=True)
class UpdateBuilder(FilterMixin, Statement):
    """Builds ``UPDATE`` statements.

    ``UPDATE table SET a = ?, b = ? [FROM ...] [WHERE ...] [ORDER BY ...]
    [LIMIT n] [OFFSET n] [RETURNING ...]``
    """

    table_name: str = ""
    set_clauses: tuple[tuple[str, Any], ...] = ()
    from_parts: tuple[Fragment, ...] = ()
    where_parts: tuple[Fragment, ...] = ()
    order_bys: tuple[str, ...] = ()
    limit_value: int | None = None
    offset_value: int | None = None
    returning_columns: tuple[str, ...] = ()

    verb = "UPDATE"

    def table(self, table: str) -> UpdateBuilder:
        return self._replace(table_name=table)

    def set(self, column: str, value: Any) -> UpdateBuilder:
        """Add ``column = ?``; a fragment value is rendered in place of the mark."""
        return self._replace(set_clauses=self.set_clauses + ((column, value),))

    def set_map(self, clauses: Mapping[str, Any]) -> UpdateBuilder:
        """Add one SET clause per mapping entry, in mapping order."""
        return self._replace(set_clauses=self.set_clauses + tuple(clauses.items()))

    def from_(self, *tables: str) -> UpdateBuilder:
        """Add ``FROM`` sources (PostgreSQL ``UPDATE ... FROM``)."""
        return self._replace(from_parts=self.from_parts + tuple(Expr(t) for t in tables))

    def returning(self, *columns: str) -> UpdateBuilder:
        return self._replace(returning_columns=self.returning_columns + columns)

    def _write_body(self, writer: SqlWriter) -> None:
        if not self.table_name:
            raise StatementError("update statements must specify a table", clause="UPDATE")
        if not self.set_clauses:
            raise StatementError(
                "update statements must have at least one Set clause", clause="SET"
            )

        writer.write(f"UPDATE {self.table_name}")
        sets = [
            f"{column} = {render_value(value, writer.args)}"
            for column, value in self.set_clauses
        ]
        writer.write("SET " + ", ".join(sets))
        writer.clause("FROM", self.from_parts, ", ")
        self._write_filters(writer)
        writer.names("RETURNING", self.returning_columns)
