"""DELETE statement builder."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlfrag.errors import StatementError
from sqlfrag.fragment.base import Fragment
from sqlfrag.fragment.expr import Alias, Expr
from sqlfrag.fragment.parts import part
from sqlfrag.statement.base import FilterMixin, SqlWriter, Statement


@dataclass(frozen=True)
class DeleteBuilder(FilterMixin, Statement):
    """Builds ``DELETE`` statements.

    ``what`` lists the tables rows are deleted from in multi-table deletes
    (``DELETE a1, a2 FROM z1 AS a1 JOIN ...``).  It is omitted from the
    output when it names exactly the FROM target, and becomes the FROM
    target when :meth:`from_` is never called::

        delete("a").where("id = ?", 1)          # DELETE FROM a WHERE id = ?
        delete("a").from_("A a").join("B b ON a.c = b.c")
        # DELETE a FROM A a JOIN B b ON a.c = b.c
    """

    what: tuple[str, ...] = ()
    from_table: str = ""
    joins: tuple[Fragment, ...] = ()
    usings: tuple[str, ...] = ()
    where_parts: tuple[Fragment, ...] = ()
    order_bys: tuple[str, ...] = ()
    limit_value: int | None = None
    offset_value: int | None = None
    returning_parts: tuple[Fragment, ...] = ()

    verb = "DELETE"

    def from_(self, table: str) -> DeleteBuilder:
        return self._replace(from_table=table)

    def using(self, *tables: str) -> DeleteBuilder:
        """Add PostgreSQL ``USING`` tables."""
        return self._replace(usings=self.usings + tables)

    def join_clause(self, pred: str | Fragment, *args: Any) -> DeleteBuilder:
        return self._replace(joins=self.joins + (part(pred, *args),))

    def join(self, join: str, *args: Any) -> DeleteBuilder:
        return self.join_clause(f"JOIN {join}", *args)

    def inner_join(self, join: str, *args: Any) -> DeleteBuilder:
        return self.join_clause(f"INNER JOIN {join}", *args)

    def left_join(self, join: str, *args: Any) -> DeleteBuilder:
        return self.join_clause(f"LEFT JOIN {join}", *args)

    def right_join(self, join: str, *args: Any) -> DeleteBuilder:
        return self.join_clause(f"RIGHT JOIN {join}", *args)

    def returning(self, *columns: str) -> DeleteBuilder:
        return self._replace(
            returning_parts=self.returning_parts + tuple(Expr(c) for c in columns)
        )

    def returning_select(self, sub: Statement, alias: str) -> DeleteBuilder:
        """Add ``RETURNING (<sub>) AS alias``."""
        return self._replace(returning_parts=self.returning_parts + (Alias(sub, alias),))

    def _target(self) -> tuple[list[str], str]:
        what = [w for w in self.what if w]
        target = self.from_table
        if not target:
            target, what = ", ".join(what), []
        if what == [target]:
            what = []
        return what, target

    def _write_body(self, writer: SqlWriter) -> None:
        what, target = self._target()
        if not target:
            raise StatementError("delete statements must specify a From table", clause="FROM")

        if what:
            writer.write(f"DELETE {', '.join(what)} FROM {target}")
        else:
            writer.write(f"DELETE FROM {target}")
        writer.clause("", self.joins, " ")
        writer.names("USING", self.usings)
        self._write_filters(writer)
        writer.clause("RETURNING", self.returning_parts, ", ")
