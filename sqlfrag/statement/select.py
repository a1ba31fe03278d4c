"""SELECT statement builder."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlfrag.errors import CompositionError, StatementError
from sqlfrag.fragment.base import Fragment
from sqlfrag.fragment.expr import Alias, Expr, Lateral
from sqlfrag.fragment.parts import part, union_part, where_part
from sqlfrag.statement.base import FilterMixin, SqlWriter, Statement


@dataclass(frozen=True)
class SelectBuilder(FilterMixin, Statement):
    """Builds ``SELECT`` statements.

    Clause order: prefixes, ``SELECT [DISTINCT] [options] columns``,
    ``FROM``, joins, ``WHERE``, ``UNION``, ``UNION ALL``, ``GROUP BY``,
    ``HAVING``, ``ORDER BY``, ``LIMIT``, ``OFFSET``, suffixes.
    """

    distinct_rows: bool = False
    options_list: tuple[str, ...] = ()
    columns_list: tuple[Fragment, ...] = ()
    from_parts: tuple[Fragment, ...] = ()
    joins: tuple[Fragment, ...] = ()
    where_parts: tuple[Fragment, ...] = ()
    unions: tuple[Fragment, ...] = ()
    union_alls: tuple[Fragment, ...] = ()
    group_bys: tuple[str, ...] = ()
    having_parts: tuple[Fragment, ...] = ()
    order_bys: tuple[str, ...] = ()
    limit_value: int | None = None
    offset_value: int | None = None

    verb = "SELECT"

    # ------------------------------------------------------------------
    # Result columns
    # ------------------------------------------------------------------

    def distinct(self) -> SelectBuilder:
        return self._replace(distinct_rows=True)

    def options(self, *options: str) -> SelectBuilder:
        """Add select options such as ``SQL_NO_CACHE``."""
        return self._replace(options_list=self.options_list + options)

    def columns(self, *columns: str) -> SelectBuilder:
        """Add result columns as raw SQL."""
        return self._replace(
            columns_list=self.columns_list + tuple(Expr(c) for c in columns)
        )

    def column(self, column: str | Fragment, *args: Any) -> SelectBuilder:
        """Add one result column with bound arguments.

        A nested :class:`SelectBuilder` is aliased by the single argument::

            .column(select("count(*)").from_("orders"), "order_count")

        Anything else behaves like raw SQL with ``args`` bound to its marks::

            .column("IF(col IN (" + placeholders(3) + "), 1, 0) AS col", 1, 2, 3)
        """
        if isinstance(column, SelectBuilder):
            if len(args) != 1 or not isinstance(args[0], str):
                raise CompositionError(
                    "A sub-select column needs exactly one alias argument."
                )
            return self._replace(columns_list=self.columns_list + (Alias(column, args[0]),))
        return self._replace(columns_list=self.columns_list + (part(column, *args),))

    def count(self, alias: str) -> SelectBuilder:
        """Turn this query into ``count(1) AS alias``, dropping order, limit and offset."""
        return self._replace(
            columns_list=(Expr(f"count(1) AS {alias}"),),
            order_bys=(),
            limit_value=None,
            offset_value=None,
        )

    # ------------------------------------------------------------------
    # Sources
    # ------------------------------------------------------------------

    def from_(self, *tables: str) -> SelectBuilder:
        return self._replace(from_parts=self.from_parts + tuple(Expr(t) for t in tables))

    def from_select(self, sub: SelectBuilder, alias: str) -> SelectBuilder:
        """Add ``(<sub>) AS alias`` to the FROM clause."""
        return self._replace(from_parts=self.from_parts + (Alias(sub, alias),))

    def lateral_join(self, sub: SelectBuilder, alias: str) -> SelectBuilder:
        """Add ``LATERAL (<sub>) AS alias`` to the FROM clause."""
        return self._replace(from_parts=self.from_parts + (Lateral(sub, alias),))

    def join_clause(self, pred: str | Fragment, *args: Any) -> SelectBuilder:
        return self._replace(joins=self.joins + (part(pred, *args),))

    def join(self, join: str, *args: Any) -> SelectBuilder:
        return self.join_clause(f"JOIN {join}", *args)

    def inner_join(self, join: str, *args: Any) -> SelectBuilder:
        return self.join_clause(f"INNER JOIN {join}", *args)

    def left_join(self, join: str, *args: Any) -> SelectBuilder:
        return self.join_clause(f"LEFT JOIN {join}", *args)

    def right_join(self, join: str, *args: Any) -> SelectBuilder:
        return self.join_clause(f"RIGHT JOIN {join}", *args)

    # ------------------------------------------------------------------
    # Grouping and set operations
    # ------------------------------------------------------------------

    def group_by(self, *group_bys: str) -> SelectBuilder:
        return self._replace(group_bys=self.group_bys + group_bys)

    def having(self, pred: Any, *args: Any) -> SelectBuilder:
        """Add a HAVING expression; accepts the same inputs as :meth:`where`."""
        return self._replace(having_parts=self.having_parts + (where_part(pred, *args),))

    def union(self, query: str | Fragment, *args: Any) -> SelectBuilder:
        return self._replace(unions=self.unions + (union_part(query, *args),))

    def union_all(self, query: str | Fragment, *args: Any) -> SelectBuilder:
        return self._replace(union_alls=self.union_alls + (union_part(query, *args),))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _write_body(self, writer: SqlWriter) -> None:
        if not self.columns_list:
            raise StatementError(
                "select statements must have at least one result column", clause="SELECT"
            )

        head = ["SELECT"]
        if self.distinct_rows:
            head.append("DISTINCT")
        head.extend(self.options_list)
        writer.clause(" ".join(head), self.columns_list, ", ")
        writer.clause("FROM", self.from_parts, ", ")
        writer.clause("", self.joins, " ")
        writer.clause("WHERE", self.where_parts, " AND ")
        writer.clause("UNION", self.unions, " UNION ")
        writer.clause("UNION ALL", self.union_alls, " UNION ALL ")
        writer.names("GROUP BY", self.group_bys)
        writer.clause("HAVING", self.having_parts, " AND ")
        writer.names("ORDER BY", self.order_bys)
        writer.number("LIMIT", self.limit_value)
        writer.number("OFFSET", self.offset_value)
