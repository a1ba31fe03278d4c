"""sqlfrag quickstart.

Builds a few statements, prints the rendered SQL for two placeholder
formats, then runs them against an in-memory SQLite database.

Usage:
    pip install "sqlfrag[sqlalchemy]"
    python examples/quickstart.py
"""
from __future__ import annotations

import logging

from sqlalchemy import create_engine

from sqlfrag import DOLLAR, And, Array, Eq, Expr, Gt, Or, StatementBuilder, insert, select
from sqlfrag.runner import execute, query

DDL = "CREATE TABLE posts (id INTEGER PRIMARY KEY, title TEXT, tags TEXT, views INTEGER)"


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    logging.getLogger("sqlfrag").setLevel(logging.DEBUG)

    popular = (
        select("id", "title")
        .from_("posts")
        .where(Or(Gt({"views": 100}), And(Eq({"id": [1, 2]}), Expr("title LIKE ?", "S%"))))
        .order_by("id")
    )

    print("sqlite :", popular.build().sql)
    print("asyncpg:", popular.placeholder_format(DOLLAR).build().sql)

    engine = create_engine("sqlite://")
    with engine.connect() as conn:
        conn.exec_driver_sql(DDL)
        execute(
            conn,
            insert("posts")
            .columns("id", "title", "tags", "views")
            .values(1, "SQL basics", Array(["sql", "intro"]), 12)
            .values(2, "Sharding", Array(["scale"]), 40)
            .values(3, "Indexes", Array(["sql", "perf"]), 512),
        )
        for row in query(conn, popular):
            print(tuple(row))

    psql = StatementBuilder.from_config({"style": "dollar"})
    compiled = psql.update("posts").set("views", Expr("views + ?", 1)).where({"id": 3}).build()
    print(compiled.sql, compiled.args)


if __name__ == "__main__":
    main()
