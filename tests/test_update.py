"""Unit tests for UpdateBuilder."""

from __future__ import annotations

import pytest

from sqlfrag import DOLLAR, Eq, Expr, JSON, select, update
from sqlfrag.errors import StatementError


def test_update_full():
    q = (
        update("a")
        .prefix("WITH prefix AS ?", 0)
        .set("b", Expr("? + 1", 1))
        .set_map({"c": 2})
        .where("d = ?", 3)
        .order_by("e")
        .limit(4)
        .offset(5)
        .suffix("RETURNING ?", 6)
    )
    sql, args = q.to_sql()
    assert sql == (
        "WITH prefix AS ? "
        "UPDATE a SET b = ? + 1, c = ? WHERE d = ? ORDER BY e LIMIT 4 OFFSET 5 "
        "RETURNING ?"
    )
    assert args == [0, 1, 2, 3, 6]


def test_update_with_dollar_and_null():
    compiled = (
        update("users")
        .set("name", "bob")
        .set("deleted_at", None)
        .where(Eq({"id": [1, 2]}))
        .placeholder_format(DOLLAR)
        .build()
    )
    assert compiled.sql == "UPDATE users SET name = $1, deleted_at = $2 WHERE id IN ($3,$4)"
    assert compiled.args == ["bob", None, 1, 2]


def test_update_from():
    sql, args = (
        update("a")
        .set("x", Expr("b.x"))
        .from_("b")
        .where("a.id = b.a_id AND b.k = ?", 9)
        .to_sql()
    )
    assert sql == "UPDATE a SET x = b.x FROM b WHERE a.id = b.a_id AND b.k = ?"
    assert args == [9]


def test_update_set_sub_select():
    sub = select("max(v)").from_("m").where("m.k = ?", "z")
    sql, args = update("t").set("top", sub).to_sql()
    assert sql == "UPDATE t SET top = (SELECT max(v) FROM m WHERE m.k = ?)"
    assert args == ["z"]


def test_update_json():
    sql, args = update("t").set("meta", JSON([1])).returning("id").to_sql()
    assert sql == "UPDATE t SET meta = ?::json RETURNING id"
    assert args == ["[1]"]


def test_update_requires_table():
    with pytest.raises(StatementError):
        update("").set("a", 1).to_sql()


def test_update_requires_set():
    with pytest.raises(StatementError) as excinfo:
        update("a").to_sql()
    assert excinfo.value.clause == "SET"
