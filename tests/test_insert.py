"""Unit tests for InsertBuilder."""

from __future__ import annotations

import pytest

from sqlfrag import DOLLAR, JSONB, Array, Expr, StatementBuilder, insert, select
from sqlfrag.errors import StatementError


def test_insert_values():
    q = (
        insert("a")
        .prefix("WITH prefix AS ?", 0)
        .options("DELAYED", "IGNORE")
        .columns("b", "c")
        .values(1, 2)
        .values(3, Expr("? + 1", 4))
        .suffix("RETURNING ?", 5)
    )
    sql, args = q.to_sql()
    assert sql == (
        "WITH prefix AS ? INSERT DELAYED IGNORE INTO a (b,c) VALUES (?,?),(?,? + 1) RETURNING ?"
    )
    assert args == [0, 1, 2, 3, 4, 5]


def test_insert_array_with_dollar():
    compiled = (
        insert("posts")
        .columns("content", "tags")
        .values("Lorem Ipsum", Array(["foo", "bar"]))
        .placeholder_format(DOLLAR)
        .build()
    )
    assert compiled.sql == "INSERT INTO posts (content,tags) VALUES ($1,$2)"
    assert compiled.args == ["Lorem Ipsum", '{"foo","bar"}']


def test_insert_json_value():
    sql, args = insert("events").columns("payload").values(JSONB({"k": 1})).to_sql()
    assert sql == "INSERT INTO events (payload) VALUES (?::jsonb)"
    assert args == ['{"k":1}']


def test_insert_sub_select_value_is_parenthesised():
    sub = select("max(id)").from_("t").where("k = ?", "x")
    sql, args = insert("u").columns("ref").values(sub).to_sql()
    assert sql == "INSERT INTO u (ref) VALUES ((SELECT max(id) FROM t WHERE k = ?))"
    assert args == ["x"]


def test_insert_set_map():
    sql, args = insert("a").set_map({"b": 1, "c": None}).to_sql()
    assert sql == "INSERT INTO a (b,c) VALUES (?,?)"
    assert args == [1, None]


def test_insert_select():
    q = insert("archive").columns("id", "name").select(
        select("id", "name").from_("live").where("created < ?", "2020-01-01")
    )
    sql, args = q.to_sql()
    assert sql == (
        "INSERT INTO archive (id,name) SELECT id, name FROM live WHERE created < ?"
    )
    assert args == ["2020-01-01"]


def test_insert_returning():
    compiled = (
        StatementBuilder(placeholder=DOLLAR)
        .insert("users")
        .columns("name")
        .values("ann")
        .returning("id", "created_at")
        .build()
    )
    assert compiled.sql == "INSERT INTO users (name) VALUES ($1) RETURNING id, created_at"


def test_insert_requires_table():
    with pytest.raises(StatementError):
        insert("").values(1).to_sql()


def test_insert_requires_values():
    with pytest.raises(StatementError) as excinfo:
        insert("a").columns("b").to_sql()
    assert excinfo.value.clause == "VALUES"
