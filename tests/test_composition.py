"""Mark/argument parity across mixed fragment trees."""

from __future__ import annotations

import pytest

from sqlfrag import (
    JSONB,
    Alias,
    And,
    Any,
    Array,
    Between,
    ConcatExpr,
    Eq,
    Expr,
    Fn,
    GtOrEq,
    Lateral,
    NotEq,
    Or,
    delete,
    insert,
    select,
    update,
)
from sqlfrag.format.placeholders import DOLLAR

_SUB = select("id").from_("orgs").where(Eq({"region": ["eu", "us"]}))

TREES = [
    pytest.param(
        And(Expr("a = ?", 1), Or(Eq({"b": [2, 3]}), NotEq({"c": None})), Between("d", 4, 5)),
        [1, 2, 3, 4, 5],
        id="and-or-between",
    ),
    pytest.param(
        Expr("tags && ? AND meta @> ?", Array(["x", "y"]), JSONB({"k": [1, 2]})),
        ['{"x","y"}', '{"k":[1,2]}'],
        id="literals-in-template",
    ),
    pytest.param(
        Fn("COALESCE", Expr("?", "n"), Alias(Expr("SELECT ?", 7), "s")),
        ["n", 7],
        id="fn-alias",
    ),
    pytest.param(
        ConcatExpr("(", Eq({"org_id": _SUB}), ") OR ", Any("id", [8, 9])),
        ["eu", "us", "{8,9}"],
        id="concat-subquery-any",
    ),
    pytest.param(
        select("a")
        .column(Lateral(Expr("SELECT f(?)", 1), "l"))
        .from_("t")
        .where(And(GtOrEq({"x": 2}), Expr("y IN (?)", _SUB)))
        .having({"z": [3]}),
        [1, 2, "eu", "us", 3],
        id="select",
    ),
    pytest.param(
        insert("t").columns("a", "b").values(Array([1, 2]), _SUB).suffix("RETURNING ?", 0),
        ["{1,2}", "eu", "us", 0],
        id="insert",
    ),
    pytest.param(
        update("t").set("a", JSONB([1])).set("b", _SUB).where(Eq({"c": [4, 5]})),
        ["[1]", "eu", "us", 4, 5],
        id="update",
    ),
    pytest.param(
        delete("t").where(Or(Eq({"id": _SUB}), Expr("d < ?", 6))),
        ["eu", "us", 6],
        id="delete",
    ),
]


@pytest.mark.parametrize("fragment, expected_args", TREES)
def test_mark_count_matches_args(fragment, expected_args):
    sql, args = fragment.to_sql()
    assert args == expected_args
    assert sql.count("?") == len(args)


@pytest.mark.parametrize("fragment, expected_args", TREES)
def test_numbered_rewrite_covers_every_arg(fragment, expected_args):
    sql, args = fragment.to_sql()
    numbered = DOLLAR.replace_placeholders(sql)
    assert "?" not in numbered
    assert f"${len(args)}" in numbered
    assert f"${len(args) + 1}" not in numbered
