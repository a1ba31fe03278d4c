"""Unit tests for And / Or / ConcatExpr / Fn / Any."""

from __future__ import annotations

import pytest

from sqlfrag.errors import (
    CompositionError,
    InvalidSegmentError,
    TypeMismatchError,
    UnsupportedOperandError,
)
from sqlfrag.format.placeholders import DOLLAR
from sqlfrag.fragment.base import Fragment, render_all
from sqlfrag.fragment.conjunctions import And, Any, ConcatExpr, Fn, Or
from sqlfrag.fragment.expr import Expr
from sqlfrag.fragment.literals import Array
from sqlfrag.fragment.predicates import Eq, Lt


class _Exploding(Fragment):
    """Records whether it was rendered, then fails."""

    def __init__(self) -> None:
        self.calls = 0

    def to_sql(self):
        self.calls += 1
        raise RuntimeError("boom")


def test_and_joins_children():
    pred = And(Expr("a > ?", 15), Expr("b < ?", 20), Expr("c IS TRUE"))
    assert pred.to_sql() == ("(a > ? AND b < ? AND c IS TRUE)", [15, 20])


def test_or_joins_children():
    pred = Or(Expr("a = ?", 1), Eq({"b": None}))
    assert pred.to_sql() == ("(a = ? OR b IS NULL)", [1])


def test_empty_children_are_skipped():
    pred = And(Expr(""), Expr("a = ?", 1), Eq({}), Expr("b = ?", 2))
    assert pred.to_sql() == ("(a = ? AND b = ?)", [1, 2])


def test_all_empty_renders_nothing():
    assert And().to_sql() == ("", [])
    assert Or(Expr(""), Eq({})).to_sql() == ("", [])


def test_nested_conjunctions():
    pred = And(Expr("x = ?", 1), Or(Expr("y = ?", 2), Expr("z = ?", 3)))
    assert pred.to_sql() == ("(x = ? AND (y = ? OR z = ?))", [1, 2, 3])


def test_end_to_end_with_dollar_format():
    sql, args = And(Eq({"id": [1, 2, 3]}), Expr("active = ?", True)).to_sql()
    assert DOLLAR.replace_placeholders(sql) == "(id IN ($1,$2,$3) AND active = $4)"
    assert args == [1, 2, 3, True]


def test_first_child_error_short_circuits():
    later = _Exploding()
    pred = And(Expr("a = ?", 1), Lt({"b": None}), later)
    with pytest.raises(UnsupportedOperandError):
        pred.to_sql()
    assert later.calls == 0


def test_child_error_propagates_unchanged():
    with pytest.raises(RuntimeError, match="boom"):
        Or(_Exploding()).to_sql()


def test_conjunction_requires_fragments():
    with pytest.raises(CompositionError):
        And(Expr("a"), "b = 1")  # type: ignore[arg-type]


def test_concat_expr():
    name = Expr("CONCAT(?, ' ', ?)", "John", "Doe")
    sql, args = ConcatExpr("COALESCE(full_name,", name, ")").to_sql()
    assert sql == "COALESCE(full_name,CONCAT(?, ' ', ?))"
    assert args == ["John", "Doe"]


def test_concat_rejects_other_segments():
    with pytest.raises(InvalidSegmentError) as excinfo:
        ConcatExpr("a", 42).to_sql()  # type: ignore[arg-type]
    assert excinfo.value.segment == 42


def test_fn():
    sql, args = Fn("COALESCE", Expr("nickname"), Expr("?", "anonymous")).to_sql()
    assert sql == "COALESCE(nickname, ?)"
    assert args == ["anonymous"]
    assert Fn("NOW").to_sql() == ("NOW()", [])


def test_fn_requires_fragments():
    with pytest.raises(CompositionError):
        Fn("LOWER", "name")  # type: ignore[arg-type]


def test_any():
    assert Any("id", [1, 2, 3]).to_sql() == ("id = ANY(?)", ["{1,2,3}"])
    assert Any("tag", ["a"]).to_sql() == ("tag = ANY(?)", ['{"a"}'])


def test_any_propagates_array_errors():
    with pytest.raises(TypeMismatchError):
        Any("id", 5).to_sql()


def test_array_inside_template():
    sql, args = Expr("tags && ?", Array(["x", "y"])).to_sql()
    assert sql == "tags && ?"
    assert args == ['{"x","y"}']


def test_render_all_skips_empty_and_starts_fresh():
    parts = [Expr("a = ?", 1), Expr(""), Eq({}), Expr("b = ?", 2)]
    first = render_all(parts, " AND ")
    assert first == ("a = ? AND b = ?", [1, 2])
    assert render_all(parts, " AND ") == first
    assert first[1] is not render_all(parts, " AND ")[1]
