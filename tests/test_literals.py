"""Unit tests for the Array and JSON literal encoders."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import BaseModel

from sqlfrag.errors import EncodingError, TypeMismatchError
from sqlfrag.fragment.literals import JSON, JSONB, Array


def _literal(op: Array) -> str:
    sql, args = op.to_sql()
    assert sql == "?"
    assert len(args) == 1
    return args[0]


@pytest.mark.parametrize(
    "value, expected",
    [
        ([], "{}"),
        ((), "{}"),
        ([[]], "{{}}"),
        (["foo", "bar", '"quoted"'], '{"foo","bar","\\"quoted\\""}'),
        ([6, 7, 42], "{6,7,42}"),
        ([[1, 2], [3, 4]], "{{1,2},{3,4}}"),
        (((1, 2), (3, 4)), "{{1,2},{3,4}}"),
        ([1.5, 2.0, 3.0], "{1.5,2,3}"),
        ([1.5, 2, 3], "{1.5,2,3}"),
        ([Decimal("1.10"), Decimal("2")], "{1.10,2}"),
        (range(3), "{0,1,2}"),
    ],
)
def test_valid_arrays(value, expected):
    assert _literal(Array(value)) == expected


def test_string_escaping():
    assert _literal(Array(["back\\slash", 'say "hi"'])) == '{"back\\\\slash","say \\"hi\\""}'


def test_non_finite_floats():
    assert _literal(Array([float("nan"), float("inf"), float("-inf")])) == (
        "{NaN,Infinity,-Infinity}"
    )


def test_nested_strings():
    assert _literal(Array([["a", "b"], ["c"]])) == '{{"a","b"},{"c"}}'


@pytest.mark.parametrize(
    "value",
    [
        42,
        "foo",
        b"foo",
        None,
        [object()],
        [{}],
        [6, 7, "foo"],
        [True, False],
        [[1], 2],
        [[1], [[2]]],
        [["a"], [1]],
    ],
)
def test_invalid_arrays(value):
    with pytest.raises(TypeMismatchError):
        Array(value).to_sql()


def test_typed_constructors():
    assert _literal(Array.of_strings(["x"])) == '{"x"}'
    assert _literal(Array.of_ints([1, 2])) == "{1,2}"
    assert _literal(Array.of_floats([1, 2.5])) == "{1,2.5}"
    with pytest.raises(TypeMismatchError):
        Array.of_ints([1.5]).to_sql()
    with pytest.raises(TypeMismatchError):
        Array.of_strings([1]).to_sql()


def test_unsupported_element_restriction():
    with pytest.raises(ValueError):
        Array([1], element=bytes)


def test_array_snapshots_input():
    values = [1, 2]
    op = Array(values)
    values.append(3)
    assert _literal(op) == "{1,2}"


def test_render_is_repeatable():
    op = Array([[1, 2], [3, 4]])
    assert op.to_sql() == op.to_sql()


def test_json_and_jsonb():
    assert JSON({"a": 1, "b": [1, 2]}).to_sql() == ('?::json', ['{"a":1,"b":[1,2]}'])
    assert JSONB("x").to_sql() == ("?::jsonb", ['"x"'])
    assert JSONB(None).to_sql() == ("?::jsonb", ["null"])


def test_json_keeps_unicode():
    assert JSON({"name": "Zoë"}).to_sql()[1] == ['{"name":"Zoë"}']


def test_json_pydantic_model():
    class Tag(BaseModel):
        name: str
        weight: float

    assert JSONB(Tag(name="x", weight=1.5)).to_sql() == (
        "?::jsonb",
        ['{"name":"x","weight":1.5}'],
    )


@pytest.mark.parametrize("value", [object(), {"n": float("nan")}, {1, 2}])
def test_json_unserializable(value):
    with pytest.raises(EncodingError) as excinfo:
        JSON(value).to_sql()
    assert excinfo.value.type_name == "json"


def test_json_cycle():
    cyclic: list = []
    cyclic.append(cyclic)
    with pytest.raises(EncodingError) as excinfo:
        JSONB(cyclic).to_sql()
    assert "jsonb" in str(excinfo.value)


def _nested(depth: int) -> list:
    root: list = []
    current = root
    for _ in range(depth):
        child: list = []
        current.append(child)
        current = child
    return root


def test_json_too_deep():
    with pytest.raises(EncodingError) as excinfo:
        JSONB(_nested(100_000)).to_sql()
    assert excinfo.value.type_name == "jsonb"


def test_array_too_deep():
    with pytest.raises(TypeMismatchError):
        Array(_nested(100_000)).to_sql()


def test_json_nested_pydantic_models():
    class Tag(BaseModel):
        name: str

    assert JSONB([Tag(name="a"), {"tag": Tag(name="b")}]).to_sql() == (
        "?::jsonb",
        ['[{"name":"a"},{"tag":{"name":"b"}}]'],
    )
