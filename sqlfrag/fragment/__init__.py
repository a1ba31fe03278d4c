"""sqlfrag fragment layer: composable SQL pieces rendering to (sql, args)."""
from sqlfrag.fragment.base import CompiledSQL, Fragment, Valuer, render_all
from sqlfrag.fragment.conjunctions import And, Any, ConcatExpr, Fn, Or
from sqlfrag.fragment.expr import Alias, Expr, Lateral
from sqlfrag.fragment.literals import JSON, JSONB, Array
from sqlfrag.fragment.predicates import (
    Between,
    Eq,
    Gt,
    GtOrEq,
    Lt,
    LtOrEq,
    NotEq,
    PredicateValue,
    ValueKind,
)

__all__ = [
    "Alias",
    "And",
    "Any",
    "Array",
    "Between",
    "CompiledSQL",
    "ConcatExpr",
    "Eq",
    "Expr",
    "Fn",
    "Fragment",
    "Gt",
    "GtOrEq",
    "JSON",
    "JSONB",
    "Lateral",
    "Lt",
    "LtOrEq",
    "NotEq",
    "Or",
    "PredicateValue",
    "Valuer",
    "ValueKind",
    "render_all",
]
