"""sqlfrag statement layer: SELECT / INSERT / UPDATE / DELETE builders."""
from sqlfrag.statement.base import Statement
from sqlfrag.statement.builder import (
    StatementBuilder,
    delete,
    insert,
    select,
    statement_builder,
    update,
)
from sqlfrag.statement.delete import DeleteBuilder
from sqlfrag.statement.insert import InsertBuilder
from sqlfrag.statement.select import SelectBuilder
from sqlfrag.statement.update import UpdateBuilder

__all__ = [
    "DeleteBuilder",
    "InsertBuilder",
    "SelectBuilder",
    "Statement",
    "StatementBuilder",
    "UpdateBuilder",
    "delete",
    "insert",
    "select",
    "statement_builder",
    "update",
]
