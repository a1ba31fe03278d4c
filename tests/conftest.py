"""Shared pytest fixtures for sqlfrag unit and integration tests."""
from __future__ import annotations

import pytest

from sqlfrag import DOLLAR, StatementBuilder
from sqlfrag.format.registry import PlaceholderFormatFactory


@pytest.fixture(scope="session")
def psql() -> StatementBuilder:
    """Builder that renders PostgreSQL-style ``$n`` placeholders."""
    return StatementBuilder(placeholder=DOLLAR)


@pytest.fixture()
def restore_formats():
    """Undo registry changes made by a test."""
    saved = dict(PlaceholderFormatFactory._formats)
    yield PlaceholderFormatFactory
    PlaceholderFormatFactory._formats.clear()
    PlaceholderFormatFactory._formats.update(saved)
