"""Test fixtures: sample schema DDL and seed rows."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

_FIXTURES_DIR = Path(__file__).parent


def load_ddl(target: Literal["sqlite"] = "sqlite") -> list[str]:
    """Return the sample DDL for ``target`` split into single statements.

    DBAPI drivers execute one statement per call, so the script is split on
    ``;`` here rather than handed over whole.
    """
    script = (_FIXTURES_DIR / f"ddl_{target}.sql").read_text()
    return [stmt.strip() for stmt in script.split(";") if stmt.strip()]
