"""Shared fixtures for report, loader and CLI tests."""
from __future__ import annotations

from pathlib import Path

import pytest

CYCLIC_TEXT = """\
# edge 3 -> 1 closes 1 -> 3 -> 1
0 1 0 0
0 0 1 1
0 0 0 0
0 1 0 0
"""

ACYCLIC_JSON = "[[0, 1, 1, 0], [0, 0, 0, 1], [0, 0, 0, 1], [0, 0, 0, 0]]"


@pytest.fixture
def cyclic_file(tmp_path: Path) -> Path:
    p = tmp_path / "cyclic.txt"
    p.write_text(CYCLIC_TEXT, encoding="utf-8")
    return p


@pytest.fixture
def acyclic_file(tmp_path: Path) -> Path:
    p = tmp_path / "acyclic.json"
    p.write_text(ACYCLIC_JSON, encoding="utf-8")
    return p


@pytest.fixture
def jagged_file(tmp_path: Path) -> Path:
    p = tmp_path / "jagged.txt"
    p.write_text("0 1\n0\n", encoding="utf-8")
    return p


@pytest.fixture
def cyclic_text() -> str:
    return CYCLIC_TEXT


@pytest.fixture
def acyclic_json() -> str:
    return ACYCLIC_JSON
