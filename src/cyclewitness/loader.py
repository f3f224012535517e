"""Reading adjacency matrices from text.

Two input shapes are accepted:

  JSON         [[0, 1], [1, 0]]
  plain text   one row per line, entries split on whitespace or commas;
               blank lines and anything after '#' are ignored

Whatever the shape, the rows go through AdjacencyMatrix, so a jagged
or non-0/1 matrix is rejected with MalformedMatrixError.
"""
from __future__ import annotations

import json
import logging
import re
import sys
from pathlib import Path

from cyclewitness.graph.matrix import AdjacencyMatrix, MalformedMatrixError

log = logging.getLogger(__name__)

_SEP = re.compile(r"[\s,]+")


def _parse_json(text: str) -> AdjacencyMatrix:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedMatrixError(f"Invalid JSON matrix: {exc}") from None
    if not isinstance(data, list) or not all(isinstance(r, list) for r in data):
        raise MalformedMatrixError("JSON matrix must be a list of lists")
    return AdjacencyMatrix(data)


def _parse_token(token: str, row: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise MalformedMatrixError(
            f"Row {row}: {token!r} is not an integer"
        ) from None


def _parse_rows(text: str) -> AdjacencyMatrix:
    rows: list[list[int]] = []
    for raw in text.splitlines():
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        tokens = [t for t in _SEP.split(line) if t]
        rows.append([_parse_token(t, len(rows)) for t in tokens])
    return AdjacencyMatrix(rows)


def parse_matrix(text: str) -> AdjacencyMatrix:
    """Parse *text* as a JSON or plain-text adjacency matrix."""
    stripped = text.strip()
    if stripped.startswith("["):
        matrix = _parse_json(stripped)
    else:
        matrix = _parse_rows(text)
    log.debug("parsed %r", matrix)
    return matrix


def load_matrix(path: str | Path) -> AdjacencyMatrix:
    """Read and parse a matrix file.  "-" reads standard input."""
    try:
        if str(path) == "-":
            text = sys.stdin.read()
        else:
            text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedMatrixError(
            f"{path}: not valid UTF-8 ({exc.reason} at byte {exc.start})"
        ) from None
    return parse_matrix(text)
