"""Directed graph stored as a square 0/1 adjacency matrix.

Vertices are the integers 0..n-1.  rows[i][j] == 1 means there is a
directed edge i -> j.  A 1 on the diagonal is a self-loop.  The matrix
is validated once at construction and then frozen as a tuple of tuples,
so every algorithm that receives an AdjacencyMatrix can rely on it
being square and boolean-valued without re-checking.

There is no multigraph or weight semantics: an entry is either an edge
or not.
"""
from __future__ import annotations

from typing import Iterable, Iterator


class MalformedMatrixError(ValueError):
    """Raised when input cannot be interpreted as a square 0/1 matrix."""


def _entry(value: object, row: int, col: int) -> int:
    # bool is an int subclass; True/False are accepted and stored as 1/0
    if isinstance(value, int) and value in (0, 1):
        return int(value)
    raise MalformedMatrixError(
        f"Entry [{row}][{col}] must be 0 or 1, got {value!r}"
    )


class AdjacencyMatrix:
    """Immutable square adjacency matrix over vertices 0..n-1."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[object]]) -> None:
        frozen = tuple(tuple(r) for r in rows)
        n = len(frozen)
        for i, row in enumerate(frozen):
            if len(row) != n:
                raise MalformedMatrixError(
                    f"Row {i} has {len(row)} entries, expected {n} "
                    f"(matrix must be square)"
                )
        self._rows: tuple[tuple[int, ...], ...] = tuple(
            tuple(_entry(v, i, j) for j, v in enumerate(row))
            for i, row in enumerate(frozen)
        )

    # ---- construction ----------------------------------------------------

    @classmethod
    def empty(cls) -> AdjacencyMatrix:
        return cls(())

    @classmethod
    def from_edges(
        cls, num_vertices: int, edges: Iterable[tuple[int, int]]
    ) -> AdjacencyMatrix:
        """Build a matrix with *num_vertices* vertices from an edge list.

        Duplicate edges collapse into one.  An endpoint outside
        0..num_vertices-1 raises MalformedMatrixError.
        """
        if num_vertices < 0:
            raise MalformedMatrixError(
                f"num_vertices must be >= 0, got {num_vertices}"
            )
        grid = [[0] * num_vertices for _ in range(num_vertices)]
        for src, dst in edges:
            if not (0 <= src < num_vertices and 0 <= dst < num_vertices):
                raise MalformedMatrixError(
                    f"Edge {src} -> {dst} out of range for "
                    f"{num_vertices} vertices"
                )
            grid[src][dst] = 1
        return cls(grid)

    # ---- queries ---------------------------------------------------------

    @property
    def num_vertices(self) -> int:
        return len(self._rows)

    @property
    def is_empty(self) -> bool:
        return not self._rows

    @property
    def rows(self) -> tuple[tuple[int, ...], ...]:
        return self._rows

    def _check_vertex(self, node: int) -> None:
        # rules out negative indices, which would wrap round silently
        if not 0 <= node < len(self._rows):
            raise IndexError(
                f"Vertex {node} out of range for {len(self._rows)} vertices"
            )

    def has_edge(self, src: int, dst: int) -> bool:
        self._check_vertex(src)
        self._check_vertex(dst)
        return self._rows[src][dst] == 1

    def successors(self, node: int) -> list[int]:
        """Targets of edges leaving *node*, in ascending order."""
        self._check_vertex(node)
        return [v for v, bit in enumerate(self._rows[node]) if bit]

    def in_degree(self, node: int) -> int:
        self._check_vertex(node)
        return sum(row[node] for row in self._rows)

    def edges(self) -> Iterator[tuple[int, int]]:
        """All edges in row-major order."""
        for src, row in enumerate(self._rows):
            for dst, bit in enumerate(row):
                if bit:
                    yield src, dst

    @property
    def edge_count(self) -> int:
        return sum(sum(row) for row in self._rows)

    # ---- dunder ----------------------------------------------------------

    def __len__(self) -> int:
        return self.num_vertices

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdjacencyMatrix):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return (
            f"AdjacencyMatrix(vertices={self.num_vertices}, "
            f"edges={self.edge_count})"
        )
