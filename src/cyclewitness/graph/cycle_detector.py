"""Cycle detection in directed graphs using Kahn's algorithm.

A graph is acyclic iff Kahn's algorithm manages to remove every vertex.
The vertices it cannot remove (residual in-degree > 0) are each stuck
behind at least one other stuck vertex, so following predecessors
inside that set must eventually revisit a vertex.  That revisit closes
the witness cycle.

Reconstruction:
  1.  Relax every edge u -> v with both ends stuck, u and v ascending,
      setting parent[v] = u.  Last writer wins, same as the main pass,
      so each stuck vertex ends with its highest-numbered stuck
      predecessor.
  2.  Start at the lowest stuck vertex and follow parent, marking
      visited, until a vertex repeats.  That vertex is the cycle start.
  3.  Collect vertices from the start along parent until it comes back
      round, then reverse everything after the start so the path reads
      in edge direction: start -> ... -> (back to start).

The witness is one valid cycle, not the shortest and not the "first"
in any canonical sense.  With several cycles, the one returned is
whichever the parent walk reaches.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Sequence

from cyclewitness.graph.kahn import KahnPass, run_kahn
from cyclewitness.graph.matrix import AdjacencyMatrix

log = logging.getLogger(__name__)


class GraphStatus(Enum):
    EMPTY = auto()
    ACYCLIC = auto()
    CYCLIC = auto()


@dataclass(slots=True)
class DetectionResult:
    """Result of cycle detection.

    cycle_path lists the witness cycle in edge order without repeating
    the first vertex at the end; the closing edge path[-1] -> path[0]
    is implied.  It is None unless status is CYCLIC.
    """
    status: GraphStatus
    cycle_path: list[int] | None = None
    processed_count: int = 0

    @property
    def has_cycle(self) -> bool:
        return self.status is GraphStatus.CYCLIC

    @property
    def is_empty(self) -> bool:
        return self.status is GraphStatus.EMPTY

    @classmethod
    def empty(cls) -> DetectionResult:
        return cls(status=GraphStatus.EMPTY)

    @classmethod
    def acyclic(cls, processed_count: int) -> DetectionResult:
        return cls(status=GraphStatus.ACYCLIC, processed_count=processed_count)

    @classmethod
    def cyclic(cls, path: list[int], processed_count: int) -> DetectionResult:
        if not path:
            raise ValueError("A cyclic result needs a non-empty witness path")
        return cls(
            status=GraphStatus.CYCLIC,
            cycle_path=path,
            processed_count=processed_count,
        )


def detect_cycle(matrix: AdjacencyMatrix) -> DetectionResult:
    """Classify *matrix* as empty, acyclic or cyclic.

    For a cyclic graph the result carries one witness cycle.  The input
    is never modified, so repeated calls give identical results.
    """
    n = matrix.num_vertices
    if n == 0:
        log.debug("empty graph, nothing to detect")
        return DetectionResult.empty()

    kp = run_kahn(matrix)
    log.debug("kahn pass processed %d of %d vertices", kp.processed_count, n)

    if kp.complete:
        return DetectionResult.acyclic(kp.processed_count)

    path = _reconstruct_cycle(matrix, kp)
    log.debug("witness cycle: %s", path)
    if not is_closed_walk(matrix, path):
        raise RuntimeError(f"Reconstructed path {path} is not a cycle")
    return DetectionResult.cyclic(path, kp.processed_count)


def _reconstruct_cycle(matrix: AdjacencyMatrix, kp: KahnPass) -> list[int]:
    n = matrix.num_vertices
    rows = matrix.rows
    stuck = [deg > 0 for deg in kp.in_degree]
    parent = list(kp.parent)

    for u in range(n):
        if not stuck[u]:
            continue
        for v in range(n):
            if rows[u][v] == 1 and stuck[v]:
                parent[v] = u

    cycle_node = stuck.index(True)

    visited = [False] * n
    cur: int | None = cycle_node
    while cur is not None and not visited[cur]:
        visited[cur] = True
        cur = parent[cur]
    if cur is None:
        # every stuck vertex has a stuck predecessor, so this means the
        # kahn pass and the matrix disagree
        raise RuntimeError(f"Parent walk from {cycle_node} left the stuck set")

    start = cur
    trail = [start]
    cur = parent[start]
    while cur != start:
        trail.append(cur)  # type: ignore[arg-type]
        cur = parent[cur]  # type: ignore[index]

    return [start] + trail[:0:-1]


def is_closed_walk(matrix: AdjacencyMatrix, path: Sequence[int]) -> bool:
    """True if *path* is non-empty and every step, including the wrap
    from the last vertex back to the first, is an edge of *matrix*."""
    if not path:
        return False
    n = matrix.num_vertices
    if any(not 0 <= v < n for v in path):
        return False
    return all(
        matrix.has_edge(path[i], path[(i + 1) % len(path)])
        for i in range(len(path))
    )
