"""Topological sort via Kahn's algorithm.

Kahn's ordering is breadth-first: sources come first, then vertices
whose only predecessors are those sources, and so on.  Ties are broken
by ascending vertex index, so the order is deterministic for a given
matrix.

The sort is built on the same pass as detect_cycle, so a matrix sorts
cleanly exactly when detect_cycle calls it acyclic.
"""
from __future__ import annotations

from cyclewitness.graph.cycle_detector import detect_cycle
from cyclewitness.graph.kahn import run_kahn
from cyclewitness.graph.matrix import AdjacencyMatrix


class CyclicGraphError(Exception):
    """Raised when topological sort encounters a cycle."""

    def __init__(self, remaining_vertices: list[int], cycle: list[int]) -> None:
        self.remaining_vertices = remaining_vertices
        self.cycle = cycle
        super().__init__(
            f"Cycle detected: {len(remaining_vertices)} vertex(es) could not "
            f"be ordered, e.g. " + " -> ".join(map(str, cycle + cycle[:1]))
        )


def topological_sort(matrix: AdjacencyMatrix) -> list[int]:
    """Return vertices so that every edge points forward in the list.

    Raises CyclicGraphError if the graph contains a cycle.
    """
    kp = run_kahn(matrix)
    if kp.complete:
        return kp.order

    cycle = detect_cycle(matrix).cycle_path or []
    raise CyclicGraphError(kp.stuck_vertices(), cycle)
