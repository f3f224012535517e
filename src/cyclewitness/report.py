"""Text rendering for matrices and detection results.

Formats are fixed so that demo output and check output read the same
way in a terminal and in test assertions.
"""
from __future__ import annotations

from typing import Sequence

from cyclewitness.graph.cycle_detector import DetectionResult, GraphStatus
from cyclewitness.graph.matrix import AdjacencyMatrix

RULE = "-" * 25


def format_matrix(matrix: AdjacencyMatrix) -> str:
    """Render *matrix* one row per line, entries separated by spaces."""
    lines = ["Graph Adjacency Matrix:"]
    for row in matrix.rows:
        lines.append(" ".join(str(bit) for bit in row))
    lines.append(RULE)
    return "\n".join(lines)


def format_cycle(path: Sequence[int]) -> str:
    """Arrow-join *path* and close it back to its first vertex.

    [1, 3] -> "1 -> 3 -> 1"
    """
    if not path:
        raise ValueError("Cannot format an empty cycle")
    return " -> ".join(str(v) for v in [*path, path[0]])


def format_result(result: DetectionResult) -> str:
    if result.status is GraphStatus.EMPTY:
        return "Graph is empty."
    if result.status is GraphStatus.ACYCLIC:
        return "Result (BFS): Graph is ACYCLIC."
    return (
        "Result (BFS): Graph is CYCLIC.\n"
        f"Vertices in a cycle: {format_cycle(result.cycle_path or [])}"
    )
