"""Graph representation and Kahn-based cycle detection."""

from cyclewitness.graph.cycle_detector import (
    DetectionResult,
    GraphStatus,
    detect_cycle,
    is_closed_walk,
)
from cyclewitness.graph.kahn import KahnPass, run_kahn
from cyclewitness.graph.matrix import AdjacencyMatrix, MalformedMatrixError
from cyclewitness.graph.topological import CyclicGraphError, topological_sort

__all__ = [
    "AdjacencyMatrix",
    "CyclicGraphError",
    "DetectionResult",
    "GraphStatus",
    "KahnPass",
    "MalformedMatrixError",
    "detect_cycle",
    "is_closed_walk",
    "run_kahn",
    "topological_sort",
]
