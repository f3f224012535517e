"""cyclewitness: directed cycle detection with a witness path."""

from cyclewitness.graph import (
    AdjacencyMatrix,
    DetectionResult,
    GraphStatus,
    MalformedMatrixError,
    detect_cycle,
)

__all__ = [
    "AdjacencyMatrix",
    "DetectionResult",
    "GraphStatus",
    "MalformedMatrixError",
    "detect_cycle",
]

__version__ = "0.1.0"
