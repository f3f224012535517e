"""Fixed example graphs used by the demo command."""
from __future__ import annotations

from cyclewitness.graph.matrix import AdjacencyMatrix

# edge 3 -> 1 closes the cycle 1 -> 3 -> 1
CYCLIC = AdjacencyMatrix([
    [0, 1, 0, 0],
    [0, 0, 1, 1],
    [0, 0, 0, 0],
    [0, 1, 0, 0],
])

ACYCLIC = AdjacencyMatrix([
    [0, 1, 1, 0],
    [0, 0, 0, 1],
    [0, 0, 0, 1],
    [0, 0, 0, 0],
])

# edge 2 -> 0 closes the cycle 0 -> 1 -> 2 -> 0; 3 and 4 hang off it
CYCLIC_WITH_TAIL = AdjacencyMatrix([
    [0, 1, 0, 0, 0],
    [0, 0, 1, 0, 0],
    [1, 0, 0, 1, 0],
    [0, 0, 0, 0, 1],
    [0, 0, 0, 0, 0],
])

SAMPLES: dict[str, AdjacencyMatrix] = {
    "Cyclic Graph": CYCLIC,
    "Acyclic Graph": ACYCLIC,
    "A different Cyclic Graph": CYCLIC_WITH_TAIL,
}
