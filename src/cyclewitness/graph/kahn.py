"""A single pass of Kahn's algorithm (BFS with in-degree tracking).

Both cycle detection and topological ordering start from the same
pass, so they live here once:

  1.  Compute in-degree for every vertex by scanning the matrix column
      by column.
  2.  Seed a FIFO queue with every vertex whose in-degree is 0, in
      ascending vertex order.
  3.  Pop a vertex u, record it in the order.  For every successor v
      (ascending): decrement in_degree[v], set parent[v] = u, and
      enqueue v when its in-degree drops to exactly 0.
  4.  Stop when the queue is empty.  If the order holds every vertex
      the graph is a DAG; otherwise the vertices left with positive
      in-degree are stuck behind a cycle.

parent[v] is overwritten on every relaxed edge into v, so only the last
predecessor processed survives.  It is not a predecessor tree.  After
the pass it only points at processed vertices; cycle reconstruction
relaxes the stuck edges the same way before walking it.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from cyclewitness.graph.matrix import AdjacencyMatrix


@dataclass(slots=True)
class KahnPass:
    """State left behind by one run of Kahn's algorithm."""
    order: list[int]               # vertices in dequeue order
    in_degree: list[int]           # residual in-degrees after the pass
    parent: list[int | None]       # last relaxed predecessor, or None

    @property
    def processed_count(self) -> int:
        return len(self.order)

    @property
    def complete(self) -> bool:
        """True if every vertex was processed (the graph is acyclic)."""
        return len(self.order) == len(self.in_degree)

    def stuck_vertices(self) -> list[int]:
        """Vertices that never reached in-degree 0, ascending."""
        return [v for v, deg in enumerate(self.in_degree) if deg > 0]


def run_kahn(matrix: AdjacencyMatrix) -> KahnPass:
    n = matrix.num_vertices
    rows = matrix.rows

    in_deg = [0] * n
    for i in range(n):
        for j in range(n):
            if rows[i][j] == 1:
                in_deg[j] += 1

    parent: list[int | None] = [None] * n
    q: deque[int] = deque(v for v in range(n) if in_deg[v] == 0)

    order: list[int] = []
    while q:
        u = q.popleft()
        order.append(u)
        row = rows[u]
        for v in range(n):
            if row[v] == 1:
                in_deg[v] -= 1
                parent[v] = u
                if in_deg[v] == 0:
                    q.append(v)

    return KahnPass(order=order, in_degree=in_deg, parent=parent)
