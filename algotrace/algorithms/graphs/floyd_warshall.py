"""
floyd_warshall.py — Floyd–Warshall (All-Pairs Shortest Paths)
===============================================================
The signature "matrix algorithm".  Every step carries the full N×N
distance matrix so the UI can render it as a live grid.

Structure:
  for k in vertices:          ← "intermediate" vertex
      for i in vertices:
          for j in vertices:
              if dist[i][k] + dist[k][j] < dist[i][j]:
                  dist[i][j] = dist[i][k] + dist[k][j]

Yields a step for:
  1. Initialisation (adjacency → matrix)
  2. The start of each k-round
  3. Every (k, i, j) triple evaluated, then its update / no-update outcome
  4. The end of each k-round
  5. Final: matrix, next-hop matrix and the negative-cycle flag

This is the densest trace in the system (O(V³) steps) on purpose.
"""

from typing import Generator, List, Optional

from algotrace.algorithms.step import StepKind, Tracer, TraceStep
from algotrace.graph import Graph, samples


PSEUDOCODE: List[str] = [
    "def FloydWarshall(graph):",                   # 0
    "    dist ← adjacency matrix",                 # 1
    "    next ← initialise next-hop matrix",       # 2
    "    for k in 0 … n-1:",                       # 3
    "        for i in 0 … n-1:",                   # 4
    "            for j in 0 … n-1:",               # 5
    "                if dist[i][k]+dist[k][j]",    # 6
    "                      < dist[i][j]:",         # 7
    "                    dist[i][j] = …",          # 8
    "                    next[i][j] = next[i][k]", # 9
    "    return dist, next",                       # 10
]


def floyd_warshall(graph: Optional[Graph] = None) -> Generator[TraceStep, None, None]:
    if graph is None:
        graph = samples.floyd_warshall_graph()

    t = Tracer()
    n = graph.num_vertices
    dist = graph.distance_matrix()
    nxt: List[List[Optional[int]]] = [
        [j if i == j or graph.has_edge(i, j) else None for j in range(n)]
        for i in range(n)
    ]

    def data(k: Optional[int] = None, i: Optional[int] = None, j: Optional[int] = None) -> dict:
        return {"distances": dist, "next": nxt, "k": k, "current_i": i, "current_j": j}

    yield t.snapshot(StepKind.INIT, "Initialise the distance matrix from the edge weights.", data(), line=1)

    for k in range(n):
        yield t.snapshot(
            StepKind.CONSIDER, f"Round k={k}: allow paths through vertex {k}.",
            data(k), highlights=(k,), line=3,
        )
        for i in range(n):
            for j in range(n):
                via = dist[i][k] + dist[k][j]
                yield t.snapshot(
                    StepKind.COMPARE,
                    f"dist[{i}][{k}] + dist[{k}][{j}] = {via} vs dist[{i}][{j}] = {dist[i][j]}.",
                    data(k, i, j), highlights=((i, j),), comparisons=((i, k), (k, j)), line=6,
                )
                if via < dist[i][j]:
                    dist[i][j] = via
                    nxt[i][j] = nxt[i][k]
                    yield t.snapshot(
                        StepKind.UPDATE, f"Improved: dist[{i}][{j}] = {via} through {k}.",
                        data(k, i, j), highlights=((i, j),), updated=True, line=8,
                    )
                else:
                    yield t.snapshot(
                        StepKind.NO_UPDATE, f"No improvement for dist[{i}][{j}].",
                        data(k, i, j), highlights=((i, j),), updated=False, line=7,
                    )
        yield t.snapshot(
            StepKind.UPDATE, f"Round k={k} complete.",
            data(k), highlights=(k,), round_complete=True, line=3,
        )

    negative_cycle = any(dist[v][v] < 0 for v in range(n))
    description = (
        "Negative cycle detected: some vertex reaches itself with negative cost."
        if negative_cycle else "Floyd–Warshall complete: all-pairs shortest distances computed."
    )
    yield t.snapshot(StepKind.COMPLETE, description, data(), negative_cycle=negative_cycle, line=10)


# ---------------------------------------------------------------------------
def reconstruct_path(nxt: List[List[Optional[int]]], i: int, j: int) -> List[int]:
    """Follow the next-hop matrix from i to j.  Empty if j is unreachable."""
    if nxt[i][j] is None:
        return []
    path = [i]
    while i != j:
        i = nxt[i][j]
        path.append(i)
        if len(path) > len(nxt) + 1:
            return []
    return path
