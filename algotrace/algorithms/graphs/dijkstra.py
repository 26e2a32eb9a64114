"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm (array variant)
=================================================================
O(V²): each round linearly scans the unvisited vertices for the
smallest tentative distance (strict `<`, so the first one found in
index order wins ties).  No priority queue.

Yields a step at:
  1. Initialise distances (source = 0, everything else ∞)
  2. Each vertex selected  →  VISIT
  3. Each relaxation attempt on an unvisited neighbour  →  COMPARE
  4. Each successful relaxation  →  UPDATE
  5. No reachable vertex left  →  early stop
  6. Final: distances, predecessors, the path to every reached vertex and
     the path to `destination` (the last vertex unless given)

Unreachable vertices keep distance ∞.  Dijkstra requires non-negative
weights; negative edges are not rejected but the result is then
meaningless.
"""

import math
from typing import Generator, List, Optional

from algotrace.algorithms.step import StepKind, Tracer, TraceStep
from algotrace.graph import Graph, samples


PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source):",                 # 0
    "    dist ← [∞]·V; dist[source] ← 0",           # 1
    "    repeat V times:",                          # 2
    "        u ← unvisited vertex with min dist",   # 3
    "        if dist[u] = ∞: break",                # 4
    "        mark u visited",                       # 5
    "        for (v, w) in neighbours(u):",         # 6
    "            if dist[u] + w < dist[v]:",        # 7
    "                dist[v] ← dist[u] + w",        # 8
    "                prev[v] ← u",                  # 9
    "    return dist, prev",                        # 10
]


def dijkstra(
    graph: Optional[Graph] = None,
    source: int = 0,
    destination: Optional[int] = None,
) -> Generator[TraceStep, None, None]:
    if graph is None:
        graph = samples.shortest_path_graph()
    if destination is None:
        destination = graph.num_vertices - 1

    t = Tracer()
    n = graph.num_vertices
    matrix = graph.adjacency_matrix()
    dist:    List[float]         = [math.inf] * n
    prev:    List[Optional[int]] = [None] * n
    done:    List[bool]          = [False] * n
    visited: List[int]           = []
    dist[source] = 0

    def data(current: Optional[int] = None) -> dict:
        return {"graph": matrix, "distances": dist, "visited": visited, "current_node": current, "previous": prev}

    yield t.snapshot(
        StepKind.INIT, f"Initialise: dist[{source}] = 0, every other vertex ∞.",
        data(), highlights=(source,), line=1,
    )

    for _ in range(n):
        u, best = -1, math.inf
        for v in range(n):
            if not done[v] and dist[v] < best:
                u, best = v, dist[v]

        if u == -1:
            yield t.snapshot(
                StepKind.DECIDE, "Every remaining vertex is unreachable (distance ∞): stop.",
                data(), line=4,
            )
            break

        done[u] = True
        visited.append(u)
        yield t.snapshot(
            StepKind.VISIT, f"Select vertex {u}: smallest tentative distance {dist[u]}.",
            data(u), highlights=(u,), line=5,
        )

        for v, w in graph.weighted_neighbours(u):
            if done[v]:
                continue
            candidate = dist[u] + w
            yield t.snapshot(
                StepKind.COMPARE, f"Relax {u}→{v}: {dist[u]} + {w} = {candidate} vs dist[{v}] = {dist[v]}.",
                data(u), highlights=(u, v), comparisons=(u, v), line=7,
            )
            if candidate < dist[v]:
                dist[v] = candidate
                prev[v] = u
                yield t.snapshot(
                    StepKind.UPDATE, f"Shorter path found: dist[{v}] = {candidate} via {u}.",
                    data(u), highlights=(u, v), updated=True, line=8,
                )

    paths = {v: reconstruct_path(prev, v) for v in range(n) if dist[v] < math.inf}
    final = data()
    final["paths"] = paths
    final["shortest_path"] = paths.get(destination, [])
    yield t.snapshot(
        StepKind.COMPLETE, f"Dijkstra complete. Distances from {source}: {dist}.",
        final, highlights=visited, destination=destination, reachable=destination in paths, line=10,
    )


# ---------------------------------------------------------------------------
def reconstruct_path(prev: List[Optional[int]], target: int) -> List[int]:
    path: List[int] = []
    cur: Optional[int] = target
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path
