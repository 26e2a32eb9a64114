"""
bfs.py — Breadth-First Search
==============================
FIFO queue seeded with the start vertex; level-order visit.

Yields a step for:
  1. Initialisation (start enqueued)
  2. Each dequeue (processing begins)
  3. Each neighbour enqueued
  4. Each vertex finished (processing ends)
  5. Final: visit order and hop distance of every reached vertex
"""

from collections import deque
from typing import Dict, Generator, List, Optional

from algotrace.algorithms.step import StepKind, Tracer, TraceStep
from algotrace.graph import Graph, samples


PSEUDOCODE: List[str] = [
    "def BFS(graph, start):",                       # 0
    "    queue ← [start]; visited ← {start}",       # 1
    "    while queue:",                             # 2
    "        u ← queue.popleft()",                  # 3
    "        for v in neighbours(u):",              # 4
    "            if v not in visited:",             # 5
    "                visited.add(v); queue.append(v)",  # 6
]


def bfs(graph: Optional[Graph] = None, start: int = 0) -> Generator[TraceStep, None, None]:
    if graph is None:
        graph = samples.traversal_graph()

    t = Tracer()
    matrix = graph.adjacency_matrix()
    queue = deque([start])
    visited:   List[int]      = [start]
    processed: List[int]      = []
    levels:    Dict[int, int] = {start: 0}

    def data(current: Optional[int] = None) -> dict:
        return {
            "graph":        matrix,
            "visited":      visited,
            "queue":        list(queue),
            "processed":    processed,
            "current_node": current,
            "levels":       levels,
        }

    yield t.snapshot(
        StepKind.INIT, f"Start breadth-first search: enqueue vertex {start}.",
        data(), highlights=(start,), line=1,
    )

    while queue:
        u = queue.popleft()
        yield t.snapshot(
            StepKind.VISIT, f"Dequeue vertex {u} (level {levels[u]}) and scan its neighbours.",
            data(u), highlights=(u,), line=3,
        )

        for v in graph.neighbours(u):
            if v in levels:
                continue
            levels[v] = levels[u] + 1
            visited.append(v)
            queue.append(v)
            yield t.snapshot(
                StepKind.UPDATE, f"Enqueue unvisited neighbour {v} of {u} (level {levels[v]}).",
                data(u), highlights=(u, v), line=6,
            )

        processed.append(u)
        yield t.snapshot(StepKind.BACKTRACK, f"Finished processing vertex {u}.", data(u), highlights=(u,), line=2)

    yield t.snapshot(
        StepKind.COMPLETE, f"BFS complete. Visit order: {visited}.",
        data(), highlights=visited, order=list(visited),
    )
