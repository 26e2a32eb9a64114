"""
hamiltonian_path.py — Hamiltonian Path
=======================================
Extends a path from the start vertex one edge at a time, trying the
neighbours of its last vertex in ascending order.  A neighbour already
on the path is rejected; a dead end removes the last vertex and tries
the next neighbour one level up.  Stops at the first path that covers
every vertex.

Data:
  • "graph"          – adjacency matrix
  • "path"           – vertices on the current path, in order
  • "path_edges"     – [u, v] pairs along the path
  • "current_vertex" – last vertex of the path
  • "backtracks"     – vertices removed so far
"""

from typing import Generator, List, Optional

from algotrace.algorithms.step import StepKind, Tracer, TraceStep
from algotrace.graph import Graph, samples


PSEUDOCODE: List[str] = [
    "def extend(path):",                            # 0
    "    if |path| == V: return True",              # 1
    "    for v in neighbours(last(path)):",         # 2
    "        if v in path: continue",               # 3
    "        path.append(v)",                       # 4
    "        if extend(path): return True",         # 5
    "        path.pop()",                           # 6
    "    return False",                             # 7
]


def hamiltonian_path(graph: Optional[Graph] = None, start: int = 0) -> Generator[TraceStep, None, None]:
    if graph is None:
        graph = samples.hamiltonian_graph()

    t = Tracer()
    n = graph.num_vertices
    matrix = graph.adjacency_matrix()
    path: List[int] = [start]
    counter = {"backtracks": 0}

    def data() -> dict:
        return {
            "graph":          matrix,
            "path":           path,
            "path_edges":     [[u, v] for u, v in zip(path, path[1:])],
            "current_vertex": path[-1] if path else None,
            "backtracks":     counter["backtracks"],
        }

    def extend() -> Generator[TraceStep, None, bool]:
        if len(path) == n:
            return True
        u = path[-1]
        for v in graph.neighbours(u):
            if v in path:
                yield t.snapshot(
                    StepKind.NO_UPDATE, f"{v} is already on the path.",
                    data(), highlights=(u,), comparisons=(v,), line=3,
                )
                continue
            path.append(v)
            yield t.snapshot(StepKind.UPDATE, f"Walk {u}→{v}: path {path}.", data(), highlights=(u, v), line=4)
            found = yield from extend()
            if found:
                return True
            path.pop()
            counter["backtracks"] += 1
            yield t.snapshot(
                StepKind.BACKTRACK, f"Dead end after {v}: step back to {u}.",
                data(), highlights=(u, v), line=6,
            )
        return False

    yield t.snapshot(
        StepKind.INIT, f"Look for a path through all {n} vertices starting at {start}.",
        data(), highlights=(start,), line=0,
    )
    found = yield from extend()

    final = data()
    final["found"] = found
    description = f"Hamiltonian path: {path}." if found else f"No Hamiltonian path starts at {start}."
    yield t.snapshot(
        StepKind.COMPLETE, description, final,
        highlights=tuple(path) if found else (), found=found, line=1,
    )
