"""
prim.py — Prim's Minimum Spanning Tree (array variant)
=======================================================
Grows one tree from a start vertex.  Each round linearly scans every
(tree vertex, outside neighbour) pair for the globally cheapest edge:
tree vertices in the order they joined, neighbours ascending, strict
`<` so the first cheapest pair found wins.

One step per vertex added.  A disconnected graph stops early and the
terminal step carries disconnected=True.
"""

import math
from typing import Generator, List, Optional

from algotrace.algorithms.step import StepKind, Tracer, TraceStep
from algotrace.graph import Graph, samples


PSEUDOCODE: List[str] = [
    "def Prim(graph, start):",                      # 0
    "    tree ← [start]",                           # 1
    "    while |tree| < V:",                        # 2
    "        (u, v, w) ← min edge with u ∈ tree, v ∉ tree",  # 3
    "        if none: break",                       # 4
    "        tree.add(v); mst.add((u, v, w))",      # 5
    "    return mst",                               # 6
]


def prim(graph: Optional[Graph] = None, start: int = 0) -> Generator[TraceStep, None, None]:
    if graph is None:
        graph = samples.mst_graph()

    t = Tracer()
    n = graph.num_vertices
    matrix = graph.adjacency_matrix()
    tree: List[int] = [start]
    mst:  List[List[float]] = []
    totals = {"weight": 0}

    def data() -> dict:
        return {"graph": matrix, "tree": tree, "mst_edges": mst, "total_weight": totals["weight"]}

    yield t.snapshot(StepKind.INIT, f"Start the tree at vertex {start}.", data(), highlights=(start,), line=1)

    while len(tree) < n:
        best = None
        best_weight = math.inf
        members = set(tree)
        for u in tree:
            for v, w in graph.weighted_neighbours(u):
                if v not in members and w < best_weight:
                    best, best_weight = (u, v, w), w

        if best is None:
            break

        u, v, w = best
        tree.append(v)
        mst.append([u, v, w])
        totals["weight"] += w
        yield t.snapshot(
            StepKind.UPDATE, f"Cheapest crossing edge {u}–{v} ({w}): add vertex {v}. Total = {totals['weight']}.",
            data(), highlights=(u, v), line=5,
        )

    disconnected = len(tree) < n
    description = (
        f"Graph is disconnected: only {len(tree)} of {n} vertices reachable from {start}."
        if disconnected else f"MST complete: {len(mst)} edges, total weight {totals['weight']}."
    )
    yield t.snapshot(StepKind.COMPLETE, description, data(), disconnected=disconnected, line=6)
