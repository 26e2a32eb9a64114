"""
kruskal.py — Kruskal's Minimum Spanning Tree
=============================================
Edges are sorted ascending by weight (stable, so equal weights keep
their input order) and accepted whenever they join two different
union-find components.  Stops once V-1 edges are accepted.

Yields a step for:
  1. The unsorted edge list
  2. The sorted edge list
  3. Every edge considered (component roots compared)
  4. Its accept / reject outcome
  5. Final: MST edges and total weight
"""

from typing import Generator, List, Optional

from algotrace.algorithms.graphs.union_find import DisjointSet
from algotrace.algorithms.step import StepKind, Tracer, TraceStep
from algotrace.graph import Graph, samples


PSEUDOCODE: List[str] = [
    "def Kruskal(graph):",                          # 0
    "    sort edges by weight",                     # 1
    "    for (u, v, w) in edges:",                  # 2
    "        if find(u) ≠ find(v):",                # 3
    "            union(u, v); mst.add((u, v, w))",  # 4
    "        if |mst| = V-1: break",                # 5
    "    return mst",                               # 6
]


def kruskal(graph: Optional[Graph] = None) -> Generator[TraceStep, None, None]:
    if graph is None:
        graph = samples.mst_graph()

    t = Tracer()
    n = graph.num_vertices
    edges = graph.edge_list()
    ordered: List = []
    mst: List = []
    ds = DisjointSet(n)
    totals = {"weight": 0}

    def data(edge=None) -> dict:
        return {
            "edges":        edges,
            "sorted_edges": ordered,
            "mst_edges":    mst,
            "total_weight": totals["weight"],
            "parent":       ds.parent,
            "current_edge": list(edge) if edge else None,
        }

    yield t.snapshot(StepKind.INIT, f"{n} vertices, {len(edges)} edges; every vertex is its own component.", data(), line=0)

    ordered.extend(sorted(edges, key=lambda e: e[2]))
    yield t.snapshot(StepKind.UPDATE, "Sort edges by weight (ties keep input order).", data(), line=1)

    for edge in ordered:
        if len(mst) == n - 1:
            break
        u, v, w = edge
        ru, rv = ds.find(u), ds.find(v)
        yield t.snapshot(
            StepKind.COMPARE, f"Edge {u}–{v} ({w}): find({u}) = {ru}, find({v}) = {rv}.",
            data(edge), highlights=(u, v), comparisons=(ru, rv), line=3,
        )
        if ds.union(u, v):
            mst.append(list(edge))
            totals["weight"] += w
            yield t.snapshot(
                StepKind.UPDATE, f"Accept {u}–{v} ({w}): it joins two components. Total = {totals['weight']}.",
                data(edge), highlights=(u, v), accepted=True, line=4,
            )
        else:
            yield t.snapshot(
                StepKind.NO_UPDATE, f"Reject {u}–{v} ({w}): both ends are already connected (cycle).",
                data(edge), highlights=(u, v), accepted=False, line=3,
            )

    spanning = len(mst) == max(n - 1, 0)
    description = (
        f"MST complete: {len(mst)} edges, total weight {totals['weight']}."
        if spanning else f"Graph is disconnected: spanning forest of weight {totals['weight']}."
    )
    yield t.snapshot(StepKind.COMPLETE, description, data(), spanning=spanning, line=6)
