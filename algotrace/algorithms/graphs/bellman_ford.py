"""
bellman_ford.py — Bellman–Ford Algorithm
=========================================
The single-source shortest-path algorithm that handles NEGATIVE edge
weights and detects negative cycles.

Structure:
  • Up to V-1 rounds relaxing every edge in input order.  A round that
    relaxes nothing ends the rounds early.
  • One more "detector" pass over every edge.  If any edge still relaxes,
    the terminal step carries negative_cycle=True.  Nothing is raised;
    the trace stays playable.

Edges whose source is still at ∞ are skipped (there is nothing to
relax from).  Undirected graphs relax each edge in both directions.

Data:
  • "edges"      – edge list being relaxed
  • "distances"  – current tentative distances
  • "previous"   – predecessor of each vertex
  • "round"      – current round number (1-indexed, 0 before the first)
"""

import math
from typing import Generator, List, Optional, Tuple

from algotrace.algorithms.graphs.dijkstra import reconstruct_path
from algotrace.algorithms.step import StepKind, Tracer, TraceStep
from algotrace.graph import Graph, samples


PSEUDOCODE: List[str] = [
    "def BellmanFord(graph, source):",             # 0
    "    dist ← [∞]·V; dist[source] ← 0",          # 1
    "    for i in 1 … |V|-1:",                     # 2
    "        for each edge (u, v, w):",            # 3
    "            if dist[u] + w < dist[v]:",       # 4
    "                dist[v] ← dist[u] + w",       # 5
    "        if nothing relaxed: break",           # 6
    "    for each edge (u, v, w):",                # 7
    "        if dist[u] + w < dist[v]:",           # 8
    "            return NEGATIVE CYCLE",           # 9
    "    return dist",                             # 10
]


def bellman_ford(graph: Optional[Graph] = None, source: int = 0) -> Generator[TraceStep, None, None]:
    if graph is None:
        graph = samples.bellman_ford_graph()

    t = Tracer()
    n = graph.num_vertices
    edges: List[Tuple[int, int, float]] = graph.edge_list()
    if not graph.directed:
        edges = edges + [(v, u, w) for u, v, w in edges]

    dist: List[float]         = [math.inf] * n
    prev: List[Optional[int]] = [None] * n
    dist[source] = 0
    state = {"round": 0}

    def data(edge: Optional[Tuple[int, int, float]] = None) -> dict:
        return {
            "edges":        edges,
            "distances":    dist,
            "previous":     prev,
            "round":        state["round"],
            "current_edge": list(edge) if edge else None,
        }

    yield t.snapshot(
        StepKind.INIT, f"Initialise: dist[{source}] = 0, every other vertex ∞.",
        data(), highlights=(source,), line=1,
    )

    for rnd in range(1, n):
        state["round"] = rnd
        yield t.snapshot(StepKind.CONSIDER, f"Round {rnd} of {n - 1}: relax every edge.", data(), line=2)

        relaxed = False
        for edge in edges:
            u, v, w = edge
            if dist[u] == math.inf:
                continue
            candidate = dist[u] + w
            yield t.snapshot(
                StepKind.COMPARE, f"Edge {u}→{v} ({w}): {dist[u]} + {w} = {candidate} vs dist[{v}] = {dist[v]}.",
                data(edge), highlights=(u, v), comparisons=(u, v), line=4,
            )
            if candidate < dist[v]:
                dist[v] = candidate
                prev[v] = u
                relaxed = True
                yield t.snapshot(
                    StepKind.UPDATE, f"Relaxed: dist[{v}] = {candidate} via {u}.",
                    data(edge), highlights=(u, v), updated=True, line=5,
                )

        if not relaxed:
            yield t.snapshot(
                StepKind.DECIDE, f"No edge relaxed in round {rnd}: distances are final, stop early.",
                data(), line=6,
            )
            break

    yield t.snapshot(StepKind.CONSIDER, "Final pass: check every edge for a negative cycle.", data(), line=7)

    negative_cycle = False
    for edge in edges:
        u, v, w = edge
        if dist[u] == math.inf:
            continue
        yield t.snapshot(
            StepKind.COMPARE, f"Check {u}→{v} ({w}): {dist[u] + w} vs dist[{v}] = {dist[v]}.",
            data(edge), highlights=(u, v), comparisons=(u, v), line=8,
        )
        if dist[u] + w < dist[v]:
            negative_cycle = True
            yield t.snapshot(
                StepKind.DECIDE, f"Edge {u}→{v} can still be relaxed: the graph has a negative cycle.",
                data(edge), highlights=(u, v), negative_cycle=True, line=9,
            )
            break

    final = data()
    if negative_cycle:
        description = "Negative cycle detected: shortest distances are undefined."
    else:
        final["paths"] = {v: reconstruct_path(prev, v) for v in range(n) if dist[v] < math.inf}
        description = f"Bellman–Ford complete. Distances from {source}: {dist}."
    yield t.snapshot(StepKind.COMPLETE, description, final, negative_cycle=negative_cycle, line=10)
