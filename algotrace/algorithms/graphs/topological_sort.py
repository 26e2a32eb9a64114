"""
topological_sort.py — Topological Sort (DFS finish stack / Kahn)
=================================================================
Two interchangeable methods over a directed graph:

  • "dfs"  (default) – depth-first search; a vertex is pushed onto the
                       finish stack once all its successors are done, and
                       popping the stack yields the order.  A grey→grey
                       (back) edge means a cycle.
  • "kahn"           – repeatedly remove a vertex of in-degree 0 (FIFO);
                       fewer than V removed vertices means a cycle.

A cycle is reported on the terminal step as has_cycle=True with an
empty "order"; whatever was produced before the cycle blocked progress
is kept under "partial_order".
"""

from collections import deque
from typing import Generator, List, Optional

from algotrace.algorithms.step import StepKind, Tracer, TraceStep
from algotrace.graph import Graph, samples


PSEUDOCODE: List[str] = [
    "def TopoSortDFS(graph):",                      # 0
    "    for u in V: if unvisited: visit(u)",       # 1
    "    visit(u): mark u in progress",             # 2
    "        for v in successors(u):",              # 3
    "            if v in progress: CYCLE",          # 4
    "            if v unvisited: visit(v)",         # 5
    "        mark u done; stack.push(u)",           # 6
    "    order ← pop every vertex off stack",       # 7
    "def TopoSortKahn(graph):",                     # 8
    "    queue ← vertices with in-degree 0",        # 9
    "    while queue: u ← pop; order.add(u)",       # 10
    "        for v in successors(u):",              # 11
    "            indeg[v] -= 1; if 0: push v",      # 12
    "    if |order| < V: CYCLE",                    # 13
]

METHODS = ("dfs", "kahn")

_WHITE, _GREY, _BLACK = 0, 1, 2


def topological_sort(graph: Optional[Graph] = None, method: str = "dfs") -> Generator[TraceStep, None, None]:
    if graph is None:
        graph = samples.dag()
    if method == "kahn":
        return _kahn(graph)
    return _dfs(graph)


# ---------------------------------------------------------------------------
# DFS finish-time stack
# ---------------------------------------------------------------------------
def _dfs(graph: Graph) -> Generator[TraceStep, None, None]:
    t = Tracer()
    n = graph.num_vertices
    matrix = graph.adjacency_matrix()
    colour:  List[int] = [_WHITE] * n
    visited: List[int] = []
    stack:   List[int] = []
    order:   List[int] = []
    cycle = {"found": False}

    def data(current: Optional[int] = None) -> dict:
        return {"graph": matrix, "visited": visited, "stack": stack, "order": order, "current_node": current}

    def visit(u: int) -> Generator[TraceStep, None, None]:
        colour[u] = _GREY
        visited.append(u)
        yield t.snapshot(StepKind.VISIT, f"Visit vertex {u}.", data(u), highlights=(u,), line=2)

        for v in graph.neighbours(u):
            if colour[v] == _GREY:
                cycle["found"] = True
                yield t.snapshot(
                    StepKind.DECIDE, f"Edge {u}→{v} leads back to a vertex in progress: cycle.",
                    data(u), highlights=(u, v), has_cycle=True, line=4,
                )
            elif colour[v] == _WHITE:
                yield t.snapshot(StepKind.CONSIDER, f"Follow edge {u}→{v}.", data(u), highlights=(u, v), line=5)
                yield from visit(v)

        colour[u] = _BLACK
        stack.append(u)
        yield t.snapshot(
            StepKind.BACKTRACK, f"All successors of {u} finished: push {u} onto the stack.",
            data(u), highlights=(u,), line=6,
        )

    yield t.snapshot(StepKind.INIT, "Start DFS-based topological sort.", data(), method="dfs", line=0)

    for s in graph.vertices:
        if colour[s] == _WHITE:
            yield from visit(s)

    if cycle["found"]:
        partial = list(reversed(stack))
        final = data()
        final["partial_order"] = partial
        yield t.snapshot(
            StepKind.COMPLETE, "The graph has a cycle: no topological order exists.",
            final, has_cycle=True, method="dfs",
        )
        return

    while stack:
        u = stack.pop()
        order.append(u)
        yield t.snapshot(StepKind.UPDATE, f"Pop {u} from the stack → position {len(order) - 1}.", data(u), highlights=(u,), line=7)

    yield t.snapshot(
        StepKind.COMPLETE, f"Topological order: {order}.",
        data(), highlights=order, has_cycle=False, method="dfs",
    )


# ---------------------------------------------------------------------------
# Kahn in-degree queue
# ---------------------------------------------------------------------------
def _kahn(graph: Graph) -> Generator[TraceStep, None, None]:
    t = Tracer()
    n = graph.num_vertices
    matrix = graph.adjacency_matrix()
    in_degree = graph.in_degrees()
    queue = deque(v for v in graph.vertices if in_degree[v] == 0)
    order: List[int] = []

    def data(current: Optional[int] = None) -> dict:
        return {"graph": matrix, "in_degree": in_degree, "queue": list(queue), "order": order, "current_node": current}

    yield t.snapshot(
        StepKind.INIT, f"In-degrees {in_degree}; enqueue every source vertex {list(queue)}.",
        data(), highlights=tuple(queue), method="kahn", line=9,
    )

    while queue:
        u = queue.popleft()
        order.append(u)
        yield t.snapshot(StepKind.VISIT, f"Dequeue {u} → position {len(order) - 1}.", data(u), highlights=(u,), line=10)

        for v in graph.neighbours(u):
            in_degree[v] -= 1
            if in_degree[v] == 0:
                queue.append(v)
                description = f"Remove edge {u}→{v}: in-degree[{v}] = 0, enqueue {v}."
            else:
                description = f"Remove edge {u}→{v}: in-degree[{v}] = {in_degree[v]}."
            yield t.snapshot(StepKind.UPDATE, description, data(u), highlights=(u, v), line=12)

    if len(order) < n:
        final = data()
        final["partial_order"] = list(order)
        final["order"] = []
        yield t.snapshot(
            StepKind.COMPLETE, f"Only {len(order)} of {n} vertices ordered: the graph has a cycle.",
            final, has_cycle=True, method="kahn", line=13,
        )
        return

    yield t.snapshot(
        StepKind.COMPLETE, f"Topological order: {order}.",
        data(), highlights=order, has_cycle=False, method="kahn", line=13,
    )
