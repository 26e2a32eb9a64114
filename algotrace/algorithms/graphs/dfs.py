"""
dfs.py — Depth-First Search
============================
Recursive traversal from a start vertex.  Neighbours are explored in
ascending vertex order (adjacency-matrix column order).

Yields a step for:
  1. Initialisation
  2. Each vertex visit (pre-order)
  3. Each unvisited neighbour found, before recursing into it
  4. Each backtrack out of a finished vertex (post-order)
  5. Final: discovery order and DFS tree edges

Data:
  • "graph"        – adjacency matrix
  • "visited"      – vertices in discovery order
  • "stack"        – current recursion stack
  • "current_node" – vertex being expanded
  • "path"         – DFS tree edges [u, v] discovered so far
"""

from typing import Generator, List, Optional

from algotrace.algorithms.step import StepKind, Tracer, TraceStep
from algotrace.graph import Graph, samples


PSEUDOCODE: List[str] = [
    "def DFS(graph, u):",                           # 0
    "    visited.add(u)",                           # 1
    "    for v in neighbours(u):",                  # 2
    "        if v not in visited:",                 # 3
    "            DFS(graph, v)",                    # 4
    "    // backtrack",                             # 5
]


def dfs(graph: Optional[Graph] = None, start: int = 0) -> Generator[TraceStep, None, None]:
    if graph is None:
        graph = samples.traversal_graph()

    t = Tracer()
    matrix = graph.adjacency_matrix()
    visited: List[int] = []
    stack:   List[int] = []
    tree:    List[List[int]] = []

    def data(current: Optional[int] = None) -> dict:
        return {"graph": matrix, "visited": visited, "stack": stack, "current_node": current, "path": tree}

    def visit(u: int) -> Generator[TraceStep, None, None]:
        visited.append(u)
        stack.append(u)
        yield t.snapshot(StepKind.VISIT, f"Visit vertex {u}.", data(u), highlights=(u,), line=1)

        for v in graph.neighbours(u):
            if v in visited:
                continue
            tree.append([u, v])
            yield t.snapshot(
                StepKind.CONSIDER, f"Found unvisited neighbour {v} of {u}: go deeper.",
                data(u), highlights=(u, v), line=4,
            )
            yield from visit(v)

        stack.pop()
        parent = stack[-1] if stack else None
        where = f"back to {parent}" if parent is not None else "out of the search"
        yield t.snapshot(
            StepKind.BACKTRACK, f"All neighbours of {u} explored: backtrack {where}.",
            data(parent), highlights=(u,), line=5,
        )

    yield t.snapshot(StepKind.INIT, f"Start depth-first search from vertex {start}.", data(), highlights=(start,), line=0)
    yield from visit(start)
    yield t.snapshot(
        StepKind.COMPLETE, f"DFS complete. Discovery order: {visited}.",
        data(), highlights=visited, order=list(visited),
    )
