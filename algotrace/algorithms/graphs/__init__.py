"""
graphs/
-------
Traversal, shortest-path, MST and ordering algorithms over the
demonstration graphs in algotrace.graph.samples.
"""

from algotrace.algorithms.graphs.dfs              import dfs
from algotrace.algorithms.graphs.bfs              import bfs
from algotrace.algorithms.graphs.dijkstra         import dijkstra
from algotrace.algorithms.graphs.bellman_ford     import bellman_ford
from algotrace.algorithms.graphs.floyd_warshall   import floyd_warshall
from algotrace.algorithms.graphs.kruskal          import kruskal
from algotrace.algorithms.graphs.prim             import prim
from algotrace.algorithms.graphs.topological_sort import topological_sort

__all__ = [
    "dfs",
    "bfs",
    "dijkstra",
    "bellman_ford",
    "floyd_warshall",
    "kruskal",
    "prim",
    "topological_sort",
]
