"""
samples.py — Bundled Demonstration Graphs
==========================================
Each factory returns a fresh Graph so no two runs share state.
"""

import math

from algotrace.graph.graph import Graph

INF = math.inf


TRAVERSAL_MATRIX = (
    (0, 1, 1, 0, 0),
    (1, 0, 0, 1, 1),
    (1, 0, 0, 0, 1),
    (0, 1, 0, 0, 1),
    (0, 1, 1, 1, 0),
)

# 0 off the diagonal means "no edge"
SHORTEST_PATH_MATRIX = (
    (0, 4, 2, 0, 0),
    (4, 0, 1, 5, 0),
    (2, 1, 0, 8, 10),
    (0, 5, 8, 0, 2),
    (0, 0, 10, 2, 0),
)

BELLMAN_FORD_EDGES = (
    (0, 1, 4), (0, 2, 2), (1, 2, 1), (1, 3, 5),
    (2, 3, 8), (2, 4, 10), (3, 4, 2),
)

FLOYD_WARSHALL_MATRIX = (
    (0,   3,   INF, 7),
    (8,   0,   2,   INF),
    (5,   INF, 0,   1),
    (2,   INF, INF, 0),
)

MST_EDGES = (
    (0, 1, 2), (0, 3, 6), (1, 2, 3), (1, 3, 8),
    (1, 4, 5), (2, 4, 7), (3, 4, 9),
)

HAMILTONIAN_MATRIX = (
    (0, 1, 0, 1, 0),
    (1, 0, 1, 1, 1),
    (0, 1, 0, 0, 1),
    (1, 1, 0, 0, 1),
    (0, 1, 1, 1, 0),
)

DAG_MATRIX = (
    (0, 1, 1, 0, 0, 0),
    (0, 0, 0, 1, 1, 0),
    (0, 0, 0, 0, 1, 1),
    (0, 0, 0, 0, 0, 1),
    (0, 0, 0, 0, 0, 1),
    (0, 0, 0, 0, 0, 0),
)


def traversal_graph() -> Graph:
    """5-vertex undirected graph for DFS / BFS."""
    return Graph.from_adjacency_matrix(TRAVERSAL_MATRIX)


def shortest_path_graph() -> Graph:
    """5-vertex undirected weighted graph for Dijkstra."""
    return Graph.from_adjacency_matrix(SHORTEST_PATH_MATRIX, weighted=True)


def bellman_ford_graph() -> Graph:
    """5-vertex directed weighted graph, same weights as the Dijkstra sample."""
    return Graph.from_edge_list(5, BELLMAN_FORD_EDGES, directed=True)


def floyd_warshall_graph() -> Graph:
    """4-vertex directed weighted graph."""
    return Graph.from_adjacency_matrix(FLOYD_WARSHALL_MATRIX, directed=True, weighted=True)


def mst_graph() -> Graph:
    """5-vertex undirected weighted graph shared by Kruskal and Prim."""
    return Graph.from_edge_list(5, MST_EDGES)


def dag() -> Graph:
    """6-vertex DAG for topological sort."""
    return Graph.from_adjacency_matrix(DAG_MATRIX, directed=True)


def hamiltonian_graph() -> Graph:
    """5-vertex undirected graph with a Hamiltonian path from vertex 0."""
    return Graph.from_adjacency_matrix(HAMILTONIAN_MATRIX)
