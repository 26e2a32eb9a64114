"""
graph.py — Demonstration Graph Container
=========================================
Small fixed-size graphs over vertices 0 … n-1.  Graph generators read
this object; they never mutate it.

Responsibilities:
  1. Edge insertion with range checks        (add_edge)
  2. Adjacency queries                       (neighbours, weight, in_degrees, …)
  3. Import from adjacency matrix / edge list
  4. Snapshots for step payloads             (adjacency_matrix, distance_matrix, edge_list)
  5. Serialisation round-trip                (to_dict / from_dict)

Design decisions:
  - Adjacency is kept as an n×n matrix of weights (None = no edge).
    Neighbour queries therefore come back in ascending vertex order,
    which is the visiting order every traversal trace relies on.
  - `edges` keeps insertion order.  Bellman-Ford relaxes and Kruskal
    tie-breaks in that order.
  - Parallel edges are not supported; re-adding an edge overwrites it.
"""

import math
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from algotrace.errors import InvalidInputError
from algotrace.graph.edge import Edge


class Graph:
    """
    Attributes:
        num_vertices : Vertex count; vertices are 0 … num_vertices-1.
        directed     : Graph-level directedness.
        weighted     : Whether weights are meaningful.  Unweighted graphs store
                       every edge with weight 1.
        edges        : Edge objects in insertion order.
        _matrix      : [u][v] → weight or None.
    """

    def __init__(self, num_vertices: int, directed: bool = False, weighted: bool = True):
        if num_vertices < 0:
            raise InvalidInputError(f"Vertex count must be non-negative, got {num_vertices}")
        self.num_vertices: int        = num_vertices
        self.directed:     bool       = directed
        self.weighted:     bool       = weighted
        self.edges:        List[Edge] = []
        self._matrix: List[List[Optional[float]]] = [[None] * num_vertices for _ in range(num_vertices)]

    # ==================================================================
    # EDGES
    # ==================================================================
    def add_edge(self, source: int, target: int, weight: float = 1) -> Edge:
        for v in (source, target):
            if not 0 <= v < self.num_vertices:
                raise InvalidInputError(f"Vertex {v} out of range 0…{self.num_vertices - 1}")
        if not self.weighted:
            weight = 1
        edge = Edge(source, target, weight, directed=self.directed)
        self.edges = [e for e in self.edges if not e.connects(source, target)]
        self.edges.append(edge)
        self._matrix[source][target] = weight
        if not self.directed:
            self._matrix[target][source] = weight
        return edge

    def has_edge(self, u: int, v: int) -> bool:
        return self._matrix[u][v] is not None

    def weight(self, u: int, v: int) -> Optional[float]:
        return self._matrix[u][v]

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    @property
    def vertices(self) -> range:
        return range(self.num_vertices)

    def neighbours(self, u: int) -> List[int]:
        """Vertices reachable from u over one edge, ascending."""
        return [v for v, w in enumerate(self._matrix[u]) if w is not None]

    def weighted_neighbours(self, u: int) -> Iterator[Tuple[int, float]]:
        for v, w in enumerate(self._matrix[u]):
            if w is not None:
                yield v, w

    def in_degrees(self) -> List[int]:
        degrees = [0] * self.num_vertices
        for u in self.vertices:
            for v in self.neighbours(u):
                degrees[v] += 1
        return degrees

    # ==================================================================
    # SNAPSHOTS
    # ==================================================================
    def adjacency_matrix(self) -> List[List[float]]:
        """0/weight matrix (0 = no edge), the shape the UI draws."""
        return [[0 if w is None else w for w in row] for row in self._matrix]

    def distance_matrix(self) -> List[List[float]]:
        """Floyd-Warshall seed: 0 on the diagonal, inf where no edge."""
        n = self.num_vertices
        dist = [[math.inf] * n for _ in range(n)]
        for u in range(n):
            dist[u][u] = 0
            for v, w in self.weighted_neighbours(u):
                if u != v:
                    dist[u][v] = w
        return dist

    def edge_list(self) -> List[Tuple[int, int, float]]:
        return [e.as_tuple() for e in self.edges]

    # ==================================================================
    # IMPORT
    # ==================================================================
    @classmethod
    def from_adjacency_matrix(
        cls,
        matrix: Sequence[Sequence[float]],
        directed: bool = False,
        weighted: bool = False,
    ) -> "Graph":
        """
        Non-zero, finite entries are edges.  For undirected graphs only
        the upper triangle is read.
        """
        n = len(matrix)
        if any(len(row) != n for row in matrix):
            raise InvalidInputError("Adjacency matrix must be square")
        g = cls(n, directed=directed, weighted=weighted)
        for u in range(n):
            for v in range(n) if directed else range(u + 1, n):
                w = matrix[u][v]
                if u != v and w != 0 and not math.isinf(w):
                    g.add_edge(u, v, w if weighted else 1)
        return g

    @classmethod
    def from_edge_list(
        cls,
        num_vertices: int,
        edges: Sequence[Sequence[float]],
        directed: bool = False,
    ) -> "Graph":
        """Edges as (source, target) or (source, target, weight) tuples."""
        g = cls(num_vertices, directed=directed, weighted=True)
        for edge in edges:
            if len(edge) not in (2, 3):
                raise InvalidInputError(f"Edge must be (source, target[, weight]), got {edge!r}")
            g.add_edge(int(edge[0]), int(edge[1]), edge[2] if len(edge) == 3 else 1)
        return g

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> Dict:
        return {
            "num_vertices": self.num_vertices,
            "directed":     self.directed,
            "weighted":     self.weighted,
            "edges":        [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Graph":
        try:
            g = cls(int(data["num_vertices"]), directed=data.get("directed", False), weighted=data.get("weighted", True))
            for e in data.get("edges", []):
                edge = Edge.from_dict(e)
                g.add_edge(edge.source, edge.target, edge.weight)
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidInputError(f"Malformed graph: {exc}") from exc
        return g

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph({self.num_vertices} vertices, {len(self.edges)} edges, {kind})"
