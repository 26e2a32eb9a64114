"""
edge.py — Graph Edge
====================
One weighted connection between two vertices.  Edges are immutable
values: re-adding an edge to a Graph replaces it rather than editing it,
so the copies that end up in step payloads can never drift.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Edge:
    """
    Attributes:
        source   : Tail vertex.
        target   : Head vertex.
        weight   : Cost, 1 when the graph is unweighted.  Negative weights
                   are allowed for the Bellman-Ford and Floyd-Warshall demos.
        directed : False means the edge is walkable from either end.
    """

    source:   int
    target:   int
    weight:   float = 1
    directed: bool  = False

    def connects(self, a: int, b: int) -> bool:
        """True if this edge links a to b (either way when undirected)."""
        if self.directed:
            return (self.source, self.target) == (a, b)
        return {self.source, self.target} == {a, b}

    def as_tuple(self) -> Tuple[int, int, float]:
        return (self.source, self.target, self.weight)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Edge":
        return cls(data["source"], data["target"], data.get("weight", 1), data.get("directed", False))

    def __repr__(self) -> str:
        arrow = "→" if self.directed else "↔"
        return f"Edge({self.source} {arrow} {self.target}, w={self.weight})"
