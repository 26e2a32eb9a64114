"""
graph/
-----
Demonstration graph model.  Public API:

    from algotrace.graph import Graph, Edge, samples
"""

from algotrace.graph.edge  import Edge
from algotrace.graph.graph import Graph
from algotrace.graph import samples

__all__ = [
    "Edge",
    "Graph",
    "samples",
]
