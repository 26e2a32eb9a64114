from __future__ import annotations

import heapq
import math
import random

import pytest

from algotrace.algorithms.graphs import (
    bellman_ford,
    bfs,
    dfs,
    dijkstra,
    floyd_warshall,
    kruskal,
    prim,
    topological_sort,
)
from algotrace.algorithms.graphs.floyd_warshall import reconstruct_path
from algotrace.algorithms.graphs.union_find import DisjointSet
from algotrace.algorithms.step import StepKind
from algotrace.graph import Graph, samples


def _reference_distances(graph: Graph, source: int) -> list:
    dist = [math.inf] * graph.num_vertices
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, w in graph.weighted_neighbours(u):
            if d + w < dist[v]:
                dist[v] = d + w
                heapq.heappush(heap, (dist[v], v))
    return dist


def _random_graph(seed: int, n: int = 7) -> Graph:
    rng = random.Random(seed)
    g = Graph(n)
    for u in range(n):
        for v in range(u + 1, n):
            if rng.random() < 0.4:
                g.add_edge(u, v, rng.randint(1, 9))
    return g


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------
def test_dfs_visits_depth_first_in_ascending_neighbour_order() -> None:
    steps = list(dfs())

    assert steps[0].kind is StepKind.INIT
    assert steps[-1].kind is StepKind.COMPLETE
    assert steps[-1].metadata["order"] == [0, 1, 3, 4, 2]
    assert steps[-1].data["path"] == [[0, 1], [1, 3], [3, 4], [4, 2]]


def test_dfs_backtracks_once_per_visited_vertex() -> None:
    steps = list(dfs())
    visits = [s for s in steps if s.kind is StepKind.VISIT]
    backtracks = [s for s in steps if s.kind is StepKind.BACKTRACK]

    assert len(visits) == len(backtracks) == 5
    assert steps[-1].data["stack"] == []


def test_bfs_visits_level_by_level() -> None:
    steps = list(bfs())
    last = steps[-1]

    assert last.metadata["order"] == [0, 1, 2, 3, 4]
    assert last.data["levels"] == {0: 0, 1: 1, 2: 1, 3: 2, 4: 2}
    assert last.data["processed"] == [0, 1, 2, 3, 4]
    assert last.data["queue"] == []


def test_bfs_from_other_start() -> None:
    last = list(bfs(start=4))[-1]
    assert last.metadata["order"] == [4, 1, 2, 3, 0]


# ---------------------------------------------------------------------------
# Shortest paths
# ---------------------------------------------------------------------------
def test_dijkstra_sample_distances() -> None:
    last = list(dijkstra())[-1]

    assert last.data["distances"] == [0, 3, 2, 8, 10]
    assert last.data["shortest_path"] == [0, 2, 1, 3, 4]
    assert last.data["paths"][1] == [0, 2, 1]


@pytest.mark.parametrize("seed", range(5))
def test_dijkstra_matches_reference(seed) -> None:
    g = _random_graph(seed)
    last = list(dijkstra(g, source=0))[-1]

    assert last.data["distances"] == _reference_distances(g, 0)


def test_dijkstra_stops_when_the_rest_is_unreachable() -> None:
    g = Graph(3)
    g.add_edge(0, 1, 2)
    steps = list(dijkstra(g))

    assert any(s.kind is StepKind.DECIDE for s in steps)
    assert steps[-1].data["distances"] == [0, 2, math.inf]
    assert steps[-1].to_dict()["data"]["distances"] == [0, 2, "∞"]
    assert steps[-1].data["shortest_path"] == []
    assert steps[-1].metadata["reachable"] is False


def test_dijkstra_path_to_chosen_destination() -> None:
    last = list(dijkstra(destination=1))[-1]

    assert last.data["shortest_path"] == [0, 2, 1]
    assert last.metadata["destination"] == 1
    assert last.metadata["reachable"] is True


def test_dijkstra_destination_defaults_to_last_vertex() -> None:
    last = list(dijkstra(source=4))[-1]

    assert last.metadata["destination"] == 4
    assert last.data["shortest_path"] == [4]


def test_dijkstra_update_steps_are_flagged() -> None:
    for step in dijkstra():
        if step.kind is StepKind.UPDATE:
            assert step.metadata["updated"] is True


def test_bellman_ford_sample_distances() -> None:
    last = list(bellman_ford())[-1]

    assert last.data["distances"] == [0, 4, 2, 9, 11]
    assert last.metadata["negative_cycle"] is False
    assert last.data["paths"][4] == [0, 1, 3, 4]


def test_bellman_ford_handles_negative_edges() -> None:
    g = Graph.from_edge_list(4, [(0, 1, 4), (0, 2, 5), (2, 1, -3), (1, 3, 2)], directed=True)
    last = list(bellman_ford(g))[-1]

    assert last.data["distances"] == [0, 2, 5, 4]
    assert last.metadata["negative_cycle"] is False


def test_bellman_ford_flags_negative_cycle() -> None:
    g = Graph.from_edge_list(3, [(0, 1, 1), (1, 2, -1), (2, 1, -1)], directed=True)
    steps = list(bellman_ford(g))

    assert steps[-1].kind is StepKind.COMPLETE
    assert steps[-1].metadata["negative_cycle"] is True
    assert "paths" not in steps[-1].data
    assert any(s.kind is StepKind.DECIDE and s.metadata.get("negative_cycle") for s in steps)


def test_floyd_warshall_sample_matrix() -> None:
    last = list(floyd_warshall())[-1]

    assert last.data["distances"] == [
        [0, 3, 5, 6],
        [5, 0, 2, 3],
        [3, 6, 0, 1],
        [2, 5, 7, 0],
    ]
    assert last.metadata["negative_cycle"] is False
    assert reconstruct_path(last.data["next"], 0, 3) == [0, 1, 2, 3]


def test_floyd_warshall_reports_unreachable_pairs() -> None:
    g = Graph(2, directed=True)
    g.add_edge(0, 1, 5)
    last = list(floyd_warshall(g))[-1]

    assert last.data["distances"] == [[0, 5], [math.inf, 0]]
    assert reconstruct_path(last.data["next"], 1, 0) == []


def test_floyd_warshall_flags_negative_cycle() -> None:
    g = Graph.from_edge_list(2, [(0, 1, 1), (1, 0, -3)], directed=True)
    last = list(floyd_warshall(g))[-1]

    assert last.metadata["negative_cycle"] is True


# ---------------------------------------------------------------------------
# Minimum spanning trees
# ---------------------------------------------------------------------------
def test_kruskal_and_prim_agree_on_sample() -> None:
    k = list(kruskal())[-1]
    p = list(prim())[-1]

    assert k.data["total_weight"] == p.data["total_weight"] == 16
    assert len(k.data["mst_edges"]) == len(p.data["mst_edges"]) == 4
    assert k.metadata["spanning"] is True
    assert p.metadata["disconnected"] is False


@pytest.mark.parametrize("seed", range(5))
def test_kruskal_and_prim_agree_on_random_connected_graphs(seed) -> None:
    g = _random_graph(seed)
    for v in range(1, g.num_vertices):
        if not g.has_edge(v - 1, v):
            g.add_edge(v - 1, v, 10)

    assert list(kruskal(g))[-1].data["total_weight"] == list(prim(g))[-1].data["total_weight"]


def test_kruskal_rejects_cycle_edges() -> None:
    g = Graph.from_edge_list(4, [(0, 1, 1), (1, 2, 2), (0, 2, 3), (2, 3, 4)])
    steps = list(kruskal(g))
    rejected = [s for s in steps if s.kind is StepKind.NO_UPDATE]

    assert rejected
    assert all(s.metadata["accepted"] is False for s in rejected)


def test_spanning_forest_on_disconnected_graph() -> None:
    g = Graph.from_edge_list(4, [(0, 1, 1), (2, 3, 2)])

    assert list(kruskal(g))[-1].metadata["spanning"] is False
    assert list(prim(g))[-1].metadata["disconnected"] is True


def test_disjoint_set() -> None:
    ds = DisjointSet(4)

    assert ds.union(0, 1)
    assert ds.union(2, 3)
    assert not ds.union(1, 0)
    assert ds.find(0) == ds.find(1)
    assert ds.find(1) != ds.find(2)


# ---------------------------------------------------------------------------
# Topological sort
# ---------------------------------------------------------------------------
def _respects_edges(graph: Graph, order: list) -> bool:
    position = {v: i for i, v in enumerate(order)}
    return all(position[e.source] < position[e.target] for e in graph.edges)


@pytest.mark.parametrize("method", ["dfs", "kahn"])
def test_topological_order_respects_every_edge(method) -> None:
    g = samples.dag()
    last = list(topological_sort(g, method=method))[-1]

    assert last.metadata["has_cycle"] is False
    assert sorted(last.data["order"]) == list(range(6))
    assert _respects_edges(g, last.data["order"])


def test_dfs_topological_order_on_sample() -> None:
    assert list(topological_sort())[-1].data["order"] == [0, 2, 1, 4, 3, 5]


@pytest.mark.parametrize("method", ["dfs", "kahn"])
def test_topological_sort_flags_cycles(method) -> None:
    g = Graph.from_edge_list(3, [(0, 1), (1, 2), (2, 0)], directed=True)
    steps = list(topological_sort(g, method=method))

    assert steps[-1].kind is StepKind.COMPLETE
    assert steps[-1].metadata["has_cycle"] is True
    assert steps[-1].data["order"] == []
    assert "partial_order" in steps[-1].data


# ---------------------------------------------------------------------------
# Shared contract
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("algorithm", [dfs, bfs, dijkstra, bellman_ford, floyd_warshall, kruskal, prim, topological_sort])
def test_graph_traces_have_sequential_ids_and_one_terminal_step(algorithm) -> None:
    steps = list(algorithm())

    assert [s.id for s in steps] == list(range(len(steps)))
    assert steps[0].kind is StepKind.INIT
    assert [s.completed for s in steps].count(True) == 1
    assert steps[-1].completed


def test_graph_input_is_not_mutated() -> None:
    g = samples.shortest_path_graph()
    before = g.to_dict()
    list(dijkstra(g))
    list(bellman_ford(g))
    assert g.to_dict() == before
