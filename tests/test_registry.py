from __future__ import annotations

import pytest

from algotrace import Recorder
from algotrace.algorithms import (
    CATEGORIES,
    REGISTRY,
    Difficulty,
    algorithms_by_category,
    algorithms_by_tag,
    get_algorithm,
    list_algorithms,
    require_algorithm,
)
from algotrace.algorithms.step import StepKind
from algotrace.errors import AlgoTraceError, InvalidInputError, UnknownAlgorithmError
from algotrace.graph import Graph


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------
def test_registry_covers_every_family() -> None:
    assert {info.category for info in REGISTRY.values()} == set(CATEGORIES)
    assert len(algorithms_by_category("sorting")) == 6
    assert len(algorithms_by_category("searching")) == 7
    assert len(algorithms_by_category("graph")) == 8
    assert len(algorithms_by_category("dp")) == 8
    assert len(algorithms_by_category("backtracking")) == 4


def test_lookup_helpers() -> None:
    assert get_algorithm("nope") is None
    assert require_algorithm("lcs").name == "Longest Common Subsequence"
    assert list_algorithms() == list(REGISTRY.values())
    assert [a.id for a in list_algorithms("searching")][0] == "linear-search"
    assert {a.id for a in algorithms_by_tag("mst")} == {"kruskal", "prim"}


def test_unknown_id_fails_fast() -> None:
    with pytest.raises(UnknownAlgorithmError) as exc:
        Recorder("bogo-sort")

    assert str(exc.value) == "Unknown algorithm: bogo-sort"
    assert isinstance(exc.value, ValueError)
    assert isinstance(exc.value, AlgoTraceError)


def test_info_to_dict_is_flat_and_has_no_callable() -> None:
    d = REGISTRY["heap-sort"].to_dict()

    assert d["difficulty"] == "Medium"
    assert d["time_complexity"] == "O(n log n)"
    assert d["space_complexity"] == "O(1)"
    assert "fn" not in d and "sample" not in d
    assert d["reference_code"]


def test_metadata_values_are_well_formed() -> None:
    for info in REGISTRY.values():
        assert isinstance(info.difficulty, Difficulty)
        assert info.time_complexity.startswith("O(")
        assert info.space_complexity.startswith("O(")
        assert info.reference_code


# ---------------------------------------------------------------------------
# Contract shared by every registered algorithm
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("algo_id", list(REGISTRY))
def test_every_algorithm_honours_the_step_contract(algo_id) -> None:
    rec = Recorder(algo_id)
    steps = rec.generate_steps()

    assert steps
    assert steps[0].kind is StepKind.INIT
    assert steps[-1].kind is StepKind.COMPLETE
    assert steps[-1].completed
    assert [s.id for s in steps] == list(range(len(steps)))
    assert rec.get_algorithm_info() is REGISTRY[algo_id]

    lines = len(rec.get_algorithm_info().reference_code)
    for step in steps:
        assert 0 <= step.metadata.get("line", 0) < lines


@pytest.mark.parametrize("algo_id", list(REGISTRY))
def test_generate_steps_is_idempotent(algo_id) -> None:
    rec = Recorder(algo_id)
    assert rec.generate_steps() == rec.generate_steps()


@pytest.mark.parametrize("algo_id", list(REGISTRY))
def test_export_is_json_ready(algo_id) -> None:
    import json

    exported = Recorder(algo_id).export()
    text = json.dumps(exported)

    assert exported["algorithm"] == algo_id
    assert "Infinity" not in text


def test_metrics_count_step_kinds() -> None:
    rec = Recorder("bubble-sort", array=[5, 3, 8, 1])
    steps = rec.generate_steps()
    metrics = rec.get_metrics()

    assert metrics.total_steps == len(steps)
    assert metrics.comparisons == 6
    assert metrics.swaps == sum(1 for s in steps if s.kind is StepKind.SWAP)
    assert metrics.algo_name == "Bubble Sort"


def test_metrics_outcome_carries_terminal_flags() -> None:
    rec = Recorder("binary-search", array=[1, 3, 5, 7, 9], target=7)
    rec.generate_steps()

    assert rec.get_metrics().outcome == {"target": 7, "found": True, "index": 3}


# ---------------------------------------------------------------------------
# Parameter validation
# ---------------------------------------------------------------------------
@pytest.mark.parametrize(
    "algo_id, params",
    [
        ("bubble-sort", {"array": "5,3,1"}),
        ("bubble-sort", {"array": [1, "two"]}),
        ("bubble-sort", {"array": [True, False]}),
        ("bubble-sort", {"array": [1, float("nan")]}),
        ("bubble-sort", {"size": 3}),
        ("binary-search", {"target": "x"}),
        ("fibonacci", {"n": -1}),
        ("fibonacci", {"n": 2.5}),
        ("fibonacci", {"mode": "sideways"}),
        ("coin-change", {"coins": [0, 1]}),
        ("coin-change", {"amount": -3}),
        ("knapsack", {"items": [[1, 2, 3]]}),
        ("knapsack", {"items": [[1.5, 2]]}),
        ("lcs", {"first": 42}),
        ("matrix-chain", {"dimensions": [10]}),
        ("subset-sum", {"numbers": [1, -2]}),
        ("topological-sort", {"method": "bfs"}),
        ("dfs", {"start": 9}),
        ("dijkstra", {"source": -1}),
        ("dijkstra", {"graph": [[0, 1], [1, 0]]}),
        ("bfs", {"graph": {"num_vertices": 2, "edges": [{"source": 0, "target": 5}]}}),
        ("prim", {"graph": {"num_vertices": 2, "edges": [{"source": 0, "target": 1, "weight": "w"}]}}),
        ("subset-sum", {"target": None}),
        ("subset-sum", {"numbers": None}),
        ("dfs", {"start": None}),
        ("dijkstra", {"destination": 9}),
        ("topological-sort", {"graph": {"num_vertices": 2, "edges": [{"source": 0, "target": 1}]}}),
        ("hamiltonian-path", {"start": 5}),
        ("sudoku-solver", {"board": [[0] * 3] * 3}),
        ("sudoku-solver", {"board": [[0] * 4] * 3 + [[0] * 3]}),
        ("sudoku-solver", {"board": [[5, 0, 0, 0]] + [[0] * 4] * 3}),
        ("sudoku-solver", {"board": [[1, 0, 0, 1]] + [[0] * 4] * 3}),
        ("sudoku-solver", {"board": [[1, 0, 0, 0], [0, 1, 0, 0]] + [[0] * 4] * 2}),
        ("binary-search-tree", {"operation": "rotate"}),
        ("binary-search-tree", {"value": "x"}),
        ("b-tree-search", {"order": 1}),
        ("b-tree-search", {"operation": "delete"}),
        ("trie-search", {"word": ""}),
        ("trie-search", {"words": ["ok", 3]}),
    ],
)
def test_bad_params_fail_fast(algo_id, params) -> None:
    with pytest.raises(InvalidInputError):
        Recorder(algo_id, **params)


def test_graph_params_accept_dicts() -> None:
    graph = {"num_vertices": 3, "edges": [{"source": 0, "target": 1}, {"source": 1, "target": 2}]}
    rec = Recorder("bfs", graph=graph, start=2)

    assert isinstance(rec.params["graph"], Graph)
    assert rec.generate_steps()[-1].metadata["order"] == [2, 1, 0]


def test_vertex_checked_against_supplied_graph() -> None:
    with pytest.raises(InvalidInputError):
        Recorder("bfs", graph=Graph(2), start=2)


def test_custom_parameters_flow_to_the_generator() -> None:
    steps = Recorder("coin-change", coins=[1, 3, 4], amount=6).generate_steps()
    assert steps[-1].data["min_coins"] == 2


def test_null_is_accepted_only_where_the_default_is_null() -> None:
    assert Recorder("binary-search", target=None).params["target"] is None
    assert Recorder("dijkstra", destination=None).params["destination"] is None

    with pytest.raises(InvalidInputError, match="target must not be null"):
        Recorder("subset-sum", target=None)


def test_topological_sort_requires_a_directed_graph() -> None:
    undirected = Graph.from_edge_list(3, [(0, 1), (1, 2)])

    with pytest.raises(InvalidInputError, match="directed"):
        Recorder("topological-sort", graph=undirected)
    directed = Graph.from_edge_list(3, [(0, 1)], directed=True)
    assert Recorder("topological-sort", graph=directed).params["graph"] is directed


def test_sudoku_board_is_normalised() -> None:
    board = ((1, 2, 3, 4), (3, 4, 1, 2), (2, 1, 4, 3), (4, 3, 2, 0))
    rec = Recorder("sudoku-solver", board=board)

    assert rec.params["board"][3] == [4, 3, 2, 0]
    assert rec.generate_steps()[-1].data["board"][3] == [4, 3, 2, 1]


# ---------------------------------------------------------------------------
# Step budget
# ---------------------------------------------------------------------------
def test_step_budget_stops_long_traces() -> None:
    rec = Recorder("n-queens", n=8)

    with pytest.raises(InvalidInputError, match="more than 10 steps"):
        rec.generate_steps(max_steps=10)
    assert rec.steps == []
    assert rec.get_metrics() is None


def test_step_budget_admits_traces_that_fit() -> None:
    rec = Recorder("bubble-sort", array=[2, 1])
    steps = rec.generate_steps()

    assert rec.generate_steps(max_steps=len(steps)) == steps
    with pytest.raises(InvalidInputError):
        rec.generate_steps(max_steps=len(steps) - 1)
