from __future__ import annotations

import pytest

from algotrace.algorithms import REGISTRY
from algotrace.app import create_app


@pytest.fixture
def client():
    app = create_app({"TESTING": True, "MAX_INPUT_SIZE": 16})
    with app.test_client() as client:
        yield client


def _run(client, algorithm, **params):
    return client.post("/api/run", json={"algorithm": algorithm, "params": params})


# ---------------------------------------------------------------------------
# Registry routes
# ---------------------------------------------------------------------------
def test_list_algorithms(client) -> None:
    resp = client.get("/api/algorithms")

    assert resp.status_code == 200
    ids = [a["id"] for a in resp.get_json()["algorithms"]]
    assert ids == list(REGISTRY)


def test_list_algorithms_by_category(client) -> None:
    resp = client.get("/api/algorithms?category=backtracking")

    ids = [a["id"] for a in resp.get_json()["algorithms"]]
    assert ids == ["n-queens", "subset-sum", "sudoku-solver", "hamiltonian-path"]


def test_unknown_category_is_a_bad_request(client) -> None:
    resp = client.get("/api/algorithms?category=geometry")

    assert resp.status_code == 400
    assert "geometry" in resp.get_json()["error"]


def test_single_algorithm_card(client) -> None:
    card = client.get("/api/algorithms/topological-sort").get_json()

    assert card["name"] == "Topological Sort"
    assert card["choices"] == {"method": ["dfs", "kahn"]}
    assert card["reference_code"]


def test_unknown_algorithm_is_not_found(client) -> None:
    resp = client.get("/api/algorithms/bogo-sort")

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Unknown algorithm: bogo-sort"}


# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------
def test_run_returns_the_full_trace(client) -> None:
    resp = _run(client, "bubble-sort", array=[5, 3, 8, 1])
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["info"]["id"] == "bubble-sort"
    assert body["params"] == {"array": [5, 3, 8, 1]}
    assert body["steps"][0]["kind"] == "init"
    assert body["steps"][-1]["array"] == [1, 3, 5, 8]
    assert body["steps"][-1]["completed"] is True
    assert body["metrics"]["total_steps"] == len(body["steps"])
    assert body["metrics"]["comparisons"] == 6


def test_run_with_defaults(client) -> None:
    body = _run(client, "dijkstra").get_json()

    assert body["steps"][-1]["data"]["distances"] == [0, 3, 2, 8, 10]
    assert body["params"]["graph"]["num_vertices"] == 5


def test_run_with_graph_dict(client) -> None:
    graph = {
        "num_vertices": 3,
        "directed": True,
        "edges": [{"source": 0, "target": 1, "weight": 4}, {"source": 1, "target": 2, "weight": -1}],
    }
    body = _run(client, "bellman-ford", graph=graph).get_json()

    assert body["steps"][-1]["data"]["distances"] == [0, 4, 3]


def test_run_infinite_values_are_json_safe(client) -> None:
    body = _run(client, "coin-change", coins=[2], amount=3).get_json()

    assert body["steps"][-1]["data"]["dp_table"][3] == "∞"


def test_run_tree_search(client) -> None:
    body = _run(client, "binary-search-tree", operation="delete", value=50).get_json()

    assert body["info"]["choices"] == {"operation": ["search", "insert", "delete"]}
    assert body["metrics"]["outcome"] == {"deleted": True}
    assert body["steps"][-1]["data"]["keys"] == [20, 30, 40, 60, 70, 80]


def test_run_sudoku(client) -> None:
    board = [[1, 2, 3, 4], [3, 4, 1, 2], [2, 1, 4, 3], [4, 3, 2, 0]]
    body = _run(client, "sudoku-solver", board=board).get_json()

    assert body["steps"][-1]["data"]["board"][3] == [4, 3, 2, 1]
    assert body["steps"][-1]["data"]["current_cell"] is None


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"params": {}},
        {"algorithm": "bubble-sort", "params": [1, 2]},
        {"algorithm": "bubble-sort", "params": {"array": "nope"}},
        {"algorithm": "bubble-sort", "params": {"array": list(range(17))}},
        {"algorithm": "fibonacci", "params": {"n": 17}},
        {"algorithm": "dfs", "params": {"graph": {"num_vertices": 40, "edges": []}}},
        {"algorithm": "n-queens", "params": {"n": 13}},
        {"algorithm": "subset-sum", "params": {"target": None}},
        {"algorithm": "floyd-warshall", "params": {"graph": {"num_vertices": 13, "directed": True, "edges": []}}},
        {"algorithm": "hamiltonian-path", "params": {"graph": {"num_vertices": 11, "edges": []}}},
        {"algorithm": "topological-sort", "params": {"graph": {"num_vertices": 2, "edges": []}}},
        {"algorithm": "trie-search", "params": {"words": ["a" * 17]}},
    ],
)
def test_run_rejects_bad_input(client, payload) -> None:
    resp = client.post("/api/run", json=payload)

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_run_rejects_non_object_body(client) -> None:
    assert client.post("/api/run", json=[1, 2, 3]).status_code == 400


def test_run_unknown_algorithm(client) -> None:
    resp = _run(client, "bogo-sort")

    assert resp.status_code == 404


# ---------------------------------------------------------------------------
# Stepping
# ---------------------------------------------------------------------------
def test_step_before_run_is_a_bad_request(client) -> None:
    assert client.post("/api/step/next").status_code == 400


def test_step_navigation(client) -> None:
    total = len(_run(client, "binary-search", array=[1, 3, 5, 7, 9], target=7).get_json()["steps"])

    body = client.post("/api/step/next").get_json()
    assert body["moved"] is True
    assert body["current_step"] == 1
    assert body["step"]["id"] == 1
    assert body["total_steps"] == total

    body = client.post("/api/step/prev").get_json()
    assert body["current_step"] == 0

    body = client.post("/api/step/prev").get_json()
    assert body["moved"] is False
    assert body["current_step"] == 0

    body = client.post("/api/step/end").get_json()
    assert body["finished"] is True
    assert body["step"]["kind"] == "complete"
    assert body["step"]["metadata"]["found"] is True

    body = client.post("/api/step/next").get_json()
    assert body["moved"] is False
    assert body["current_step"] == total - 1

    body = client.post("/api/step/rewind").get_json()
    assert body["current_step"] == 0
    assert body["finished"] is False


def test_step_goto(client) -> None:
    _run(client, "fibonacci", n=5)

    body = client.post("/api/step/goto", json={"step": 3}).get_json()
    assert body["moved"] is True
    assert body["step"]["id"] == 3

    body = client.post("/api/step/goto", json={"step": 999}).get_json()
    assert body["moved"] is False
    assert body["current_step"] == 3


@pytest.mark.parametrize("payload", [{}, {"step": "3"}, {"step": True}])
def test_step_goto_needs_an_integer(client, payload) -> None:
    _run(client, "fibonacci", n=5)

    assert client.post("/api/step/goto", json=payload).status_code == 400


def test_step_seek_by_kind(client) -> None:
    steps = _run(client, "bubble-sort", array=[3, 1, 2]).get_json()["steps"]
    swaps = [s["id"] for s in steps if s["kind"] == "swap"]

    body = client.post("/api/step/seek", json={"kind": "swap"}).get_json()
    assert body["current_step"] == swaps[0]

    body = client.post("/api/step/seek", json={"kind": "init", "direction": "backward"}).get_json()
    assert body["moved"] is True
    assert body["current_step"] == 0

    assert client.post("/api/step/seek", json={"kind": "teleport"}).status_code == 400


def test_new_run_resets_the_cursor(client) -> None:
    _run(client, "lcs", first="AB", second="B")
    client.post("/api/step/end")
    _run(client, "lis", array=[3, 1, 2])

    state = client.get("/api/state").get_json()
    assert state["algorithm"] == "lis"
    assert state["current_step"] == 0


# ---------------------------------------------------------------------------
# Config and state
# ---------------------------------------------------------------------------
def test_speed_preset(client) -> None:
    body = client.post("/api/config/speed", json={"speed": "slow"}).get_json()

    assert body == {"speed": 1.0, "interval_ms": 1000.0}
    assert client.get("/api/state").get_json()["speed"] == "slow"


def test_speed_number(client) -> None:
    body = client.post("/api/config/speed", json={"speed": 4}).get_json()

    assert body["interval_ms"] == 250


@pytest.mark.parametrize("speed", ["warp", -1, 0, None, True])
def test_bad_speed_is_rejected(client, speed) -> None:
    assert client.post("/api/config/speed", json={"speed": speed}).status_code == 400


def test_initial_state(client) -> None:
    state = client.get("/api/state").get_json()

    assert state["algorithm"] is None
    assert state["params"] == {}
    assert state["speed"] == "medium"
    assert state["interval_ms"] == 400


def test_config_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("ALGOTRACE_MAX_INPUT_SIZE", "3")
    app = create_app({"TESTING": True})

    assert app.config["MAX_INPUT_SIZE"] == 3
    resp = app.test_client().post(
        "/api/run", json={"algorithm": "bubble-sort", "params": {"array": [4, 3, 2, 1]}}
    )
    assert resp.status_code == 400


def test_run_rejects_traces_over_the_step_budget() -> None:
    client = create_app({"TESTING": True, "MAX_STEPS": 20}).test_client()
    resp = client.post("/api/run", json={"algorithm": "n-queens", "params": {"n": 8}})

    assert resp.status_code == 400
    assert "steps" in resp.get_json()["error"]
    assert client.get("/api/state").get_json()["algorithm"] is None


def test_algorithm_limits_are_configurable() -> None:
    client = create_app({"TESTING": True, "ALGORITHM_LIMITS": {"bubble-sort": {"array": 2}}}).test_client()

    assert client.post("/api/run", json={"algorithm": "bubble-sort", "params": {"array": [2, 1]}}).status_code == 200
    resp = client.post("/api/run", json={"algorithm": "bubble-sort", "params": {"array": [3, 2, 1]}})
    assert resp.status_code == 400
    assert "array" in resp.get_json()["error"]
