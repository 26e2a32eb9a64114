from __future__ import annotations

import math

from algotrace.algorithms.step import ArrayTracer, StepKind, Tracer, to_jsonable


def test_to_jsonable_converts_infinity_enums_and_keys() -> None:
    payload = {1: [math.inf, -math.inf, 2.5], "kind": StepKind.SWAP, "seen": {3, 1}}

    assert to_jsonable(payload) == {"1": ["∞", "-∞", 2.5], "kind": "swap", "seen": [1, 3]}


def test_array_tracer_stamps_monotonic_ids_and_copies_array() -> None:
    t = ArrayTracer([3, 1, 2])
    first = t.snapshot(StepKind.INIT, "start")
    t.swap(0, 1)
    second = t.snapshot(StepKind.UPDATE, "swapped", swapping=(0, 1))

    assert (first.id, second.id) == (0, 1)
    assert first.array == (3, 1, 2)
    assert second.array == (1, 3, 2)
    assert second.swapping == (0, 1)


def test_settle_holds_back_the_last_index_until_complete() -> None:
    t = ArrayTracer([1, 2, 3])
    t.settle(2, 1, 0)

    assert len(t.sorted) == 2
    step = t.complete("done")
    assert step.kind is StepKind.COMPLETE
    assert step.completed
    assert step.sorted == (0, 1, 2)


def test_marked_overrides_sorted_set() -> None:
    t = ArrayTracer([5, 6, 7])
    t.settle(0)

    step = t.snapshot(StepKind.COMPLETE, "found", marked=(2,))
    assert step.sorted == (2,)
    assert t.sorted == {0}


def test_tracer_deep_copies_payload() -> None:
    t = Tracer()
    table = [[0, 0], [0, 0]]
    before = t.snapshot(StepKind.INIT, "empty", {"dp_table": table})
    table[1][1] = 7
    after = t.snapshot(StepKind.UPDATE, "write", {"dp_table": table}, highlights=((1, 1),), updated=True)

    assert before.data["dp_table"][1][1] == 0
    assert after.data["dp_table"][1][1] == 7
    assert after.metadata == {"updated": True}
    assert (before.id, after.id) == (0, 1)


def test_trace_step_completed_follows_kind_unless_overridden() -> None:
    t = Tracer()

    assert t.snapshot(StepKind.COMPLETE, "end", {}).completed
    assert not t.snapshot(StepKind.UPDATE, "mid", {}).completed
    assert t.snapshot(StepKind.UPDATE, "summary", {}, completed=True).completed


def test_to_dict_is_json_ready() -> None:
    t = Tracer()
    step = t.snapshot(StepKind.UPDATE, "relax", {"distances": [0, math.inf]}, highlights=(0, 1))

    d = step.to_dict()
    assert d["kind"] == "update"
    assert d["data"]["distances"] == [0, "∞"]
    assert d["highlights"] == [0, 1]
    assert d["completed"] is False
