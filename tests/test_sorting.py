from __future__ import annotations

from collections import Counter

import pytest

from algotrace.algorithms.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)
from algotrace.algorithms.step import StepKind

SORTS = [bubble_sort, selection_sort, insertion_sort, merge_sort, quick_sort, heap_sort]
SWAP_BASED = [bubble_sort, selection_sort, insertion_sort, quick_sort, heap_sort]

INPUTS = [
    [5, 3, 8, 1],
    [64, 34, 25, 12, 22, 11, 90],
    [2, 2, 1, 1, 3],
    [1, 2, 3, 4, 5],
    [9, 7, 5, 3, 1],
    [-4, 0.5, 3, -1],
]


@pytest.mark.parametrize("sort", SORTS)
def test_bubble_scenario_shape_for_every_sort(sort) -> None:
    steps = list(sort([5, 3, 8, 1]))

    assert steps[0].kind is StepKind.INIT
    assert steps[0].array == (5, 3, 8, 1)
    assert steps[-1].kind is StepKind.COMPLETE
    assert steps[-1].array == (1, 3, 5, 8)
    assert steps[-1].sorted == (0, 1, 2, 3)


@pytest.mark.parametrize("sort", SORTS)
@pytest.mark.parametrize("values", INPUTS)
def test_sort_invariants(sort, values) -> None:
    steps = list(sort(values))
    n = len(values)

    assert list(steps[-1].array) == sorted(values)
    assert [s.id for s in steps] == list(range(len(steps)))

    previous = set()
    for step in steps:
        assert len(step.array) == n
        for idx in step.comparing + step.swapping + step.sorted:
            assert 0 <= idx < n
        assert list(step.sorted) == sorted(step.sorted)
        # settled positions only grow
        assert previous <= set(step.sorted)
        previous = set(step.sorted)

    for step in steps[:-1]:
        assert len(step.sorted) < n or n == 0


@pytest.mark.parametrize("sort", SWAP_BASED)
def test_swap_based_sorts_keep_a_permutation(sort) -> None:
    values = [64, 34, 25, 12, 22, 11, 90]
    for step in sort(values):
        assert Counter(step.array) == Counter(values)


@pytest.mark.parametrize("sort", SORTS)
@pytest.mark.parametrize("values", [[], [42]])
def test_trivial_inputs(sort, values) -> None:
    steps = list(sort(values))

    assert steps[0].kind is StepKind.INIT
    assert steps[-1].kind is StepKind.COMPLETE
    assert list(steps[-1].array) == values
    assert steps[-1].sorted == tuple(range(len(values)))


@pytest.mark.parametrize("sort", SORTS)
def test_input_is_not_mutated(sort) -> None:
    values = [3, 1, 2]
    list(sort(values))
    assert values == [3, 1, 2]


@pytest.mark.parametrize("sort", SORTS)
def test_traces_are_deterministic(sort) -> None:
    assert list(sort([4, 2, 7, 1, 3])) == list(sort([4, 2, 7, 1, 3]))


def test_bubble_sort_compares_every_pair_position() -> None:
    values = [5, 3, 8, 1, 9, 2]
    n = len(values)
    compares = [s for s in bubble_sort(values) if s.kind is StepKind.COMPARE]

    assert len(compares) == n * (n - 1) // 2


def test_bubble_sort_swaps_are_followed_by_the_swapped_array() -> None:
    steps = list(bubble_sort([2, 1]))
    swap = next(i for i, s in enumerate(steps) if s.kind is StepKind.SWAP)

    assert steps[swap].array == (2, 1)
    assert steps[swap].swapping == (0, 1)
    assert steps[swap + 1].kind is StepKind.UPDATE
    assert steps[swap + 1].array == (1, 2)


def test_merge_sort_writes_one_index_at_a_time() -> None:
    writes = [s for s in merge_sort([4, 3, 2, 1]) if s.kind is StepKind.UPDATE]

    assert writes
    assert all(len(s.swapping) == 1 for s in writes)


def test_quick_sort_partitions_around_last_element() -> None:
    steps = list(quick_sort([3, 1, 2]))
    partition = next(s for s in steps if s.kind is StepKind.CONSIDER)

    assert partition.metadata["pivot"] == 2


def test_steps_carry_pseudocode_lines() -> None:
    for step in insertion_sort([3, 2, 1]):
        assert isinstance(step.metadata["line"], int)
