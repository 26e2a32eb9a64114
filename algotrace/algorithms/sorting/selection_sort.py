"""
selection_sort.py — Selection Sort
===================================
Scans the unsorted suffix for its minimum and swaps it into place.
Index i is settled after round i.
"""

from typing import Generator, List, Sequence

from algotrace.algorithms.step import ArrayStep, ArrayTracer, StepKind


PSEUDOCODE: List[str] = [
    "def selection_sort(a):",                       # 0
    "    for i in 0 … n-2:",                        # 1
    "        min_idx = i",                          # 2
    "        for j in i+1 … n-1:",                  # 3
    "            if a[j] < a[min_idx]:",            # 4
    "                min_idx = j",                  # 5
    "        swap(a[i], a[min_idx])",               # 6
    "    return a",                                 # 7
]


def selection_sort(array: Sequence[float] = (64, 34, 25, 12, 22, 11, 90)) -> Generator[ArrayStep, None, None]:
    t = ArrayTracer(array)
    a = t.array
    n = len(a)

    yield t.snapshot(StepKind.INIT, f"Initial array of {n} element(s).", line=0)

    for i in range(n - 1):
        min_idx = i
        yield t.snapshot(
            StepKind.CONSIDER, f"Round {i + 1}: assume a[{i}]={a[i]} is the minimum.",
            comparing=(i,), min_index=min_idx, line=2,
        )

        for j in range(i + 1, n):
            yield t.snapshot(
                StepKind.COMPARE, f"Compare a[{j}]={a[j]} with current minimum a[{min_idx}]={a[min_idx]}.",
                comparing=(min_idx, j), min_index=min_idx, line=4,
            )
            if a[j] < a[min_idx]:
                min_idx = j
                yield t.snapshot(
                    StepKind.DECIDE, f"New minimum {a[min_idx]} at index {min_idx}.",
                    comparing=(min_idx,), min_index=min_idx, line=5,
                )

        if min_idx != i:
            yield t.snapshot(
                StepKind.SWAP, f"Swap minimum a[{min_idx}]={a[min_idx]} into position {i}.",
                swapping=(i, min_idx), min_index=min_idx, line=6,
            )
            t.swap(i, min_idx)
            yield t.snapshot(StepKind.UPDATE, f"Swapped: a[{i}]={a[i]}.", min_index=i, line=6)

        t.settle(i)
        yield t.snapshot(StepKind.UPDATE, f"Index {i} settled with {a[i]}.", line=1)

    yield t.complete(f"Sorted: {a}.", line=7)
