"""
insertion_sort.py — Insertion Sort
===================================
Grows a sorted prefix one element at a time.  The key sinks left by
adjacent swaps, so every frame shows a permutation of the input.

Nothing is settled before the final step (an element in the prefix can
still move right later).  The prefix length rides along in metadata.
"""

from typing import Generator, List, Sequence

from algotrace.algorithms.step import ArrayStep, ArrayTracer, StepKind


PSEUDOCODE: List[str] = [
    "def insertion_sort(a):",                       # 0
    "    for i in 1 … n-1:",                        # 1
    "        key = a[i]; j = i - 1",                # 2
    "        while j ≥ 0 and a[j] > key:",          # 3
    "            a[j+1] = a[j]",                    # 4
    "            j -= 1",                           # 5
    "        a[j+1] = key",                         # 6
    "    return a",                                 # 7
]


def insertion_sort(array: Sequence[float] = (64, 34, 25, 12, 22, 11, 90)) -> Generator[ArrayStep, None, None]:
    t = ArrayTracer(array)
    a = t.array
    n = len(a)

    yield t.snapshot(StepKind.INIT, f"Initial array of {n} element(s).", sorted_prefix=min(n, 1), line=0)

    for i in range(1, n):
        key = a[i]
        yield t.snapshot(
            StepKind.CONSIDER, f"Insert key a[{i}]={key} into the sorted prefix a[0…{i - 1}].",
            comparing=(i,), key=key, sorted_prefix=i, line=2,
        )

        j = i - 1
        while j >= 0:
            yield t.snapshot(
                StepKind.COMPARE, f"Compare a[{j}]={a[j]} with key {key}.",
                comparing=(j, j + 1), key=key, sorted_prefix=i, line=3,
            )
            if a[j] <= key:
                yield t.snapshot(
                    StepKind.NO_UPDATE, f"{a[j]} ≤ {key}: key stays at index {j + 1}.",
                    comparing=(j, j + 1), key=key, sorted_prefix=i, line=3,
                )
                break
            yield t.snapshot(
                StepKind.SWAP, f"{a[j]} > {key}: shift {a[j]} right.",
                swapping=(j, j + 1), key=key, sorted_prefix=i, line=4,
            )
            t.swap(j, j + 1)
            yield t.snapshot(StepKind.UPDATE, f"Shifted: key now at index {j}.", key=key, sorted_prefix=i, line=5)
            j -= 1

        yield t.snapshot(
            StepKind.UPDATE, f"Key {key} inserted at index {j + 1}; prefix a[0…{i}] is in order.",
            key=key, sorted_prefix=i + 1, line=6,
        )

    yield t.complete(f"Sorted: {a}.", sorted_prefix=n, line=7)
