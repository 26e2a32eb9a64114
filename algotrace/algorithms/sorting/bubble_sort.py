"""
bubble_sort.py — Bubble Sort
=============================
Repeatedly walks the unsorted prefix swapping adjacent out-of-order
pairs, so the largest remaining value bubbles to the end of each pass.

Yields a step for:
  1. The initial array
  2. The start of every pass
  3. Every adjacent comparison
  4. Each swap (before and after) or the decision not to swap
  5. The end of every pass (one more index settled)
  6. Final: the whole array sorted

No early exit: every pass runs, so an n-element trace always holds
n·(n-1)/2 comparison steps.
"""

from typing import Generator, List, Sequence

from algotrace.algorithms.step import ArrayStep, ArrayTracer, StepKind


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",                          # 0
    "    for i in 0 … n-2:",                        # 1
    "        for j in 0 … n-2-i:",                  # 2
    "            if a[j] > a[j+1]:",                # 3
    "                swap(a[j], a[j+1])",           # 4
    "        mark a[n-1-i] sorted",                 # 5
    "    return a",                                 # 6
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bubble_sort(array: Sequence[float] = (64, 34, 25, 12, 22, 11, 90)) -> Generator[ArrayStep, None, None]:
    t = ArrayTracer(array)
    a = t.array
    n = len(a)

    yield t.snapshot(StepKind.INIT, f"Initial array of {n} element(s).", line=0)

    for i in range(n - 1):
        yield t.snapshot(StepKind.CONSIDER, f"Pass {i + 1}: bubble the largest unsorted value to index {n - 1 - i}.", line=1)

        for j in range(n - 1 - i):
            yield t.snapshot(
                StepKind.COMPARE, f"Compare a[{j}]={a[j]} with a[{j + 1}]={a[j + 1]}.",
                comparing=(j, j + 1), line=3,
            )
            if a[j] > a[j + 1]:
                yield t.snapshot(
                    StepKind.SWAP, f"{a[j]} > {a[j + 1]}: swap them.",
                    comparing=(j, j + 1), swapping=(j, j + 1), line=4,
                )
                t.swap(j, j + 1)
                yield t.snapshot(StepKind.UPDATE, f"Swapped: a[{j}]={a[j]}, a[{j + 1}]={a[j + 1]}.", line=4)
            else:
                yield t.snapshot(
                    StepKind.NO_UPDATE, f"{a[j]} ≤ {a[j + 1]}: already in order, no swap.",
                    comparing=(j, j + 1), line=3,
                )

        t.settle(n - 1 - i)
        yield t.snapshot(StepKind.UPDATE, f"Pass {i + 1} complete: index {n - 1 - i} holds {a[n - 1 - i]}.", line=5)

    yield t.complete(f"Sorted: {a}.", line=6)
