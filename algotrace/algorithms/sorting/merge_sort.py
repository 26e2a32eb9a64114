"""
merge_sort.py — Merge Sort (top-down)
======================================
Recursive split at (start + end) // 2, then a stable merge through
explicit left / right buffers (`<=` favours the left half on ties).

Yields a step for:
  1. The initial array
  2. Every split (entering a recursive call)
  3. The start of every merge, with both buffers in metadata
  4. Every buffer-head comparison
  5. Every write back into the working array
  6. The end of every merge (leaving the call)
  7. Final: the whole array sorted

Positions only settle while the top-level merge writes them; any
lower-level merge can still be overwritten later.
"""

from typing import Generator, List, Sequence

from algotrace.algorithms.step import ArrayStep, ArrayTracer, StepKind


PSEUDOCODE: List[str] = [
    "def merge_sort(a, start, end):",               # 0
    "    if start ≥ end: return",                   # 1
    "    mid = (start + end) // 2",                 # 2
    "    merge_sort(a, start, mid)",                # 3
    "    merge_sort(a, mid + 1, end)",              # 4
    "    L, R = a[start…mid], a[mid+1…end]",        # 5
    "    while L and R:",                           # 6
    "        a[k++] = L[i] <= R[j] ? L[i++] : R[j++]", # 7
    "    copy what is left of L, then of R",        # 8
]


def merge_sort(array: Sequence[float] = (64, 34, 25, 12, 22, 11, 90)) -> Generator[ArrayStep, None, None]:
    t = ArrayTracer(array)
    n = len(t)

    yield t.snapshot(StepKind.INIT, f"Initial array of {n} element(s).", line=0)
    if n > 1:
        yield from _sort(t, 0, n - 1)
    yield t.complete(f"Sorted: {t.array}.", line=0)


# ---------------------------------------------------------------------------
def _sort(t: ArrayTracer, start: int, end: int) -> Generator[ArrayStep, None, None]:
    if start >= end:
        return
    mid = (start + end) // 2
    yield t.snapshot(
        StepKind.CONSIDER, f"Split a[{start}…{end}] into a[{start}…{mid}] and a[{mid + 1}…{end}].",
        range=[start, end], mid=mid, line=2,
    )
    yield from _sort(t, start, mid)
    yield from _sort(t, mid + 1, end)
    yield from _merge(t, start, mid, end)


def _merge(t: ArrayTracer, start: int, mid: int, end: int) -> Generator[ArrayStep, None, None]:
    a = t.array
    left = a[start:mid + 1]
    right = a[mid + 1:end + 1]
    top_level = start == 0 and end == len(a) - 1

    def write(k: int, value: float, side: str, i: int, j: int, line: int = 7) -> ArrayStep:
        a[k] = value
        if top_level:
            t.settle(k)
        return t.snapshot(
            StepKind.UPDATE, f"Write {value} from the {side} buffer to index {k}.",
            swapping=(k,), left=left, right=right, i=i, j=j, line=line,
        )

    yield t.snapshot(
        StepKind.CONSIDER, f"Merge {left} and {right} into a[{start}…{end}].",
        range=[start, end], left=left, right=right, i=0, j=0, line=5,
    )

    i = j = 0
    k = start
    while i < len(left) and j < len(right):
        yield t.snapshot(
            StepKind.COMPARE, f"Compare left {left[i]} with right {right[j]}.",
            comparing=(start + i, mid + 1 + j), left=left, right=right, i=i, j=j, line=6,
        )
        if left[i] <= right[j]:
            yield write(k, left[i], "left", i + 1, j)
            i += 1
        else:
            yield write(k, right[j], "right", i, j + 1)
            j += 1
        k += 1

    while i < len(left):
        yield write(k, left[i], "left", i + 1, j, line=8)
        i += 1
        k += 1
    while j < len(right):
        yield write(k, right[j], "right", i, j + 1, line=8)
        j += 1
        k += 1

    yield t.snapshot(
        StepKind.BACKTRACK, f"Merged a[{start}…{end}] = {a[start:end + 1]}.",
        range=[start, end], line=8,
    )
