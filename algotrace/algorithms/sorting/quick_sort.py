"""
quick_sort.py — Quick Sort (Lomuto partition)
==============================================
Pivot = last element of the range.  A single forward scan swaps every
element strictly less than the pivot into the low side, then the pivot
is swapped into its final slot.  Left partition is sorted before right.

Every index ends up either as a pivot or as a singleton range; both
settle the index.
"""

from typing import Generator, List, Sequence

from algotrace.algorithms.step import ArrayStep, ArrayTracer, StepKind


PSEUDOCODE: List[str] = [
    "def quick_sort(a, low, high):",                # 0
    "    if low < high:",                           # 1
    "        pivot = a[high]; i = low - 1",         # 2
    "        for j in low … high-1:",               # 3
    "            if a[j] < pivot:",                 # 4
    "                i += 1; swap(a[i], a[j])",     # 5
    "        swap(a[i+1], a[high])",                # 6
    "        quick_sort(a, low, i)",                # 7
    "        quick_sort(a, i + 2, high)",           # 8
]


def quick_sort(array: Sequence[float] = (64, 34, 25, 12, 22, 11, 90)) -> Generator[ArrayStep, None, None]:
    t = ArrayTracer(array)
    n = len(t)

    yield t.snapshot(StepKind.INIT, f"Initial array of {n} element(s).", line=0)
    if n > 1:
        yield from _quick_sort(t, 0, n - 1)
    yield t.complete(f"Sorted: {t.array}.", line=0)


# ---------------------------------------------------------------------------
def _quick_sort(t: ArrayTracer, low: int, high: int) -> Generator[ArrayStep, None, None]:
    a = t.array
    if low > high:
        return
    if low == high:
        t.settle(low)
        yield t.snapshot(StepKind.UPDATE, f"Single element a[{low}]={a[low]} is in place.", line=1)
        return

    pivot = a[high]
    yield t.snapshot(
        StepKind.CONSIDER, f"Partition a[{low}…{high}] around pivot a[{high}]={pivot}.",
        comparing=(high,), pivot=pivot, pivot_index=high, range=[low, high], line=2,
    )

    i = low - 1
    for j in range(low, high):
        yield t.snapshot(
            StepKind.COMPARE, f"Compare a[{j}]={a[j]} with pivot {pivot}.",
            comparing=(j, high), pivot=pivot, pivot_index=high, boundary=i, line=4,
        )
        if a[j] < pivot:
            i += 1
            if i != j:
                yield t.snapshot(
                    StepKind.SWAP, f"{a[j]} < {pivot}: swap a[{j}] into the low side at index {i}.",
                    swapping=(i, j), pivot=pivot, pivot_index=high, boundary=i, line=5,
                )
                t.swap(i, j)
                yield t.snapshot(StepKind.UPDATE, f"Swapped: a[{i}]={a[i]}, a[{j}]={a[j]}.",
                                 pivot=pivot, pivot_index=high, boundary=i, line=5)
            else:
                yield t.snapshot(
                    StepKind.DECIDE, f"{a[j]} < {pivot}: already on the low side, grow it to index {i}.",
                    comparing=(j,), pivot=pivot, pivot_index=high, boundary=i, line=5,
                )
        else:
            yield t.snapshot(
                StepKind.NO_UPDATE, f"{a[j]} ≥ {pivot}: stays on the high side.",
                comparing=(j, high), pivot=pivot, pivot_index=high, boundary=i, line=4,
            )

    p = i + 1
    if p != high:
        yield t.snapshot(
            StepKind.SWAP, f"Move pivot {pivot} from index {high} to its final slot {p}.",
            swapping=(p, high), pivot=pivot, pivot_index=high, line=6,
        )
        t.swap(p, high)
    t.settle(p)
    yield t.snapshot(StepKind.UPDATE, f"Pivot {pivot} placed at index {p}.", pivot=pivot, pivot_index=p, line=6)

    yield from _quick_sort(t, low, p - 1)
    yield from _quick_sort(t, p + 1, high)
