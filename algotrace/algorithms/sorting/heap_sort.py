"""
heap_sort.py — Heap Sort
=========================
Builds a max-heap bottom-up from n//2 - 1 down to 0, then repeatedly
swaps the root with the last unsorted slot and sifts the new root down
through the shrinking heap.
"""

from typing import Generator, List, Sequence

from algotrace.algorithms.step import ArrayStep, ArrayTracer, StepKind


PSEUDOCODE: List[str] = [
    "def heap_sort(a):",                            # 0
    "    for i in n//2-1 … 0: heapify(a, n, i)",    # 1
    "    for end in n-1 … 1:",                      # 2
    "        swap(a[0], a[end])",                   # 3
    "        heapify(a, end, 0)",                   # 4
    "def heapify(a, size, i):",                     # 5
    "    largest = max(i, 2i+1, 2i+2)",             # 6
    "    if largest ≠ i:",                          # 7
    "        swap(a[i], a[largest])",               # 8
    "        heapify(a, size, largest)",            # 9
]


def heap_sort(array: Sequence[float] = (64, 34, 25, 12, 22, 11, 90)) -> Generator[ArrayStep, None, None]:
    t = ArrayTracer(array)
    a = t.array
    n = len(a)

    yield t.snapshot(StepKind.INIT, f"Initial array of {n} element(s).", line=0)
    if n < 2:
        yield t.complete(f"Sorted: {a}.", line=0)
        return

    yield t.snapshot(StepKind.CONSIDER, f"Build a max-heap from index {n // 2 - 1} down to 0.", heap_size=n, line=1)
    for i in range(n // 2 - 1, -1, -1):
        yield from _heapify(t, n, i)
    yield t.snapshot(StepKind.UPDATE, f"Max-heap built; root holds {a[0]}.", heap_size=n, line=1)

    for end in range(n - 1, 0, -1):
        yield t.snapshot(
            StepKind.SWAP, f"Move the maximum {a[0]} to index {end}.",
            swapping=(0, end), heap_size=end + 1, line=3,
        )
        t.swap(0, end)
        t.settle(end)
        yield t.snapshot(StepKind.UPDATE, f"Index {end} settled with {a[end]}.", heap_size=end, line=3)
        yield from _heapify(t, end, 0)

    yield t.complete(f"Sorted: {a}.", line=0)


# ---------------------------------------------------------------------------
def _heapify(t: ArrayTracer, size: int, i: int) -> Generator[ArrayStep, None, None]:
    a = t.array
    left, right = 2 * i + 1, 2 * i + 2
    if left >= size:
        return

    yield t.snapshot(
        StepKind.COMPARE, f"Compare a[{i}]={a[i]} with its children.",
        comparing=tuple(c for c in (i, left, right) if c < size), heap_size=size, line=6,
    )

    largest = i
    if a[left] > a[largest]:
        largest = left
    if right < size and a[right] > a[largest]:
        largest = right

    if largest == i:
        yield t.snapshot(
            StepKind.NO_UPDATE, f"Heap property holds at index {i}.",
            comparing=(i,), heap_size=size, line=7,
        )
        return

    yield t.snapshot(
        StepKind.SWAP, f"Child a[{largest}]={a[largest]} is larger: swap with a[{i}]={a[i]}.",
        swapping=(i, largest), heap_size=size, line=8,
    )
    t.swap(i, largest)
    yield t.snapshot(StepKind.UPDATE, f"Swapped: a[{i}]={a[i]}, a[{largest}]={a[largest]}.", heap_size=size, line=8)
    yield from _heapify(t, size, largest)
