"""
binary_search.py — Binary Search
=================================
Runs on an ascending copy of the input; the sort itself is not traced.

Yields a step for:
  1. The sorted working array
  2. Every midpoint comparison
  3. Every narrowing decision, highlighting the discarded half
  4. Final: the found index as the only marker, or an empty marker set
"""

from typing import Generator, List, Optional, Sequence

from algotrace.algorithms.searching.linear_search import default_target
from algotrace.algorithms.step import ArrayStep, ArrayTracer, StepKind


PSEUDOCODE: List[str] = [
    "def binary_search(a, target):",                # 0
    "    left, right = 0, n - 1",                   # 1
    "    while left ≤ right:",                      # 2
    "        mid = (left + right) // 2",            # 3
    "        if a[mid] == target: return mid",      # 4
    "        if a[mid] < target: left = mid + 1",   # 5
    "        else: right = mid - 1",                # 6
    "    return -1",                                # 7
]


def binary_search(
    array: Sequence[float] = (64, 34, 25, 12, 22, 11, 90),
    target: Optional[float] = None,
) -> Generator[ArrayStep, None, None]:
    if target is None:
        target = default_target(array)
    t = ArrayTracer(sorted(array))
    a = t.array

    left, right = 0, len(a) - 1
    yield t.snapshot(
        StepKind.INIT, f"Search for {target} in the sorted array {a}.",
        target=target, left=left, right=right, line=1,
    )

    while left <= right:
        mid = (left + right) // 2
        yield t.snapshot(
            StepKind.COMPARE, f"Midpoint a[{mid}]={a[mid]} against target {target}.",
            comparing=(mid,), target=target, left=left, right=right, mid=mid, line=3,
        )
        if a[mid] == target:
            yield t.snapshot(
                StepKind.COMPLETE, f"Found {target} at index {mid}.",
                marked=(mid,), target=target, found=True, index=mid, line=4,
            )
            return

        if a[mid] < target:
            discarded = range(left, mid + 1)
            left = mid + 1
            reason = f"{a[mid]} < {target}: discard a[{discarded[0]}…{mid}], search the right half."
            line = 5
        else:
            discarded = range(mid, right + 1)
            right = mid - 1
            reason = f"{a[mid]} > {target}: discard a[{mid}…{discarded[-1]}], search the left half."
            line = 6
        yield t.snapshot(
            StepKind.DECIDE, reason,
            comparing=discarded, target=target, left=left, right=right, mid=mid, line=line,
        )

    yield t.snapshot(
        StepKind.COMPLETE, f"{target} is not in the array.",
        target=target, found=False, index=-1, line=7,
    )
