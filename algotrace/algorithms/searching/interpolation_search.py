"""
interpolation_search.py — Interpolation Search
===============================================
On an ascending copy: estimate the target's position from the values
at the range ends instead of always taking the midpoint.  When both
ends hold the same value the estimate falls back to `low`.
"""

from typing import Generator, List, Optional, Sequence

from algotrace.algorithms.step import ArrayStep, ArrayTracer, StepKind


PSEUDOCODE: List[str] = [
    "def interpolation_search(a, target):",         # 0
    "    low, high = 0, n - 1",                     # 1
    "    while low ≤ high and a[low] ≤ target ≤ a[high]:",  # 2
    "        pos = low + (target-a[low])·(high-low) // (a[high]-a[low])",  # 3
    "        if a[pos] == target: return pos",      # 4
    "        if a[pos] < target: low = pos + 1",    # 5
    "        else: high = pos - 1",                 # 6
    "    return -1",                                # 7
]


def interpolation_search(
    array: Sequence[float] = (10, 12, 13, 16, 18, 19, 20, 21, 22, 23, 24, 33, 35, 42, 47),
    target: Optional[float] = 22,
) -> Generator[ArrayStep, None, None]:
    t = ArrayTracer(sorted(array))
    a = t.array
    n = len(a)
    if target is None and n:
        target = a[n // 2]

    low, high = 0, n - 1
    yield t.snapshot(
        StepKind.INIT, f"Search for {target} in {a}.",
        target=target, low=low, high=high, line=1,
    )

    while low <= high and a[low] <= target <= a[high]:
        if a[high] == a[low]:
            pos = low
        else:
            pos = low + int((target - a[low]) * (high - low) // (a[high] - a[low]))
        yield t.snapshot(
            StepKind.COMPARE, f"Estimated position {pos}: compare a[{pos}]={a[pos]} with {target}.",
            comparing=(pos,), target=target, low=low, high=high, pos=pos, line=3,
        )
        if a[pos] == target:
            yield t.snapshot(
                StepKind.COMPLETE, f"Found {target} at index {pos}.",
                marked=(pos,), target=target, found=True, index=pos, line=4,
            )
            return

        if a[pos] < target:
            discarded = range(low, pos + 1)
            low = pos + 1
            reason, line = f"{a[pos]} < {target}: search a[{low}…{high}].", 5
        else:
            discarded = range(pos, high + 1)
            high = pos - 1
            reason, line = f"{a[pos]} > {target}: search a[{low}…{high}].", 6
        yield t.snapshot(
            StepKind.DECIDE, reason,
            comparing=discarded, target=target, low=low, high=high, pos=pos, line=line,
        )

    yield t.snapshot(
        StepKind.COMPLETE, f"{target} is not in the array.",
        target=target, found=False, index=-1, line=7,
    )
