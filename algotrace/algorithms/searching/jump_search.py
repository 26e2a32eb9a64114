"""
jump_search.py — Jump Search
=============================
On an ascending copy: check the last element of each block of
floor(sqrt(n)) elements until one is ≥ target, then scan that block
linearly.
"""

import math
from typing import Generator, List, Optional, Sequence

from algotrace.algorithms.step import ArrayStep, ArrayTracer, StepKind


PSEUDOCODE: List[str] = [
    "def jump_search(a, target):",                  # 0
    "    step = ⌊√n⌋; prev = 0",                    # 1
    "    while a[min(step, n) - 1] < target:",      # 2
    "        prev = step; step += ⌊√n⌋",            # 3
    "        if prev ≥ n: return -1",               # 4
    "    for i in prev … min(step, n) - 1:",        # 5
    "        if a[i] == target: return i",          # 6
    "    return -1",                                # 7
]


def jump_search(
    array: Sequence[float] = (0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89),
    target: Optional[float] = 21,
) -> Generator[ArrayStep, None, None]:
    t = ArrayTracer(sorted(array))
    a = t.array
    n = len(a)
    if target is None and n:
        target = a[n // 2]
    block = max(1, math.isqrt(n))

    yield t.snapshot(
        StepKind.INIT, f"Search for {target} in {a} with block size {block}.",
        target=target, block_size=block, line=1,
    )

    prev, step = 0, block
    while n and prev < n:
        end = min(step, n) - 1
        yield t.snapshot(
            StepKind.COMPARE, f"Check block end a[{end}]={a[end]} against {target}.",
            comparing=(end,), target=target, block=[prev, end], line=2,
        )
        if a[end] >= target:
            yield t.snapshot(
                StepKind.DECIDE, f"{a[end]} ≥ {target}: the target can only be in a[{prev}…{end}].",
                comparing=range(prev, end + 1), target=target, block=[prev, end], line=5,
            )
            for i in range(prev, end + 1):
                yield t.snapshot(
                    StepKind.COMPARE, f"Compare a[{i}]={a[i]} with {target}.",
                    comparing=(i,), target=target, block=[prev, end], line=6,
                )
                if a[i] == target:
                    yield t.snapshot(
                        StepKind.COMPLETE, f"Found {target} at index {i}.",
                        marked=(i,), target=target, found=True, index=i, line=6,
                    )
                    return
            break
        yield t.snapshot(
            StepKind.DECIDE, f"{a[end]} < {target}: jump past a[{prev}…{end}].",
            comparing=range(prev, end + 1), target=target, block=[prev, end], line=3,
        )
        prev, step = step, step + block

    yield t.snapshot(
        StepKind.COMPLETE, f"{target} is not in the array.",
        target=target, found=False, index=-1, line=7,
    )
