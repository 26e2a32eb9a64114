"""
linear_search.py — Linear Search
=================================
Sequential scan with one comparison step per index.  The terminal step
marks the found index in `sorted` or carries an empty marker set.
"""

from typing import Generator, List, Optional, Sequence

from algotrace.algorithms.step import ArrayStep, ArrayTracer, StepKind


PSEUDOCODE: List[str] = [
    "def linear_search(a, target):",                # 0
    "    for i in 0 … n-1:",                        # 1
    "        if a[i] == target:",                   # 2
    "            return i",                         # 3
    "    return -1",                                # 4
]


def default_target(array: Sequence[float]) -> Optional[float]:
    """The demonstration target: the middle element of the input."""
    return array[len(array) // 2] if len(array) else None


def linear_search(
    array: Sequence[float] = (64, 34, 25, 12, 22, 11, 90),
    target: Optional[float] = None,
) -> Generator[ArrayStep, None, None]:
    if target is None:
        target = default_target(array)
    t = ArrayTracer(array)
    a = t.array

    yield t.snapshot(StepKind.INIT, f"Search for {target} in {len(a)} element(s).", target=target, line=0)

    for i, value in enumerate(a):
        yield t.snapshot(
            StepKind.COMPARE, f"Compare a[{i}]={value} with target {target}.",
            comparing=(i,), target=target, line=2,
        )
        if value == target:
            yield t.snapshot(
                StepKind.COMPLETE, f"Found {target} at index {i}.",
                marked=(i,), target=target, found=True, index=i, line=3,
            )
            return

    yield t.snapshot(
        StepKind.COMPLETE, f"{target} is not in the array.",
        target=target, found=False, index=-1, line=4,
    )
