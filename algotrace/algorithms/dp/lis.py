"""
lis.py — Longest Increasing Subsequence (O(n²))
================================================
dp[i] = length of the longest strictly increasing run ending at i,
seeded with 1.  For each i, scan every j < i and update when
a[i] > a[j] and dp[i] < dp[j] + 1.

Backtrack starts at the first index holding the maximum dp value and
walks left to the nearest j whose dp is one less and whose value is
smaller, so the recovered sequence is always increasing.
"""

from typing import Generator, List, Optional, Sequence

from algotrace.algorithms.step import StepKind, Tracer, TraceStep


PSEUDOCODE: List[str] = [
    "def lis(a):",                                  # 0
    "    dp ← [1]·n",                               # 1
    "    for i in 1 … n-1:",                        # 2
    "        for j in 0 … i-1:",                    # 3
    "            if a[i] > a[j] and dp[i] < dp[j] + 1:",  # 4
    "                dp[i] ← dp[j] + 1",            # 5
    "    walk back from argmax(dp)",                # 6
]


def lis(array: Sequence[float] = (10, 22, 9, 33, 21, 50, 41, 60, 80)) -> Generator[TraceStep, None, None]:
    t = Tracer()
    a = list(array)
    n = len(a)
    dp: List[int] = [0] * n
    sequence: List[float] = []
    indices: List[int] = []

    def data(i: Optional[int] = None, j: Optional[int] = None) -> dict:
        return {
            "array":       a,
            "dp_table":    dp,
            "current_i":   i,
            "current_j":   j,
            "sequence":    sequence,
            "indices":     indices,
        }

    yield t.snapshot(StepKind.INIT, f"Longest increasing subsequence of {a}.", data(), line=0)
    if n == 0:
        final = data()
        final["lis_length"] = 0
        yield t.snapshot(StepKind.COMPLETE, "Empty input: LIS length 0.", final, line=6)
        return

    dp[:] = [1] * n
    yield t.snapshot(StepKind.UPDATE, "Every element alone is an increasing run of length 1.", data(), line=1)

    for i in range(1, n):
        yield t.snapshot(StepKind.CONSIDER, f"Best run ending at a[{i}]={a[i]}?", data(i), highlights=(i,), line=2)
        for j in range(i):
            yield t.snapshot(
                StepKind.COMPARE, f"a[{j}]={a[j]} vs a[{i}]={a[i]}; dp[{j}]+1 = {dp[j] + 1} vs dp[{i}] = {dp[i]}.",
                data(i, j), highlights=(i,), comparisons=(j, i), line=4,
            )
            if a[i] > a[j] and dp[i] < dp[j] + 1:
                dp[i] = dp[j] + 1
                yield t.snapshot(
                    StepKind.UPDATE, f"Extend the run ending at {j}: dp[{i}] = {dp[i]}.",
                    data(i, j), highlights=(i,), updated=True, line=5,
                )
            else:
                yield t.snapshot(
                    StepKind.NO_UPDATE, f"No improvement for dp[{i}].",
                    data(i, j), highlights=(i,), updated=False, line=4,
                )

    best = 0
    for k in range(1, n):
        if dp[k] > dp[best]:
            best = k

    cur = best
    indices.append(cur)
    sequence.append(a[cur])
    yield t.snapshot(
        StepKind.BACKTRACK, f"Longest run ends at index {cur} (dp = {dp[cur]}).",
        data(cur), highlights=(cur,), line=6,
    )
    for j in range(best - 1, -1, -1):
        if dp[j] == dp[cur] - 1 and a[j] < a[cur]:
            cur = j
            indices.insert(0, j)
            sequence.insert(0, a[j])
            yield t.snapshot(
                StepKind.BACKTRACK, f"Step back to index {j} (value {a[j]}, dp = {dp[j]}).",
                data(j), highlights=(j,), line=6,
            )

    final = data()
    final["lis_length"] = dp[best]
    yield t.snapshot(
        StepKind.COMPLETE, f"LIS length {dp[best]}: {sequence}.",
        final, highlights=tuple(indices), line=6,
    )
