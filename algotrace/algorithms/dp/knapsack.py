"""
knapsack.py — 0/1 Knapsack
===========================
Row i = first i items (row 0 is the "no items" base case), column w =
capacity.

    dp[i][w] = dp[i-1][w]                                   if weight > w
             = max(dp[i-1][w], dp[i-1][w-weight] + value)   otherwise

Each cell gets a CONSIDER step, then either a too-heavy DECIDE step or
a COMPARE step followed by a DECIDE step tagged take / skip.  An item is
taken only when it strictly improves the cell, so the backtrack walk
(dp[i][w] ≠ dp[i-1][w]) agrees with every decision tag.
"""

from typing import Generator, List, Optional, Sequence, Tuple

from algotrace.algorithms.step import StepKind, Tracer, TraceStep


PSEUDOCODE: List[str] = [
    "def knapsack(items, W):",                      # 0
    "    dp[0][*] ← 0",                             # 1
    "    for i in 1 … n:",                          # 2
    "        for w in 0 … W:",                      # 3
    "            if weight[i] > w: dp[i][w] ← dp[i-1][w]",  # 4
    "            else: dp[i][w] ← max(skip, take)", # 5
    "    walk back from dp[n][W] to list items",    # 6
]

DEFAULT_ITEMS: Tuple[Tuple[int, int], ...] = ((1, 1), (2, 6), (3, 10), (4, 16), (5, 20))


def knapsack(
    items: Sequence[Sequence[float]] = DEFAULT_ITEMS,
    capacity: int = 10,
) -> Generator[TraceStep, None, None]:
    t = Tracer()
    items = [(w, v) for w, v in items]
    n = len(items)
    dp: List[List[float]] = [[0] * (capacity + 1) for _ in range(n + 1)]
    selected: List[int] = []

    def data(i: Optional[int] = None, w: Optional[int] = None, decision: Optional[str] = None) -> dict:
        return {
            "items":          [{"weight": wt, "value": val} for wt, val in items],
            "capacity":       capacity,
            "dp_table":       dp,
            "current_item":   i,
            "current_weight": w,
            "decision":       decision,
            "selected_items": selected,
        }

    yield t.snapshot(
        StepKind.INIT, f"{n} item(s), capacity {capacity}. Row 0 (no items) is all zeros.",
        data(), line=1,
    )

    for i in range(1, n + 1):
        weight, value = items[i - 1]
        for w in range(capacity + 1):
            yield t.snapshot(
                StepKind.CONSIDER, f"Item {i} (weight {weight}, value {value}) at capacity {w}.",
                data(i, w), highlights=((i, w),), line=3,
            )
            skip = dp[i - 1][w]
            if weight > w:
                dp[i][w] = skip
                yield t.snapshot(
                    StepKind.DECIDE, f"Too heavy ({weight} > {w}): skip, dp[{i}][{w}] = {skip}.",
                    data(i, w, "skip"), highlights=((i, w),), comparisons=((i - 1, w),),
                    decision="skip", too_heavy=True, line=4,
                )
                continue

            take = dp[i - 1][w - weight] + value
            yield t.snapshot(
                StepKind.COMPARE, f"Skip = dp[{i - 1}][{w}] = {skip}; take = dp[{i - 1}][{w - weight}] + {value} = {take}.",
                data(i, w), highlights=((i, w),), comparisons=((i - 1, w), (i - 1, w - weight)), line=5,
            )
            if take > skip:
                dp[i][w] = take
                yield t.snapshot(
                    StepKind.DECIDE, f"Take item {i}: dp[{i}][{w}] = {take}.",
                    data(i, w, "take"), highlights=((i, w),), decision="take", line=5,
                )
            else:
                dp[i][w] = skip
                yield t.snapshot(
                    StepKind.DECIDE, f"Skip item {i}: dp[{i}][{w}] = {skip}.",
                    data(i, w, "skip"), highlights=((i, w),), decision="skip", line=5,
                )

    w = capacity
    for i in range(n, 0, -1):
        if dp[i][w] != dp[i - 1][w]:
            selected.insert(0, i - 1)
            yield t.snapshot(
                StepKind.BACKTRACK, f"dp[{i}][{w}] ≠ dp[{i - 1}][{w}]: item {i} was taken.",
                data(i, w), highlights=((i, w),), line=6,
            )
            w -= items[i - 1][0]
        else:
            yield t.snapshot(
                StepKind.BACKTRACK, f"dp[{i}][{w}] = dp[{i - 1}][{w}]: item {i} was skipped.",
                data(i, w), highlights=((i, w),), line=6,
            )

    final = data()
    final["max_value"] = dp[n][capacity]
    yield t.snapshot(
        StepKind.COMPLETE, f"Maximum value {dp[n][capacity]} with items {[i + 1 for i in selected]}.",
        final, highlights=((n, capacity),), line=6,
    )
