"""
edit_distance.py — Levenshtein Edit Distance
=============================================
dp[i][j] = cost of turning first[:i] into second[:j].  Row 0 and
column 0 are the distance-from-empty-string base cases.

    match:    dp[i][j] = dp[i-1][j-1]
    mismatch: dp[i][j] = 1 + min(replace dp[i-1][j-1], delete dp[i-1][j], insert dp[i][j-1])

Backtrack re-derives which predecessor produced each cell, checking
keep (on a match), then replace, then delete, then insert.
"""

from typing import Generator, List, Optional

from algotrace.algorithms.step import StepKind, Tracer, TraceStep


PSEUDOCODE: List[str] = [
    "def edit_distance(s, t):",                     # 0
    "    dp[i][0] = i; dp[0][j] = j",               # 1
    "    for i in 1 … m: for j in 1 … n:",          # 2
    "        if s[i-1] == t[j-1]: dp[i][j] = dp[i-1][j-1]",  # 3
    "        else: dp[i][j] = 1 + min(replace, delete, insert)",  # 4
    "    backtrack from dp[m][n]",                  # 5
]


def edit_distance(first: str = "kitten", second: str = "sitting") -> Generator[TraceStep, None, None]:
    t = Tracer()
    m, n = len(first), len(second)
    dp: List[List[Optional[int]]] = [[None] * (n + 1) for _ in range(m + 1)]
    operations: List[dict] = []

    def data(i: Optional[int] = None, j: Optional[int] = None) -> dict:
        return {
            "first":      first,
            "second":     second,
            "dp_table":   dp,
            "current_i":  i,
            "current_j":  j,
            "operations": operations,
        }

    yield t.snapshot(StepKind.INIT, f"Edit distance from \"{first}\" to \"{second}\".", data(), line=0)

    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j
    yield t.snapshot(
        StepKind.UPDATE, "Base cases: dp[i][0] = i deletions, dp[0][j] = j insertions.",
        data(), line=1,
    )

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            a, b = first[i - 1], second[j - 1]
            if a == b:
                yield t.snapshot(
                    StepKind.COMPARE, f"'{a}' == '{b}': no edit needed here.",
                    data(i, j), highlights=((i, j),), comparisons=((i - 1, j - 1),), match=True, line=3,
                )
                dp[i][j] = dp[i - 1][j - 1]
                description = f"dp[{i}][{j}] = dp[{i - 1}][{j - 1}] = {dp[i][j]} (keep '{a}')."
                line = 3
            else:
                replace, delete, insert = dp[i - 1][j - 1], dp[i - 1][j], dp[i][j - 1]
                yield t.snapshot(
                    StepKind.COMPARE, f"'{a}' ≠ '{b}': replace {replace}, delete {delete}, insert {insert}.",
                    data(i, j), highlights=((i, j),),
                    comparisons=((i - 1, j - 1), (i - 1, j), (i, j - 1)), match=False, line=4,
                )
                dp[i][j] = 1 + min(replace, delete, insert)
                description = f"dp[{i}][{j}] = 1 + {min(replace, delete, insert)} = {dp[i][j]}."
                line = 4
            yield t.snapshot(StepKind.UPDATE, description, data(i, j), highlights=((i, j),), updated=True, line=line)

    i, j = m, n
    while i > 0 or j > 0:
        if i > 0 and j > 0 and first[i - 1] == second[j - 1] and dp[i][j] == dp[i - 1][j - 1]:
            op = {"op": "keep", "char": first[i - 1], "position": i - 1}
            i, j = i - 1, j - 1
        elif i > 0 and j > 0 and dp[i][j] == dp[i - 1][j - 1] + 1:
            op = {"op": "replace", "char": first[i - 1], "with": second[j - 1], "position": i - 1}
            i, j = i - 1, j - 1
        elif i > 0 and dp[i][j] == dp[i - 1][j] + 1:
            op = {"op": "delete", "char": first[i - 1], "position": i - 1}
            i -= 1
        else:
            op = {"op": "insert", "char": second[j - 1], "position": i}
            j -= 1
        operations.insert(0, op)
        yield t.snapshot(
            StepKind.BACKTRACK, f"{op['op'].capitalize()} '{op['char']}'" + (f" with '{op['with']}'." if "with" in op else "."),
            data(i, j), highlights=((i, j),), operation=op["op"], line=5,
        )

    final = data()
    final["edit_distance"] = dp[m][n]
    edits = sum(1 for op in operations if op["op"] != "keep")
    yield t.snapshot(
        StepKind.COMPLETE, f"Edit distance {dp[m][n]} ({edits} edit(s)).",
        final, highlights=((m, n),), line=5,
    )
