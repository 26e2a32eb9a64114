"""
lcs.py — Longest Common Subsequence
====================================
(m+1)×(n+1) table; row / column 0 are the empty-prefix base cases.

    match:    dp[i][j] = dp[i-1][j-1] + 1
    mismatch: dp[i][j] = max(dp[i-1][j], dp[i][j-1])

Backtrack from dp[m][n]: diagonal on a match, otherwise up when
dp[i-1][j] ≥ dp[i][j-1], else left.
"""

from typing import Generator, List, Optional

from algotrace.algorithms.step import StepKind, Tracer, TraceStep


PSEUDOCODE: List[str] = [
    "def lcs(X, Y):",                               # 0
    "    dp[0][*] = dp[*][0] = 0",                  # 1
    "    for i in 1 … m: for j in 1 … n:",          # 2
    "        if X[i-1] == Y[j-1]: dp[i][j] = dp[i-1][j-1] + 1",  # 3
    "        else: dp[i][j] = max(dp[i-1][j], dp[i][j-1])",       # 4
    "    backtrack from dp[m][n]",                  # 5
]


def lcs(first: str = "ABCBDAB", second: str = "BDCABA") -> Generator[TraceStep, None, None]:
    t = Tracer()
    m, n = len(first), len(second)
    dp: List[List[int]] = [[0] * (n + 1) for _ in range(m + 1)]
    chars: List[str] = []

    def data(i: Optional[int] = None, j: Optional[int] = None) -> dict:
        return {
            "first":     first,
            "second":    second,
            "dp_table":  dp,
            "current_i": i,
            "current_j": j,
            "lcs":       "".join(chars),
        }

    yield t.snapshot(
        StepKind.INIT, f"LCS of \"{first}\" and \"{second}\": row and column 0 are 0.",
        data(), line=1,
    )

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            a, b = first[i - 1], second[j - 1]
            match = a == b
            sources = ((i - 1, j - 1),) if match else ((i - 1, j), (i, j - 1))
            yield t.snapshot(
                StepKind.COMPARE, f"Compare {first}[{i - 1}]='{a}' with {second}[{j - 1}]='{b}'.",
                data(i, j), highlights=((i, j),), comparisons=sources, match=match, line=2,
            )
            if match:
                dp[i][j] = dp[i - 1][j - 1] + 1
                description = f"Match: dp[{i}][{j}] = diagonal + 1 = {dp[i][j]}."
                line = 3
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
                description = f"No match: dp[{i}][{j}] = max(up {dp[i - 1][j]}, left {dp[i][j - 1]}) = {dp[i][j]}."
                line = 4
            yield t.snapshot(
                StepKind.UPDATE, description,
                data(i, j), highlights=((i, j),), match=match, updated=True, line=line,
            )

    i, j = m, n
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            chars.insert(0, first[i - 1])
            yield t.snapshot(
                StepKind.BACKTRACK, f"'{first[i - 1]}' matches: take it and move diagonally.",
                data(i, j), highlights=((i, j),), move="diagonal", line=5,
            )
            i, j = i - 1, j - 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            yield t.snapshot(
                StepKind.BACKTRACK, f"dp[{i - 1}][{j}] ≥ dp[{i}][{j - 1}]: move up.",
                data(i, j), highlights=((i, j),), move="up", line=5,
            )
            i -= 1
        else:
            yield t.snapshot(
                StepKind.BACKTRACK, f"dp[{i}][{j - 1}] > dp[{i - 1}][{j}]: move left.",
                data(i, j), highlights=((i, j),), move="left", line=5,
            )
            j -= 1

    final = data()
    final["lcs_length"] = dp[m][n]
    yield t.snapshot(
        StepKind.COMPLETE, f"LCS length {dp[m][n]}: \"{''.join(chars)}\".",
        final, highlights=((m, n),), line=5,
    )
