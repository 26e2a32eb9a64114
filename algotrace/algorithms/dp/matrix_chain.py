"""
matrix_chain.py — Matrix Chain Multiplication
==============================================
Matrix Aᵢ (1-based in narration) has shape dims[i-1] × dims[i].
Interval DP over chain length l = 2 … n:

    dp[i][j] = min over k of dp[i][k] + dp[k+1][j] + dims[i]·dims[k+1]·dims[j+1]

Split points are tried left to right and only a strictly cheaper one
replaces the current best.  A parenthesisation table is maintained
alongside the cost table for the final explanatory step.
"""

import math
from typing import Generator, List, Optional, Sequence

from algotrace.algorithms.step import StepKind, Tracer, TraceStep


PSEUDOCODE: List[str] = [
    "def matrix_chain(dims):",                      # 0
    "    dp[i][i] ← 0",                             # 1
    "    for l in 2 … n:",                          # 2
    "        for i in 0 … n-l: j ← i + l - 1",      # 3
    "            for k in i … j-1:",                # 4
    "                cost ← dp[i][k] + dp[k+1][j] + p[i]·p[k+1]·p[j+1]",  # 5
    "                if cost < dp[i][j]: dp[i][j] ← cost",  # 6
    "    return dp[0][n-1]",                        # 7
]


def matrix_chain(dimensions: Sequence[int] = (30, 35, 15, 5, 10, 20, 25)) -> Generator[TraceStep, None, None]:
    t = Tracer()
    dims = list(dimensions)
    n = max(len(dims) - 1, 0)
    dp: List[List[float]] = [[0 if i == j else math.inf for j in range(n)] for i in range(n)]
    parens: List[List[str]] = [[f"A{i + 1}" if i == j else "" for j in range(n)] for i in range(n)]

    def data(i: Optional[int] = None, j: Optional[int] = None, k: Optional[int] = None) -> dict:
        return {
            "dimensions":       dims,
            "dp_table":         dp,
            "parenthesization": parens,
            "current_i":        i,
            "current_j":        j,
            "current_k":        k,
        }

    yield t.snapshot(
        StepKind.INIT, f"{n} matrices with dimensions {dims}; a single matrix costs 0.",
        data(), line=1,
    )

    for length in range(2, n + 1):
        yield t.snapshot(StepKind.CONSIDER, f"Chains of length {length}.", data(), line=2)
        for i in range(n - length + 1):
            j = i + length - 1
            yield t.snapshot(
                StepKind.CONSIDER, f"Cheapest way to multiply A{i + 1}…A{j + 1}.",
                data(i, j), highlights=((i, j),), line=3,
            )
            for k in range(i, j):
                cost = dp[i][k] + dp[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1]
                yield t.snapshot(
                    StepKind.COMPARE,
                    f"Split after A{k + 1}: {dp[i][k]} + {dp[k + 1][j]} + {dims[i]}·{dims[k + 1]}·{dims[j + 1]} = {cost} vs {dp[i][j]}.",
                    data(i, j, k), highlights=((i, j),), comparisons=((i, k), (k + 1, j)), line=5,
                )
                if cost < dp[i][j]:
                    dp[i][j] = cost
                    parens[i][j] = f"({parens[i][k]}{parens[k + 1][j]})"
                    yield t.snapshot(
                        StepKind.UPDATE, f"New best for A{i + 1}…A{j + 1}: {cost} as {parens[i][j]}.",
                        data(i, j, k), highlights=((i, j),), updated=True, line=6,
                    )
                else:
                    yield t.snapshot(
                        StepKind.NO_UPDATE, f"Split after A{k + 1} is not cheaper.",
                        data(i, j, k), highlights=((i, j),), updated=False, line=6,
                    )

    final = data()
    final["min_operations"] = dp[0][n - 1] if n else 0
    final["optimal_parenthesization"] = parens[0][n - 1] if n else ""
    yield t.snapshot(
        StepKind.COMPLETE,
        f"Minimum scalar multiplications: {final['min_operations']} with {final['optimal_parenthesization']}.",
        final, highlights=((0, n - 1),) if n else (), line=7,
    )
