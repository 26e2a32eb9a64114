"""
palindrome_partitioning.py — Minimum Palindrome Partitioning Cuts
==================================================================
Phase 1: is_palindrome[i][j] by increasing substring length
         (s[i] == s[j] and the inside is a palindrome).
Phase 2: cuts[i][j] = 0 for palindromes, otherwise the minimum over
         split points k of cuts[i][k] + cuts[k+1][j] + 1.
Phase 3: walk the recorded split points to recover one optimal
         partition.
"""

import math
from typing import Generator, List, Optional

from algotrace.algorithms.step import StepKind, Tracer, TraceStep


PSEUDOCODE: List[str] = [
    "def min_cuts(s):",                             # 0
    "    pal[i][i] ← True",                         # 1
    "    for len in 2 … n: pal[i][j] ← s[i]==s[j] and pal[i+1][j-1]",  # 2
    "    cuts[i][i] ← 0",                           # 3
    "    for len in 2 … n:",                        # 4
    "        if pal[i][j]: cuts[i][j] ← 0",         # 5
    "        else: cuts[i][j] ← min(cuts[i][k] + cuts[k+1][j] + 1)",  # 6
    "    return cuts[0][n-1]",                      # 7
]


def palindrome_partitioning(text: str = "aabac") -> Generator[TraceStep, None, None]:
    t = Tracer()
    n = len(text)
    is_pal: List[List[bool]] = [[False] * n for _ in range(n)]
    cuts: List[List[Optional[float]]] = [[None] * n for _ in range(n)]
    split: List[List[Optional[int]]] = [[None] * n for _ in range(n)]
    partition: List[str] = []

    def data(i: Optional[int] = None, j: Optional[int] = None, k: Optional[int] = None) -> dict:
        return {
            "text":          text,
            "is_palindrome": is_pal,
            "dp_table":      cuts,
            "current_i":     i,
            "current_j":     j,
            "current_k":     k,
            "partition":     partition,
        }

    yield t.snapshot(StepKind.INIT, f"Fewest cuts that split \"{text}\" into palindromes.", data(), line=0)
    if n == 0:
        final = data()
        final["min_cuts"] = 0
        yield t.snapshot(StepKind.COMPLETE, "Empty string: 0 cuts.", final, line=7)
        return

    # --- phase 1: palindrome table ---
    for i in range(n):
        is_pal[i][i] = True
    yield t.snapshot(
        StepKind.UPDATE, "Every single character is a palindrome.",
        data(), highlights=tuple((i, i) for i in range(n)), line=1,
    )

    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            inner = True if length == 2 else is_pal[i + 1][j - 1]
            yield t.snapshot(
                StepKind.COMPARE,
                f"\"{text[i:j + 1]}\": '{text[i]}' vs '{text[j]}', inside palindrome = {inner}.",
                data(i, j), highlights=((i, j),),
                comparisons=((i + 1, j - 1),) if length > 2 else (), line=2,
            )
            is_pal[i][j] = text[i] == text[j] and inner
            verdict = "is" if is_pal[i][j] else "is not"
            yield t.snapshot(
                StepKind.UPDATE, f"\"{text[i:j + 1]}\" {verdict} a palindrome.",
                data(i, j), highlights=((i, j),), palindrome=is_pal[i][j], line=2,
            )

    # --- phase 2: cut table ---
    for i in range(n):
        cuts[i][i] = 0
    yield t.snapshot(
        StepKind.UPDATE, "Single characters need 0 cuts.",
        data(), highlights=tuple((i, i) for i in range(n)), line=3,
    )

    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            piece = text[i:j + 1]
            if is_pal[i][j]:
                cuts[i][j] = 0
                yield t.snapshot(
                    StepKind.DECIDE, f"\"{piece}\" is a palindrome: 0 cuts.",
                    data(i, j), highlights=((i, j),), line=5,
                )
                continue

            cuts[i][j] = math.inf
            yield t.snapshot(
                StepKind.CONSIDER, f"\"{piece}\" is not a palindrome: try every split point.",
                data(i, j), highlights=((i, j),), line=6,
            )
            for k in range(i, j):
                candidate = cuts[i][k] + cuts[k + 1][j] + 1
                yield t.snapshot(
                    StepKind.COMPARE,
                    f"Split \"{text[i:k + 1]}\" | \"{text[k + 1:j + 1]}\": {cuts[i][k]} + {cuts[k + 1][j]} + 1 = {candidate}.",
                    data(i, j, k), highlights=((i, j),), comparisons=((i, k), (k + 1, j)), line=6,
                )
                if candidate < cuts[i][j]:
                    cuts[i][j] = candidate
                    split[i][j] = k
                    yield t.snapshot(
                        StepKind.UPDATE, f"cuts[{i}][{j}] = {candidate}.",
                        data(i, j, k), highlights=((i, j),), updated=True, line=6,
                    )
                else:
                    yield t.snapshot(
                        StepKind.NO_UPDATE, f"Not better than {cuts[i][j]}.",
                        data(i, j, k), highlights=((i, j),), updated=False, line=6,
                    )

    # --- phase 3: recover one partition ---
    stack = [(0, n - 1)]
    while stack:
        i, j = stack.pop()
        k = split[i][j]
        if k is None:
            partition.append(text[i:j + 1])
            yield t.snapshot(
                StepKind.BACKTRACK, f"Piece \"{text[i:j + 1]}\".",
                data(i, j), highlights=((i, j),), line=7,
            )
        else:
            stack.append((k + 1, j))
            stack.append((i, k))
            yield t.snapshot(
                StepKind.BACKTRACK, f"\"{text[i:j + 1]}\" was cut after index {k}.",
                data(i, j, k), highlights=((i, j),), line=7,
            )

    final = data()
    final["min_cuts"] = cuts[0][n - 1]
    yield t.snapshot(
        StepKind.COMPLETE, f"Minimum cuts: {cuts[0][n - 1]} → {' | '.join(partition)}.",
        final, highlights=((0, n - 1),), line=7,
    )
