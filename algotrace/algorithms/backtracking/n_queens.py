"""
n_queens.py — N-Queens
=======================
Place one queen per row, trying columns left to right.  A conflict
with an earlier queen (same column or diagonal) rejects the square;
a row with no safe square backtracks into the previous row.  Stops at
the first solution.
"""

from typing import Generator, List

from algotrace.algorithms.step import StepKind, Tracer, TraceStep


PSEUDOCODE: List[str] = [
    "def solve(row):",                              # 0
    "    if row == n: return True",                 # 1
    "    for col in 0 … n-1:",                      # 2
    "        if safe(row, col):",                   # 3
    "            place queen at (row, col)",        # 4
    "            if solve(row + 1): return True",   # 5
    "            remove queen",                     # 6
    "    return False",                             # 7
]


def n_queens(n: int = 8) -> Generator[TraceStep, None, None]:
    t = Tracer()
    queens: List[int] = []

    def data(row=None, col=None) -> dict:
        board = [[1 if queens[r] == c else 0 for c in range(n)] if r < len(queens) else [0] * n for r in range(n)]
        return {"n": n, "board": board, "queens": queens, "current_row": row, "current_col": col}

    def conflict(row: int, col: int):
        for r, c in enumerate(queens):
            if c == col or abs(c - col) == row - r:
                return r, c
        return None

    def solve(row: int) -> Generator[TraceStep, None, bool]:
        if row == n:
            return True
        for col in range(n):
            clash = conflict(row, col)
            if clash is not None:
                yield t.snapshot(
                    StepKind.NO_UPDATE, f"({row}, {col}) is attacked by the queen at {clash}.",
                    data(row, col), highlights=((row, col),), comparisons=(clash,), line=3,
                )
                continue
            queens.append(col)
            yield t.snapshot(
                StepKind.UPDATE, f"Place a queen at ({row}, {col}).",
                data(row, col), highlights=((row, col),), line=4,
            )
            solved = yield from solve(row + 1)
            if solved:
                return True
            queens.pop()
            yield t.snapshot(
                StepKind.BACKTRACK, f"No safe square below ({row}, {col}): remove the queen.",
                data(row, col), highlights=((row, col),), line=6,
            )
        return False

    yield t.snapshot(StepKind.INIT, f"Place {n} queens on a {n}×{n} board.", data(), line=0)
    solved = yield from solve(0)

    final = data()
    final["solved"] = solved
    description = f"Solution: queens in columns {queens}." if solved else f"No solution for n = {n}."
    yield t.snapshot(StepKind.COMPLETE, description, final, highlights=tuple(enumerate(queens)), line=1)
