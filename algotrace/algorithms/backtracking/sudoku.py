"""
sudoku.py — Sudoku Solver
==========================
Fills the first empty cell in row-major order with the first digit
1 … n that clashes with nothing in its row, column or box, then moves on
to the next empty cell.  A cell with no legal digit left undoes the
previous placement.  Stops at the first solution.

Boards are 4×4 or 9×9 lists of rows; 0 marks an empty cell.

Data:
  • "board"         – the grid as filled so far
  • "given"         – True for the cells that started filled
  • "current_cell"  – (row, col) being filled, or None
  • "invalid_cells" – the cells a rejected digit clashes with
  • "backtracks"    – placements undone so far
"""

import math
from typing import Generator, List, Optional, Sequence, Tuple

from algotrace.algorithms.step import StepKind, Tracer, TraceStep


PSEUDOCODE: List[str] = [
    "def solve(board):",                            # 0
    "    cell ← first empty cell",                  # 1
    "    if no cell: return True",                  # 2
    "    for d in 1 … n:",                          # 3
    "        if d clashes in row, column or box: continue",  # 4
    "        board[cell] ← d",                      # 5
    "        if solve(board): return True",         # 6
    "        board[cell] ← 0",                      # 7
    "    return False",                             # 8
]

PUZZLE: Tuple[Tuple[int, ...], ...] = (
    (5, 3, 0, 0, 7, 0, 0, 0, 0),
    (6, 0, 0, 1, 9, 5, 0, 0, 0),
    (0, 9, 8, 0, 0, 0, 0, 6, 0),
    (8, 0, 0, 0, 6, 0, 0, 0, 3),
    (4, 0, 0, 8, 0, 3, 0, 0, 1),
    (7, 0, 0, 0, 2, 0, 0, 0, 6),
    (0, 6, 0, 0, 0, 0, 2, 8, 0),
    (0, 0, 0, 4, 1, 9, 0, 0, 5),
    (0, 0, 0, 0, 8, 0, 0, 7, 9),
)

Cell = Tuple[int, int]


def clashes(board: List[List[int]], row: int, col: int, digit: int) -> List[Cell]:
    """Cells in the row, column or box of (row, col) already holding digit."""
    n = len(board)
    box = math.isqrt(n)
    top, left = row - row % box, col - col % box
    found = {(row, c) for c in range(n) if board[row][c] == digit}
    found |= {(r, col) for r in range(n) if board[r][col] == digit}
    found |= {
        (r, c)
        for r in range(top, top + box)
        for c in range(left, left + box)
        if board[r][c] == digit
    }
    found.discard((row, col))
    return sorted(found)


def sudoku(board: Optional[Sequence[Sequence[int]]] = None) -> Generator[TraceStep, None, None]:
    if board is None:
        board = PUZZLE
    t = Tracer()
    grid = [list(row) for row in board]
    n = len(grid)
    given = [[v != 0 for v in row] for row in grid]
    counter = {"backtracks": 0}

    def data(cell: Optional[Cell] = None, invalid: Sequence[Cell] = ()) -> dict:
        return {
            "board":         grid,
            "given":         given,
            "current_cell":  cell,
            "invalid_cells": list(invalid),
            "backtracks":    counter["backtracks"],
        }

    def next_empty() -> Optional[Cell]:
        for r in range(n):
            for c in range(n):
                if grid[r][c] == 0:
                    return r, c
        return None

    def solve() -> Generator[TraceStep, None, bool]:
        cell = next_empty()
        if cell is None:
            return True
        row, col = cell
        yield t.snapshot(StepKind.CONSIDER, f"Next empty cell: {cell}.", data(cell), highlights=(cell,), line=1)

        for digit in range(1, n + 1):
            clash = clashes(grid, row, col, digit)
            if clash:
                yield t.snapshot(
                    StepKind.NO_UPDATE, f"{digit} at {cell} clashes with {clash}.",
                    data(cell, clash), highlights=(cell,), comparisons=clash, digit=digit, line=4,
                )
                continue
            grid[row][col] = digit
            yield t.snapshot(
                StepKind.UPDATE, f"Place {digit} at {cell}.",
                data(cell), highlights=(cell,), digit=digit, line=5,
            )
            solved = yield from solve()
            if solved:
                return True
            grid[row][col] = 0
            counter["backtracks"] += 1
            yield t.snapshot(
                StepKind.BACKTRACK, f"{digit} at {cell} leads nowhere: clear the cell.",
                data(cell), highlights=(cell,), digit=digit, line=7,
            )
        return False

    empty = sum(row.count(0) for row in grid)
    yield t.snapshot(StepKind.INIT, f"Solve a {n}×{n} Sudoku with {empty} empty cells.", data(), line=0)
    solved = yield from solve()

    final = data()
    final["solved"] = solved
    description = "Sudoku solved." if solved else "This Sudoku has no solution."
    yield t.snapshot(StepKind.COMPLETE, description, final, solved=solved, line=2)
