"""
backtracking/
-------------
Depth-first search over choices, with explicit place / reject /
backtrack steps.
"""

from algotrace.algorithms.backtracking.n_queens   import n_queens
from algotrace.algorithms.backtracking.subset_sum import subset_sum
from algotrace.algorithms.backtracking.sudoku     import sudoku
from algotrace.algorithms.backtracking.hamiltonian_path import hamiltonian_path

__all__ = [
    "n_queens",
    "subset_sum",
    "sudoku",
    "hamiltonian_path",
]
