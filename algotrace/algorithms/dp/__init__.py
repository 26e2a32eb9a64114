"""
dp/
---
Dynamic-programming table fills.  Every generator seeds its base
cases first, traces each decision cell by cell, then backtracks to
recover the solution it reports.
"""

from algotrace.algorithms.dp.fibonacci               import fibonacci
from algotrace.algorithms.dp.knapsack                import knapsack
from algotrace.algorithms.dp.lcs                     import lcs
from algotrace.algorithms.dp.lis                     import lis
from algotrace.algorithms.dp.edit_distance           import edit_distance
from algotrace.algorithms.dp.coin_change             import coin_change
from algotrace.algorithms.dp.matrix_chain            import matrix_chain
from algotrace.algorithms.dp.palindrome_partitioning import palindrome_partitioning

__all__ = [
    "fibonacci",
    "knapsack",
    "lcs",
    "lis",
    "edit_distance",
    "coin_change",
    "matrix_chain",
    "palindrome_partitioning",
]
