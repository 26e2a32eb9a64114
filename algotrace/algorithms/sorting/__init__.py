"""
sorting/
--------
Comparison sorts over a copied input array.  Each module exposes a
generator function and its PSEUDOCODE listing.
"""

from algotrace.algorithms.sorting.bubble_sort    import bubble_sort
from algotrace.algorithms.sorting.selection_sort import selection_sort
from algotrace.algorithms.sorting.insertion_sort import insertion_sort
from algotrace.algorithms.sorting.merge_sort     import merge_sort
from algotrace.algorithms.sorting.quick_sort     import quick_sort
from algotrace.algorithms.sorting.heap_sort      import heap_sort

__all__ = [
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "heap_sort",
]
