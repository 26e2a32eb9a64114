"""
searching/
----------
Searches over a copied input array (all but linear search work on an
ascending copy), and searches in trees built from the input keys.
"""

from algotrace.algorithms.searching.linear_search        import linear_search
from algotrace.algorithms.searching.binary_search        import binary_search
from algotrace.algorithms.searching.jump_search          import jump_search
from algotrace.algorithms.searching.interpolation_search import interpolation_search
from algotrace.algorithms.searching.binary_search_tree   import binary_search_tree
from algotrace.algorithms.searching.b_tree_search        import b_tree_search
from algotrace.algorithms.searching.trie_search          import trie_search

__all__ = [
    "linear_search",
    "binary_search",
    "jump_search",
    "interpolation_search",
    "binary_search_tree",
    "b_tree_search",
    "trie_search",
]
