"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the tracer knows about.

    from algotrace.algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble-sort": AlgoInfo(id, name, category, fn, reference_code, difficulty, …),
        …
    }

AlgoInfo is frozen and built once at import time.  The engine and the
HTTP layer both consume it, so adding an algorithm is: write the
generator, add one entry here.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from algotrace.errors import UnknownAlgorithmError
from algotrace.graph import samples

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algotrace.algorithms.sorting.bubble_sort    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algotrace.algorithms.sorting.selection_sort import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algotrace.algorithms.sorting.insertion_sort import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algotrace.algorithms.sorting.merge_sort     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algotrace.algorithms.sorting.quick_sort     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc
from algotrace.algorithms.sorting.heap_sort      import heap_sort      as _heap,      PSEUDOCODE as _heap_pc

from algotrace.algorithms.searching.linear_search        import linear_search        as _linear, PSEUDOCODE as _linear_pc
from algotrace.algorithms.searching.binary_search        import binary_search        as _binary, PSEUDOCODE as _binary_pc
from algotrace.algorithms.searching.jump_search          import jump_search          as _jump,   PSEUDOCODE as _jump_pc
from algotrace.algorithms.searching.interpolation_search import interpolation_search as _interp, PSEUDOCODE as _interp_pc
from algotrace.algorithms.searching.binary_search_tree   import binary_search_tree   as _bst,    PSEUDOCODE as _bst_pc
from algotrace.algorithms.searching.binary_search_tree   import OPERATIONS as _bst_ops
from algotrace.algorithms.searching.b_tree_search        import b_tree_search        as _btree,  PSEUDOCODE as _btree_pc
from algotrace.algorithms.searching.b_tree_search        import OPERATIONS as _btree_ops
from algotrace.algorithms.searching.trie_search          import trie_search          as _trie,   PSEUDOCODE as _trie_pc
from algotrace.algorithms.searching.trie_search          import OPERATIONS as _trie_ops

from algotrace.algorithms.graphs.dfs              import dfs              as _dfs,      PSEUDOCODE as _dfs_pc
from algotrace.algorithms.graphs.bfs              import bfs              as _bfs,      PSEUDOCODE as _bfs_pc
from algotrace.algorithms.graphs.dijkstra         import dijkstra         as _dijkstra, PSEUDOCODE as _dij_pc
from algotrace.algorithms.graphs.bellman_ford     import bellman_ford     as _bf,       PSEUDOCODE as _bf_pc
from algotrace.algorithms.graphs.floyd_warshall   import floyd_warshall   as _fw,       PSEUDOCODE as _fw_pc
from algotrace.algorithms.graphs.kruskal          import kruskal          as _kruskal,  PSEUDOCODE as _kruskal_pc
from algotrace.algorithms.graphs.prim             import prim             as _prim,     PSEUDOCODE as _prim_pc
from algotrace.algorithms.graphs.topological_sort import topological_sort as _topo,     PSEUDOCODE as _topo_pc
from algotrace.algorithms.graphs.topological_sort import METHODS as _topo_methods

from algotrace.algorithms.dp.fibonacci               import fibonacci               as _fib,    PSEUDOCODE as _fib_pc
from algotrace.algorithms.dp.fibonacci               import MODES as _fib_modes
from algotrace.algorithms.dp.knapsack                import knapsack                as _knap,   PSEUDOCODE as _knap_pc
from algotrace.algorithms.dp.lcs                     import lcs                     as _lcs,    PSEUDOCODE as _lcs_pc
from algotrace.algorithms.dp.lis                     import lis                     as _lis,    PSEUDOCODE as _lis_pc
from algotrace.algorithms.dp.edit_distance           import edit_distance           as _edit,   PSEUDOCODE as _edit_pc
from algotrace.algorithms.dp.coin_change             import coin_change             as _coins,  PSEUDOCODE as _coins_pc
from algotrace.algorithms.dp.matrix_chain            import matrix_chain            as _mcm,    PSEUDOCODE as _mcm_pc
from algotrace.algorithms.dp.palindrome_partitioning import palindrome_partitioning as _palin,  PSEUDOCODE as _palin_pc

from algotrace.algorithms.backtracking.n_queens         import n_queens         as _queens, PSEUDOCODE as _queens_pc
from algotrace.algorithms.backtracking.subset_sum       import subset_sum       as _subset, PSEUDOCODE as _subset_pc
from algotrace.algorithms.backtracking.sudoku           import sudoku           as _sudoku, PSEUDOCODE as _sudoku_pc
from algotrace.algorithms.backtracking.hamiltonian_path import hamiltonian_path as _hamilton, PSEUDOCODE as _hamilton_pc

LOGGER = logging.getLogger(__name__)


class Difficulty(Enum):
    EASY   = "Easy"
    MEDIUM = "Medium"
    HARD   = "Hard"


CATEGORIES: Tuple[str, ...] = ("sorting", "searching", "graph", "dp", "backtracking")


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    id:               str                     # registry key, e.g. "bubble-sort"
    name:             str                     # human label, e.g. "Bubble Sort"
    category:         str                     # one of CATEGORIES
    fn:               Callable                # the generator function
    reference_code:   Tuple[str, ...]         # pseudocode lines; steps point into it via metadata["line"]
    difficulty:       Difficulty = Difficulty.MEDIUM
    time_complexity:  str        = ""         # e.g. "O(n²)"
    space_complexity: str        = ""         # e.g. "O(1)"
    description:      str        = ""         # one-liner for the UI card
    tags:             Tuple[str, ...] = ()
    sample:           Optional[Callable] = None                  # graph factory for graph algorithms
    choices:          Mapping[str, Tuple[str, ...]] = field(default_factory=dict)  # enumerated params
    directed_only:    bool = False                               # graph param must be directed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":               self.id,
            "name":             self.name,
            "category":         self.category,
            "description":      self.description,
            "time_complexity":  self.time_complexity,
            "space_complexity": self.space_complexity,
            "difficulty":       self.difficulty.value,
            "reference_code":   list(self.reference_code),
            "tags":             list(self.tags),
            "choices":          {k: list(v) for k, v in self.choices.items()},
        }


def _info(pseudocode: List[str], **kwargs) -> AlgoInfo:
    return AlgoInfo(reference_code=tuple(pseudocode), **kwargs)


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
_ENTRIES: List[AlgoInfo] = [

    # --- sorting -------------------------------------------------------
    _info(
        _bubble_pc, id="bubble-sort", name="Bubble Sort", category="sorting", fn=_bubble,
        difficulty=Difficulty.EASY, time_complexity="O(n²)", space_complexity="O(1)",
        tags=("comparison", "in-place", "stable"),
        description="Repeatedly compares adjacent elements and swaps them when they are out of order.",
    ),
    _info(
        _selection_pc, id="selection-sort", name="Selection Sort", category="sorting", fn=_selection,
        difficulty=Difficulty.EASY, time_complexity="O(n²)", space_complexity="O(1)",
        tags=("comparison", "in-place"),
        description="Selects the smallest element of the unsorted region and moves it to the front.",
    ),
    _info(
        _insertion_pc, id="insertion-sort", name="Insertion Sort", category="sorting", fn=_insertion,
        difficulty=Difficulty.EASY, time_complexity="O(n²)", space_complexity="O(1)",
        tags=("comparison", "in-place", "stable"),
        description="Builds the sorted prefix one item at a time by sinking each new element into place.",
    ),
    _info(
        _merge_pc, id="merge-sort", name="Merge Sort", category="sorting", fn=_merge,
        difficulty=Difficulty.MEDIUM, time_complexity="O(n log n)", space_complexity="O(n)",
        tags=("comparison", "divide-and-conquer", "stable"),
        description="Splits the array in halves, sorts each half recursively and merges the results.",
    ),
    _info(
        _quick_pc, id="quick-sort", name="Quick Sort", category="sorting", fn=_quick,
        difficulty=Difficulty.MEDIUM, time_complexity="O(n log n)", space_complexity="O(log n)",
        tags=("comparison", "divide-and-conquer", "in-place"),
        description="Partitions around the last element as pivot, then sorts both sides recursively.",
    ),
    _info(
        _heap_pc, id="heap-sort", name="Heap Sort", category="sorting", fn=_heap,
        difficulty=Difficulty.MEDIUM, time_complexity="O(n log n)", space_complexity="O(1)",
        tags=("comparison", "in-place", "heap"),
        description="Builds a max-heap, then repeatedly moves the root to the end and restores the heap.",
    ),

    # --- searching -----------------------------------------------------
    _info(
        _linear_pc, id="linear-search", name="Linear Search", category="searching", fn=_linear,
        difficulty=Difficulty.EASY, time_complexity="O(n)", space_complexity="O(1)",
        tags=("unsorted",),
        description="Checks every element in order until the target is found or the array ends.",
    ),
    _info(
        _binary_pc, id="binary-search", name="Binary Search", category="searching", fn=_binary,
        difficulty=Difficulty.MEDIUM, time_complexity="O(log n)", space_complexity="O(1)",
        tags=("sorted", "divide-and-conquer"),
        description="Halves the search interval of a sorted array on every comparison.",
    ),
    _info(
        _jump_pc, id="jump-search", name="Jump Search", category="searching", fn=_jump,
        difficulty=Difficulty.MEDIUM, time_complexity="O(√n)", space_complexity="O(1)",
        tags=("sorted",),
        description="Jumps ahead by √n-sized blocks, then scans linearly inside the block.",
    ),
    _info(
        _interp_pc, id="interpolation-search", name="Interpolation Search", category="searching", fn=_interp,
        difficulty=Difficulty.HARD, time_complexity="O(log log n)", space_complexity="O(1)",
        tags=("sorted", "uniform"),
        description="Estimates the target's position from the values at the ends of the interval.",
    ),
    _info(
        _bst_pc, id="binary-search-tree", name="Binary Search Tree", category="searching", fn=_bst,
        difficulty=Difficulty.MEDIUM, time_complexity="O(log n)", space_complexity="O(n)",
        tags=("tree", "dynamic-set"), choices={"operation": _bst_ops},
        description="Search, insert or delete a key, going left for smaller keys and right for larger ones.",
    ),
    _info(
        _btree_pc, id="b-tree-search", name="B-Tree Search", category="searching", fn=_btree,
        difficulty=Difficulty.HARD, time_complexity="O(log n)", space_complexity="O(n)",
        tags=("tree", "balanced", "multiway"), choices={"operation": _btree_ops},
        description="Multi-key nodes kept balanced by splitting full nodes on the way down.",
    ),
    _info(
        _trie_pc, id="trie-search", name="Trie Search", category="searching", fn=_trie,
        difficulty=Difficulty.HARD, time_complexity="O(m)", space_complexity="O(n · m)",
        tags=("tree", "strings", "prefix"), choices={"operation": _trie_ops},
        description="Character-by-character prefix tree: finds every stored word with a given prefix.",
    ),

    # --- graph -----------------------------------------------------------
    _info(
        _dfs_pc, id="dfs", name="Depth-First Search", category="graph", fn=_dfs,
        difficulty=Difficulty.MEDIUM, time_complexity="O(V + E)", space_complexity="O(V)",
        tags=("traversal", "unweighted"), sample=samples.traversal_graph,
        description="Dives along each branch as far as possible before backtracking.",
    ),
    _info(
        _bfs_pc, id="bfs", name="Breadth-First Search", category="graph", fn=_bfs,
        difficulty=Difficulty.MEDIUM, time_complexity="O(V + E)", space_complexity="O(V)",
        tags=("traversal", "unweighted", "shortest-path"), sample=samples.traversal_graph,
        description="Explores the graph level by level from the start vertex.",
    ),
    _info(
        _dij_pc, id="dijkstra", name="Dijkstra's Algorithm", category="graph", fn=_dijkstra,
        difficulty=Difficulty.HARD, time_complexity="O(V²)", space_complexity="O(V)",
        tags=("weighted", "shortest-path"), sample=samples.shortest_path_graph,
        description="Settles the closest unvisited vertex each round. Needs non-negative weights.",
    ),
    _info(
        _bf_pc, id="bellman-ford", name="Bellman-Ford", category="graph", fn=_bf,
        difficulty=Difficulty.HARD, time_complexity="O(V · E)", space_complexity="O(V)",
        tags=("weighted", "shortest-path", "negative-edges"), sample=samples.bellman_ford_graph,
        description="Relaxes every edge V-1 times; a further pass detects negative cycles.",
    ),
    _info(
        _fw_pc, id="floyd-warshall", name="Floyd-Warshall", category="graph", fn=_fw,
        difficulty=Difficulty.HARD, time_complexity="O(V³)", space_complexity="O(V²)",
        tags=("weighted", "all-pairs", "negative-edges"), sample=samples.floyd_warshall_graph,
        description="All-pairs shortest paths, admitting one intermediate vertex per round.",
    ),
    _info(
        _kruskal_pc, id="kruskal", name="Kruskal's Algorithm", category="graph", fn=_kruskal,
        difficulty=Difficulty.MEDIUM, time_complexity="O(E log E)", space_complexity="O(V)",
        tags=("weighted", "mst", "union-find"), sample=samples.mst_graph,
        description="Takes edges cheapest first, skipping any that would close a cycle.",
    ),
    _info(
        _prim_pc, id="prim", name="Prim's Algorithm", category="graph", fn=_prim,
        difficulty=Difficulty.MEDIUM, time_complexity="O(V²)", space_complexity="O(V)",
        tags=("weighted", "mst"), sample=samples.mst_graph,
        description="Grows a spanning tree from the start vertex by its cheapest crossing edge.",
    ),
    _info(
        _topo_pc, id="topological-sort", name="Topological Sort", category="graph", fn=_topo,
        difficulty=Difficulty.MEDIUM, time_complexity="O(V + E)", space_complexity="O(V)",
        tags=("dag", "ordering"), sample=samples.dag, choices={"method": _topo_methods},
        directed_only=True,
        description="Orders the vertices of a DAG so every edge points forward; reports cycles.",
    ),

    # --- dynamic programming ---------------------------------------------
    _info(
        _fib_pc, id="fibonacci", name="Fibonacci Sequence", category="dp", fn=_fib,
        difficulty=Difficulty.EASY, time_complexity="O(n)", space_complexity="O(n)",
        tags=("1d-table", "memoization"), choices={"mode": _fib_modes},
        description="F(n) = F(n-1) + F(n-2), tabulated bottom-up or memoized top-down.",
    ),
    _info(
        _knap_pc, id="knapsack", name="0/1 Knapsack", category="dp", fn=_knap,
        difficulty=Difficulty.MEDIUM, time_complexity="O(nW)", space_complexity="O(nW)",
        tags=("2d-table", "optimization"),
        description="Best total value of items that fit the capacity, each taken at most once.",
    ),
    _info(
        _lcs_pc, id="lcs", name="Longest Common Subsequence", category="dp", fn=_lcs,
        difficulty=Difficulty.MEDIUM, time_complexity="O(mn)", space_complexity="O(mn)",
        tags=("2d-table", "strings"),
        description="Longest sequence of characters appearing in both strings in order.",
    ),
    _info(
        _lis_pc, id="lis", name="Longest Increasing Subsequence", category="dp", fn=_lis,
        difficulty=Difficulty.MEDIUM, time_complexity="O(n²)", space_complexity="O(n)",
        tags=("1d-table",),
        description="Longest strictly increasing subsequence of the array.",
    ),
    _info(
        _edit_pc, id="edit-distance", name="Edit Distance (Levenshtein)", category="dp", fn=_edit,
        difficulty=Difficulty.HARD, time_complexity="O(mn)", space_complexity="O(mn)",
        tags=("2d-table", "strings"),
        description="Fewest insertions, deletions and replacements turning one string into another.",
    ),
    _info(
        _coins_pc, id="coin-change", name="Coin Change", category="dp", fn=_coins,
        difficulty=Difficulty.MEDIUM, time_complexity="O(amount × coins)", space_complexity="O(amount)",
        tags=("1d-table", "optimization"),
        description="Fewest coins summing to the amount, or -1 when it cannot be made.",
    ),
    _info(
        _mcm_pc, id="matrix-chain", name="Matrix Chain Multiplication", category="dp", fn=_mcm,
        difficulty=Difficulty.HARD, time_complexity="O(n³)", space_complexity="O(n²)",
        tags=("2d-table", "interval", "optimization"),
        description="Cheapest parenthesization of a chain of matrix products.",
    ),
    _info(
        _palin_pc, id="palindrome-partitioning", name="Palindrome Partitioning", category="dp", fn=_palin,
        difficulty=Difficulty.HARD, time_complexity="O(n³)", space_complexity="O(n²)",
        tags=("2d-table", "strings", "interval"),
        description="Fewest cuts splitting a string into palindromic pieces.",
    ),

    # --- backtracking ----------------------------------------------------
    _info(
        _queens_pc, id="n-queens", name="N-Queens", category="backtracking", fn=_queens,
        difficulty=Difficulty.HARD, time_complexity="O(N!)", space_complexity="O(N)",
        tags=("constraint-satisfaction",),
        description="Places N queens on an N×N board so that no two attack each other.",
    ),
    _info(
        _subset_pc, id="subset-sum", name="Subset Sum", category="backtracking", fn=_subset,
        difficulty=Difficulty.MEDIUM, time_complexity="O(2^n)", space_complexity="O(n)",
        tags=("search", "pruning"),
        description="Finds a subset of non-negative numbers that adds up to the target.",
    ),
    _info(
        _sudoku_pc, id="sudoku-solver", name="Sudoku Solver", category="backtracking", fn=_sudoku,
        difficulty=Difficulty.HARD, time_complexity="O(9^(n·n))", space_complexity="O(n·n)",
        tags=("constraint-satisfaction", "grid"),
        description="Fills empty cells with the first digit that clashes with nothing, undoing dead ends.",
    ),
    _info(
        _hamilton_pc, id="hamiltonian-path", name="Hamiltonian Path", category="backtracking", fn=_hamilton,
        difficulty=Difficulty.HARD, time_complexity="O(N!)", space_complexity="O(N)",
        tags=("search", "graph"), sample=samples.hamiltonian_graph,
        description="Finds a path that visits every vertex exactly once.",
    ),
]

REGISTRY: Dict[str, AlgoInfo] = {info.id: info for info in _ENTRIES}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(algo_id: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by id, or None."""
    return REGISTRY.get(algo_id)


def require_algorithm(algo_id: str) -> AlgoInfo:
    """Return AlgoInfo by id; raise UnknownAlgorithmError if it isn't registered."""
    info = REGISTRY.get(algo_id)
    if info is None:
        LOGGER.warning("Rejected unknown algorithm id %r", algo_id)
        raise UnknownAlgorithmError(algo_id)
    return info


def list_algorithms(category: Optional[str] = None) -> List[AlgoInfo]:
    """Return registered algorithms in insertion order, optionally for one category."""
    if category is None:
        return list(REGISTRY.values())
    return algorithms_by_category(category)


def algorithms_by_category(category: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.category == category]


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "CATEGORIES",
    "Difficulty",
    "REGISTRY",
    "get_algorithm",
    "require_algorithm",
    "list_algorithms",
    "algorithms_by_category",
    "algorithms_by_tag",
]
