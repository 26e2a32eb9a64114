"""
b_tree_search.py — B-Tree Search and Insert
============================================
`order` is the minimum degree t: every node holds at most 2t-1 keys and
every node but the root at least t-1.  The tree is built by inserting
`keys` in order (repeats are dropped), then one operation on `value` is
traced:

  • "search" – scan each node's keys left to right; stop on a match,
               otherwise descend into the child left of the first
               larger key
  • "insert" – single pass down from the root, splitting every full
               node on the way so the leaf always has room

Data:
  • "tree"    – nested {"keys", "children"} dicts
  • "path"    – key lists of the nodes visited, root first
  • "current" – key list of the node being looked at
  • "keys"    – every key in order (terminal step only)
"""

from bisect import bisect_left, insort
from typing import Any, Dict, Generator, List, Optional, Sequence

from algotrace.algorithms.step import StepKind, Tracer, TraceStep


PSEUDOCODE: List[str] = [
    "def search(node, x):",                         # 0
    "    i ← first index with x ≤ node.keys[i]",    # 1
    "    if node.keys[i] == x: return (node, i)",   # 2
    "    if node is a leaf: return None",           # 3
    "    return search(node.children[i], x)",       # 4
    "def insert(x):",                               # 5
    "    if root is full: split root",              # 6
    "    while node is not a leaf:",                # 7
    "        if child i is full: split it",         # 8
    "    put x into the leaf in order",             # 9
]

OPERATIONS = ("search", "insert")


class BTreeNode:
    __slots__ = ("keys", "children")

    def __init__(self, keys: Optional[List[float]] = None, children: Optional[List["BTreeNode"]] = None):
        self.keys: List[float] = keys or []
        self.children: List["BTreeNode"] = children or []

    @property
    def leaf(self) -> bool:
        return not self.children

    def to_dict(self) -> Dict[str, Any]:
        return {"keys": list(self.keys), "children": [c.to_dict() for c in self.children]}


class BTree:
    """
    Attributes:
        order : Minimum degree t.
        root  : Root node; an empty leaf for an empty tree.
    """

    def __init__(self, order: int = 3):
        self.order = order
        self.root = BTreeNode()

    @property
    def max_keys(self) -> int:
        return 2 * self.order - 1

    def is_full(self, node: BTreeNode) -> bool:
        return len(node.keys) == self.max_keys

    def contains(self, key: float) -> bool:
        node = self.root
        while True:
            i = bisect_left(node.keys, key)
            if i < len(node.keys) and node.keys[i] == key:
                return True
            if node.leaf:
                return False
            node = node.children[i]

    def split_child(self, parent: BTreeNode, i: int) -> float:
        """Split the full child parent.children[i]; its median moves up into parent."""
        t = self.order
        child = parent.children[i]
        median = child.keys[t - 1]
        right = BTreeNode(child.keys[t:], child.children[t:])
        child.keys = child.keys[:t - 1]
        child.children = child.children[:t]
        parent.keys.insert(i, median)
        parent.children.insert(i + 1, right)
        return median

    def split_root(self) -> float:
        self.root = BTreeNode(children=[self.root])
        return self.split_child(self.root, 0)

    def insert(self, key: float) -> None:
        if self.contains(key):
            return
        if self.is_full(self.root):
            self.split_root()
        node = self.root
        while not node.leaf:
            i = bisect_left(node.keys, key)
            if self.is_full(node.children[i]):
                self.split_child(node, i)
                if key > node.keys[i]:
                    i += 1
            node = node.children[i]
        insort(node.keys, key)

    def in_order(self, node: Optional[BTreeNode] = None) -> List[float]:
        node = self.root if node is None else node
        if node.leaf:
            return list(node.keys)
        keys: List[float] = []
        for child, key in zip(node.children, node.keys):
            keys += self.in_order(child)
            keys.append(key)
        return keys + self.in_order(node.children[-1])


def b_tree_search(
    keys: Sequence[float] = (10, 20, 30, 40, 50, 60, 70, 80, 90, 100),
    operation: str = "search",
    value: float = 55,
    order: int = 3,
) -> Generator[TraceStep, None, None]:
    t = Tracer()
    tree = BTree(order)
    for key in keys:
        tree.insert(key)
    path: List[List[float]] = []

    def data(node: Optional[BTreeNode] = None) -> dict:
        return {
            "tree":    tree.root.to_dict(),
            "path":    path,
            "current": list(node.keys) if node is not None else None,
            "order":   order,
        }

    def final_data() -> dict:
        final = data()
        final["keys"] = tree.in_order()
        return final

    yield t.snapshot(
        StepKind.INIT,
        f"{operation.capitalize()} {value} in a B-tree of minimum degree {order} (at most {tree.max_keys} keys per node).",
        data(), operation=operation, value=value, line=0 if operation == "search" else 5,
    )

    if operation == "search":
        node = tree.root
        while True:
            path.append(list(node.keys))
            yield t.snapshot(StepKind.VISIT, f"Visit node {node.keys}.", data(node), highlights=tuple(node.keys), line=1)
            i = 0
            while i < len(node.keys):
                key = node.keys[i]
                yield t.snapshot(
                    StepKind.COMPARE, f"Compare {value} with {key}.",
                    data(node), highlights=tuple(node.keys), comparisons=(key,), line=1,
                )
                if value <= key:
                    break
                i += 1
            if i < len(node.keys) and node.keys[i] == value:
                yield t.snapshot(
                    StepKind.COMPLETE, f"Found {value} at position {i} of node {node.keys}.", final_data(),
                    highlights=(value,), found=True, index=i, line=2,
                )
                return
            if node.leaf:
                yield t.snapshot(
                    StepKind.COMPLETE, f"{value} would sit in leaf {node.keys} but is not there.", final_data(),
                    found=False, index=-1, line=3,
                )
                return
            node = node.children[i]
            yield t.snapshot(
                StepKind.DECIDE, f"Descend into child {i}: {node.keys}.",
                data(node), highlights=tuple(node.keys), line=4,
            )

    # insert
    if tree.contains(value):
        yield t.snapshot(
            StepKind.COMPLETE, f"{value} is already in the tree.", final_data(),
            highlights=(value,), inserted=False, already_exists=True, line=5,
        )
        return

    if tree.is_full(tree.root):
        median = tree.split_root()
        yield t.snapshot(
            StepKind.UPDATE, f"The root is full: split it and lift {median} into a new root.",
            data(tree.root), highlights=(median,), split=True, line=6,
        )

    node = tree.root
    while not node.leaf:
        path.append(list(node.keys))
        i = bisect_left(node.keys, value)
        yield t.snapshot(
            StepKind.VISIT, f"{value} belongs under child {i} of {node.keys}.",
            data(node), highlights=tuple(node.keys), line=7,
        )
        if tree.is_full(node.children[i]):
            median = tree.split_child(node, i)
            yield t.snapshot(
                StepKind.UPDATE, f"Child {i} is full: split it and lift {median} into {node.keys}.",
                data(node), highlights=(median,), split=True, line=8,
            )
            if value > node.keys[i]:
                i += 1
        node = node.children[i]

    path.append(list(node.keys))
    insort(node.keys, value)
    yield t.snapshot(
        StepKind.UPDATE, f"Put {value} into leaf {node.keys}.",
        data(node), highlights=(value,), line=9,
    )
    yield t.snapshot(
        StepKind.COMPLETE, f"Inserted {value}.", final_data(),
        highlights=(value,), inserted=True, already_exists=False, line=9,
    )
