"""
binary_search_tree.py — Binary Search Tree
===========================================
Builds an unbalanced BST by inserting `keys` in order (repeats are
dropped), then traces one operation on `value`:

  • "search" – walk down from the root, left when smaller, right when larger
  • "insert" – the same walk; the value is attached where it fell off
  • "delete" – the same walk, then
                 leaf        → removed
                 one child   → replaced by that child
                 two children→ takes its in-order successor's key and the
                               successor node is spliced out

Data:
  • "tree"    – nested {"key", "left", "right"} dicts, None when empty
  • "path"    – keys compared so far, root first
  • "current" – key of the node being looked at
  • "keys"    – in-order key list (terminal step only)
"""

from typing import Any, Dict, Generator, List, Optional, Sequence, Tuple

from algotrace.algorithms.step import StepKind, Tracer, TraceStep


PSEUDOCODE: List[str] = [
    "def find(node, x):",                           # 0
    "    if node is None: return None",             # 1
    "    if x == node.key: return node",            # 2
    "    if x < node.key: return find(node.left, x)",   # 3
    "    return find(node.right, x)",               # 4
    "insert: attach x where find fell off",         # 5
    "delete ≤1 child: splice the child in",         # 6
    "delete 2 children: s ← min(node.right)",       # 7
    "    node.key ← s.key; splice s out",           # 8
]

OPERATIONS = ("search", "insert", "delete")


class Node:
    __slots__ = ("key", "left", "right")

    def __init__(self, key: float):
        self.key = key
        self.left: Optional["Node"] = None
        self.right: Optional["Node"] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key":   self.key,
            "left":  self.left.to_dict() if self.left is not None else None,
            "right": self.right.to_dict() if self.right is not None else None,
        }


def build(keys: Sequence[float]) -> Optional[Node]:
    root: Optional[Node] = None
    for key in keys:
        if root is None:
            root = Node(key)
            continue
        node = root
        while key != node.key:
            side = "left" if key < node.key else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, Node(key))
                break
            node = child
    return root


def inorder(node: Optional[Node]) -> List[float]:
    if node is None:
        return []
    return inorder(node.left) + [node.key] + inorder(node.right)


def binary_search_tree(
    keys: Sequence[float] = (50, 30, 70, 20, 40, 60, 80),
    operation: str = "search",
    value: float = 45,
) -> Generator[TraceStep, None, None]:
    t = Tracer()
    tree = {"root": build(keys)}
    path: List[float] = []

    def data(current: Optional[float] = None) -> dict:
        root = tree["root"]
        return {
            "tree":    root.to_dict() if root is not None else None,
            "path":    path,
            "current": current,
        }

    def final_data() -> dict:
        final = data()
        final["keys"] = inorder(tree["root"])
        return final

    def walk() -> Generator[TraceStep, None, Tuple[Optional[Node], Optional[Node]]]:
        parent, node = None, tree["root"]
        while node is not None:
            path.append(node.key)
            yield t.snapshot(
                StepKind.COMPARE, f"Compare {value} with {node.key}.",
                data(node.key), highlights=(node.key,), line=2,
            )
            if value == node.key:
                return parent, node
            if value < node.key:
                reason, line = f"{value} < {node.key}: go left.", 3
            else:
                reason, line = f"{value} > {node.key}: go right.", 4
            yield t.snapshot(StepKind.DECIDE, reason, data(node.key), highlights=(node.key,), line=line)
            parent, node = node, node.left if value < node.key else node.right
        return parent, None

    def splice(parent: Optional[Node], node: Node, child: Optional[Node]) -> None:
        if parent is None:
            tree["root"] = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    yield t.snapshot(
        StepKind.INIT, f"{operation.capitalize()} {value} in the BST built from {list(keys)}.",
        data(), operation=operation, value=value, line=0,
    )
    parent, node = yield from walk()

    if operation == "search":
        if node is not None:
            yield t.snapshot(
                StepKind.COMPLETE, f"Found {value} after {len(path)} comparison(s).", final_data(),
                highlights=(value,), found=True, line=2,
            )
        else:
            yield t.snapshot(
                StepKind.COMPLETE, f"{value} is not in the tree.", final_data(), found=False, line=1,
            )
        return

    if operation == "insert":
        if node is not None:
            yield t.snapshot(
                StepKind.COMPLETE, f"{value} is already in the tree.", final_data(),
                highlights=(value,), inserted=False, already_exists=True, line=2,
            )
            return
        leaf = Node(value)
        if parent is None:
            tree["root"] = leaf
            description = f"The tree is empty: {value} becomes the root."
        elif value < parent.key:
            parent.left = leaf
            description = f"Attach {value} as the left child of {parent.key}."
        else:
            parent.right = leaf
            description = f"Attach {value} as the right child of {parent.key}."
        yield t.snapshot(StepKind.UPDATE, description, data(value), highlights=(value,), line=5)
        yield t.snapshot(
            StepKind.COMPLETE, f"Inserted {value}.", final_data(),
            highlights=(value,), inserted=True, already_exists=False, line=5,
        )
        return

    # delete
    if node is None:
        yield t.snapshot(
            StepKind.COMPLETE, f"{value} is not in the tree: nothing to delete.", final_data(),
            deleted=False, line=1,
        )
        return

    if node.left is not None and node.right is not None:
        succ_parent, succ = node, node.right
        yield t.snapshot(
            StepKind.CONSIDER, f"{value} has two children: find the smallest key right of it, from {succ.key}.",
            data(succ.key), highlights=(value, succ.key), line=7,
        )
        while succ.left is not None:
            succ_parent, succ = succ, succ.left
            yield t.snapshot(
                StepKind.CONSIDER, f"Go left to {succ.key}.",
                data(succ.key), highlights=(value, succ.key), line=7,
            )
        node.key = succ.key
        yield t.snapshot(
            StepKind.UPDATE, f"Copy successor {succ.key} over {value}.",
            data(succ.key), highlights=(succ.key,), line=8,
        )
        splice(succ_parent, succ, succ.right)
        yield t.snapshot(
            StepKind.UPDATE, "Splice the successor's old node out.",
            data(succ.key), highlights=(succ.key,), line=8,
        )
    else:
        child = node.left if node.left is not None else node.right
        splice(parent, node, child)
        if child is None:
            description = f"{value} is a leaf: remove it."
        else:
            description = f"{value} has one child: {child.key} takes its place."
        yield t.snapshot(
            StepKind.UPDATE, description,
            data(child.key if child is not None else None),
            highlights=(child.key,) if child is not None else (), line=6,
        )

    yield t.snapshot(StepKind.COMPLETE, f"Deleted {value}.", final_data(), deleted=True, line=6)
