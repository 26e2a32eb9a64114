from __future__ import annotations

import pytest

from algotrace.algorithms.searching import b_tree_search, binary_search_tree, trie_search
from algotrace.algorithms.searching.b_tree_search import BTree
from algotrace.algorithms.searching.trie_search import Trie
from algotrace.algorithms.step import StepKind


def _kinds(steps) -> list:
    return [s.kind for s in steps]


# ---------------------------------------------------------------------------
# Binary search tree
# ---------------------------------------------------------------------------
def test_bst_search_found() -> None:
    steps = list(binary_search_tree(operation="search", value=60))

    assert steps[-1].metadata["found"] is True
    assert steps[-1].data["path"] == [50, 70, 60]
    assert _kinds(steps).count(StepKind.COMPARE) == 3


def test_bst_default_search_misses() -> None:
    last = list(binary_search_tree())[-1]

    assert last.metadata["found"] is False
    assert last.data["path"] == [50, 30, 40]
    assert last.data["keys"] == [20, 30, 40, 50, 60, 70, 80]


def test_bst_insert_attaches_where_the_search_fell_off() -> None:
    last = list(binary_search_tree(operation="insert", value=45))[-1]

    assert last.metadata["inserted"] is True
    assert last.data["tree"]["left"]["right"]["right"]["key"] == 45
    assert last.data["keys"] == [20, 30, 40, 45, 50, 60, 70, 80]


def test_bst_insert_existing_key() -> None:
    last = list(binary_search_tree(operation="insert", value=40))[-1]

    assert last.metadata["inserted"] is False
    assert last.metadata["already_exists"] is True


def test_bst_insert_into_empty_tree() -> None:
    last = list(binary_search_tree(keys=[], operation="insert", value=7))[-1]

    assert last.data["tree"] == {"key": 7, "left": None, "right": None}


def test_bst_delete_leaf() -> None:
    last = list(binary_search_tree(operation="delete", value=20))[-1]

    assert last.metadata["deleted"] is True
    assert last.data["tree"]["left"]["left"] is None
    assert last.data["keys"] == [30, 40, 50, 60, 70, 80]


def test_bst_delete_node_with_one_child() -> None:
    last = list(binary_search_tree(keys=[50, 30, 20], operation="delete", value=30))[-1]

    assert last.data["tree"] == {"key": 50, "left": {"key": 20, "left": None, "right": None}, "right": None}


def test_bst_delete_node_with_two_children_uses_the_successor() -> None:
    steps = list(binary_search_tree(operation="delete", value=50))
    last = steps[-1]

    assert last.data["tree"]["key"] == 60
    assert last.data["tree"]["right"]["left"] is None
    assert last.data["keys"] == [20, 30, 40, 60, 70, 80]
    assert _kinds(steps).count(StepKind.CONSIDER) == 2


def test_bst_delete_missing_key() -> None:
    last = list(binary_search_tree(operation="delete", value=99))[-1]

    assert last.metadata["deleted"] is False
    assert last.data["keys"] == [20, 30, 40, 50, 60, 70, 80]


def test_bst_repeated_keys_are_dropped() -> None:
    last = list(binary_search_tree(keys=[5, 3, 5, 3]))[-1]

    assert last.data["keys"] == [3, 5]


# ---------------------------------------------------------------------------
# B-tree
# ---------------------------------------------------------------------------
def test_b_tree_build_splits_full_nodes() -> None:
    tree = BTree(order=3)
    for key in range(10, 101, 10):
        tree.insert(key)

    assert tree.root.to_dict() == {
        "keys": [30, 60],
        "children": [
            {"keys": [10, 20], "children": []},
            {"keys": [40, 50], "children": []},
            {"keys": [70, 80, 90, 100], "children": []},
        ],
    }
    assert tree.in_order() == list(range(10, 101, 10))


def test_b_tree_default_search_misses_in_a_leaf() -> None:
    last = list(b_tree_search())[-1]

    assert last.metadata["found"] is False
    assert last.data["path"] == [[30, 60], [40, 50]]


def test_b_tree_search_found() -> None:
    steps = list(b_tree_search(value=90))
    last = steps[-1]

    assert last.metadata["found"] is True
    assert last.metadata["index"] == 2
    assert last.data["path"] == [[30, 60], [70, 80, 90, 100]]
    assert _kinds(steps).count(StepKind.DECIDE) == 1


def test_b_tree_insert_splits_a_full_root() -> None:
    steps = list(b_tree_search(keys=[1, 2, 3, 4, 5], operation="insert", value=6, order=3))
    last = steps[-1]

    assert last.metadata["inserted"] is True
    assert last.data["tree"] == {
        "keys": [3],
        "children": [{"keys": [1, 2], "children": []}, {"keys": [4, 5, 6], "children": []}],
    }
    assert any(s.metadata.get("split") for s in steps)


def test_b_tree_insert_without_split() -> None:
    steps = list(b_tree_search(operation="insert", value=55))

    assert not any(s.metadata.get("split") for s in steps)
    assert steps[-1].data["tree"]["children"][1]["keys"] == [40, 50, 55]


def test_b_tree_insert_existing_key() -> None:
    last = list(b_tree_search(operation="insert", value=40))[-1]

    assert last.metadata["already_exists"] is True
    assert last.data["keys"] == list(range(10, 101, 10))


@pytest.mark.parametrize("order", [2, 3, 4])
def test_b_tree_keeps_keys_sorted(order) -> None:
    keys = [15, 3, 99, 42, 8, 23, 77, 4, 61, 50, 1, 36]
    last = list(b_tree_search(keys=keys, operation="insert", value=30, order=order))[-1]

    assert last.data["keys"] == sorted(keys + [30])


# ---------------------------------------------------------------------------
# Trie
# ---------------------------------------------------------------------------
def test_trie_prefix_search_collects_words_in_insertion_order() -> None:
    last = list(trie_search())[-1]

    assert last.metadata["found"] is True
    assert last.metadata["is_word"] is True
    assert last.data["matches"] == ["app", "apple", "application"]


def test_trie_prefix_that_is_not_a_word() -> None:
    last = list(trie_search(word="ba"))[-1]

    assert last.metadata["is_word"] is False
    assert last.data["matches"] == ["banana", "band", "bat"]


def test_trie_search_stops_at_a_missing_character() -> None:
    steps = list(trie_search(word="cow"))
    last = steps[-1]

    assert last.metadata["found"] is False
    assert last.data["prefix"] == "c"
    assert _kinds(steps).count(StepKind.COMPARE) == 2


def test_trie_insert_reuses_shared_prefix() -> None:
    steps = list(trie_search(operation="insert", word="cart"))
    last = steps[-1]

    assert last.metadata["inserted"] is True
    assert sum(1 for s in steps if s.metadata.get("created")) == 1
    assert "cart" in last.data["words"]


def test_trie_insert_existing_word() -> None:
    last = list(trie_search(operation="insert", word="band"))[-1]

    assert last.metadata["inserted"] is False
    assert last.metadata["already_exists"] is True


def test_trie_words_are_listed_depth_first() -> None:
    assert Trie(["to", "tea", "ted", "ten", "i", "in", "inn"]).words() == ["to", "tea", "ted", "ten", "i", "in", "inn"]
    assert Trie(["b", "a"]).words() == ["b", "a"]
