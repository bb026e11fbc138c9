import pytest

from algolab.bst import bst_insert, bst_max, bst_min, bst_search
from algolab.tree_traversal import df_traversal

VALUES = [12, 5, 18, 2, 9, 15, 19, 13, 17]


def _build(values):
    tree = None
    for v in values:
        tree = bst_insert(tree, v)
    return tree


def test_insert_first_value_becomes_root():
    tree = _build(VALUES)
    assert tree.value == 12
    assert tree.left.value == 5
    assert tree.right.value == 18


def test_insert_keeps_in_order_sorted():
    tree = _build(VALUES)
    assert [n.value for n in df_traversal(tree)] == sorted(VALUES)


def test_insert_duplicates_go_left():
    tree = _build([5, 5, 5])
    assert tree.left.value == 5
    assert tree.left.left.value == 5
    assert tree.right is None


def test_insert_sets_parents():
    tree = _build(VALUES)
    for node in df_traversal(tree):
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node


@pytest.mark.parametrize("query", [0, 5, 6, 18, 19, 20])
def test_search_finds_floor(query):
    tree = _build(VALUES)
    result = bst_search(tree, query)
    candidates = [v for v in VALUES if v <= query]
    if candidates:
        assert result.value == max(candidates)
    else:
        assert result is None


def test_search_for_missing_below_all():
    assert bst_search(_build(VALUES), 0) is None
    assert bst_search(None, 3) is None


def test_min_and_max():
    tree = _build(VALUES)
    assert bst_min(tree).value == min(VALUES)
    assert bst_max(tree).value == max(VALUES)


def test_min_max_of_empty_tree_raise():
    with pytest.raises(ValueError):
        bst_min(None)
    with pytest.raises(ValueError):
        bst_max(None)