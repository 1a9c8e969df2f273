import pytest
from hypothesis import given
from hypothesis import strategies as st

from algorium.avl import AVLTree


def _checked_height(node):
    if node is None:
        return 0
    left = _checked_height(node.left)
    right = _checked_height(node.right)
    assert abs(left - right) <= 1
    assert node.height == 1 + max(left, right)
    return 1 + max(left, right)


def _build(values):
    tree = AVLTree()
    for v in values:
        tree.insert(v)
    return tree


def test_insert_reports_duplicates():
    tree = AVLTree()
    assert tree.insert(5) is True
    assert tree.insert(5) is False
    assert len(tree) == 1


def test_ascending_inserts_rotate_to_balanced_shape():
    assert _build([10, 20, 30]).preorder() == [20, 10, 30]


def test_left_right_case():
    assert _build([30, 10, 20]).preorder() == [20, 10, 30]


def test_right_left_case():
    assert _build([10, 30, 20]).preorder() == [20, 10, 30]


def test_search_returns_parent_value():
    tree = _build([10, 20, 30])
    assert tree.search(20) is None
    assert tree.search(10) == 20
    assert tree.search(30) == 20


def test_search_missing_raises_key_error():
    with pytest.raises(KeyError):
        _build([1, 2]).search(3)


def test_search_empty_tree_raises_key_error():
    with pytest.raises(KeyError):
        AVLTree().search(1)


def test_remove_missing_raises_and_keeps_size():
    tree = _build([1, 2, 3])
    with pytest.raises(KeyError):
        tree.remove(7)
    assert len(tree) == 3
    assert list(tree) == [1, 2, 3]


def test_remove_node_with_two_children():
    tree = _build([10, 20, 30])
    tree.remove(20)
    assert 20 not in tree
    assert list(tree) == [10, 30]


def test_contains():
    tree = _build([4, 2, 6])
    assert 2 in tree
    assert 5 not in tree


@given(st.lists(st.integers(-100, 100)))
def test_iteration_is_sorted_distinct(values):
    tree = _build(values)
    assert list(tree) == sorted(set(values))
    assert len(tree) == len(set(values))
    _checked_height(tree._root)


@given(st.lists(st.integers(-50, 50), unique=True), st.data())
def test_removal_keeps_balance_and_order(values, data):
    tree = _build(values)
    doomed = data.draw(st.lists(st.sampled_from(values), unique=True) if values else st.just([]))
    for v in doomed:
        tree.remove(v)
        _checked_height(tree._root)
    remaining = sorted(set(values) - set(doomed))
    assert list(tree) == remaining
    assert len(tree) == len(remaining)


@given(st.lists(st.integers(-100, 100), unique=True))
def test_preorder_is_permutation_with_root_first(values):
    tree = _build(values)
    order = tree.preorder()
    assert sorted(order) == sorted(values)
    if order:
        assert tree.search(order[0]) is None