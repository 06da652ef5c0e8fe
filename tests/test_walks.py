"""Tests for ascend and descend."""

import pytest

from treeiterlib import (
    LinkedAdapter,
    LinkedNode,
    MissingCapabilityError,
    ParentLinkedAdapter,
    ascend,
    descend,
)


@pytest.fixture
def tree():
    return LinkedNode.from_nested([[1, 2], [3, [4, 5]]])


def leaf_4(tree):
    return tree.children[1].children[1].children[0]


def test_ascend_always_true_reaches_root(tree):
    assert ascend(lambda node: True, leaf_4(tree), ParentLinkedAdapter()) is tree


def test_ascend_stops_where_select_is_false(tree):
    start = leaf_4(tree)
    stop_at = tree.children[1]
    result = ascend(lambda node: node is not stop_at, start, LinkedAdapter())
    assert result is stop_at


def test_ascend_false_returns_start(tree):
    start = leaf_4(tree)
    assert ascend(lambda node: False, start, ParentLinkedAdapter()) is start


def test_ascend_from_root_calls_select_once(tree):
    calls = []
    result = ascend(lambda node: calls.append(node) or True, tree, ParentLinkedAdapter())
    assert result is tree
    assert calls == [tree]


def test_ascend_select_may_modify_nodes(tree):
    visited = []

    def select(node):
        visited.append(node)
        node.value = 'seen'
        return True

    ascend(select, leaf_4(tree), ParentLinkedAdapter())
    assert len(visited) == 4
    assert all(node.value == 'seen' for node in visited)


def test_ascend_requires_parent_links():
    with pytest.raises(MissingCapabilityError):
        ascend(lambda node: True, [1, 2])


def test_descend_zero_returns_start():
    tree = [[1, 2], [3, 4]]
    assert descend(lambda node: 0, tree) is tree


def test_descend_follows_one_based_choices():
    tree = [[1, 2], [3, [4, 5]]]
    choices = iter([2, 2, 1, 0])
    assert descend(lambda node: next(choices), tree) == 4


def test_descend_leftmost_leaf():
    tree = [[[7], 8], 9]
    select = lambda node: 1 if isinstance(node, list) and node else 0
    assert descend(select, tree) == 7


def test_descend_linked_tree(tree):
    node = descend(lambda n: 2 if n.children else 0, tree, LinkedAdapter())
    assert node.value == 5


def test_descend_rejects_missing_child():
    with pytest.raises(IndexError):
        descend(lambda node: 3, [1, 2])
