"""Tests for StatelessBFS, the O(n^2) level-order traversal."""

import pytest

from treeiterlib import (
    CallableAdapter,
    IndexPath,
    LinkedAdapter,
    LinkedNode,
    PreOrderDFS,
    StatelessBFS,
)
from tree_builders import list_children_adapter, random_nested_tree


def test_documented_order():
    tree = [[1, 2], [3, 4]]
    assert list(StatelessBFS(tree)) == [[[1, 2], [3, 4]], [1, 2], [3, 4], 1, 2, 3, 4]


def test_uneven_tree():
    tree = [1, [2, 3]]
    assert list(StatelessBFS(tree)) == [[1, [2, 3]], 1, [2, 3], 2, 3]


def test_single_node_tree():
    assert list(StatelessBFS([])) == [[]]
    assert list(StatelessBFS(7, adapter=list_children_adapter())) == [7]


def test_dead_ends_are_skipped_across_subtrees():
    # The leftmost branch ends early; level 3 lives only on the right
    tree = [1, [], [[2], 3], [[[4]]]]
    nodes = list(StatelessBFS(tree))
    assert nodes == [
        tree,
        1, [], [[2], 3], [[[4]]],
        [2], 3, [[4]],
        2, [4],
        4,
    ]


def test_positions_are_index_paths():
    positions = [p for p, _ in StatelessBFS([[1, 2], [3]]).positions()]
    assert positions == [
        IndexPath(()), IndexPath((0,)), IndexPath((1,)),
        IndexPath((0, 0)), IndexPath((0, 1)), IndexPath((1, 0)),
    ]


@pytest.mark.parametrize("seed", range(15))
def test_equals_preorder_stably_sorted_by_depth(seed):
    tree = random_nested_tree(seed)
    expected = sorted(PreOrderDFS(tree).pairs(), key=lambda pair: len(pair[0]))
    actual = list(StatelessBFS(tree).pairs())
    assert [path for path, _ in actual] == [path for path, _ in expected]
    assert [id(node) for _, node in actual] == [id(node) for _, node in expected]


@pytest.mark.parametrize("seed", range(5))
def test_rerunning_is_idempotent(seed):
    tree = random_nested_tree(seed)
    iterator = StatelessBFS(tree)
    assert list(iterator.pairs()) == list(iterator.pairs())


def test_depth_never_decreases():
    tree = random_nested_tree(99, max_depth=6)
    depths = [len(path) for path, _ in StatelessBFS(tree).pairs()]
    assert depths == sorted(depths)


def test_works_on_regular_and_linked_trees():
    tree = [[1, 2], [3, [4]]]
    expected = [path for path, _ in StatelessBFS(tree).pairs()]
    regular = [path for path, _ in StatelessBFS(tree, adapter=list_children_adapter()).pairs()]
    linked = [path for path, _ in
              StatelessBFS(LinkedNode.from_nested(tree), adapter=LinkedAdapter()).pairs()]
    assert regular == expected == linked


def test_tolerates_shape_mutation_between_steps():
    # Only the index path is kept between steps, so growing a subtree that
    # has not been reached yet is picked up by later steps
    tree = [[1], [2]]
    iterator = StatelessBFS(tree)
    node, position = iterator.start()
    seen = [node]
    grown = False
    while True:
        step = iterator.advance(position)
        if step is None:
            break
        node, position = step
        seen.append(node)
        if position == IndexPath((0,)) and not grown:
            tree[1].append([5, 6])
            grown = True
    assert seen[-4:] == [2, [5, 6], 5, 6]
    assert position == IndexPath((1, 1, 1))


def test_does_not_need_stored_links():
    adapter = CallableAdapter(lambda node: node.get('kids', []))
    tree = {'id': 0, 'kids': [{'id': 1, 'kids': [{'id': 3}]}, {'id': 2}]}
    assert [node['id'] for node in StatelessBFS(tree, adapter=adapter)] == [0, 1, 2, 3]
