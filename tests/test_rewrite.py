"""Tests for the rewrite folds treemap and treemap_inplace."""

import pytest

from treeiterlib import (
    CallableAdapter,
    LinkedAdapter,
    LinkedNode,
    NestedSequenceAdapter,
    ParentLinkedAdapter,
    PostOrderDFS,
    PreOrderDFS,
    TreeInconsistencyError,
    treemap,
    treemap_inplace,
)
from tree_builders import random_nested_tree


def rebuild(path, node, children):
    return children if isinstance(node, list) else node


class TestTreemap:

    def test_identity_rebuild(self):
        tree = [1, [2, [3, 4]], []]
        result = treemap(rebuild, PostOrderDFS(tree))
        assert result == tree
        assert result is not tree

    def test_sum(self):
        total = treemap(lambda path, node, cs: sum(cs) if isinstance(node, list) else node,
                        PostOrderDFS([1, [2, 3]]))
        assert total == 6

    def test_calls_receive_paths_and_transformed_children(self):
        calls = []

        def record(path, node, children):
            calls.append((path, list(children)))
            return len(path)

        treemap(record, PostOrderDFS([[1, 2], 3]))
        assert calls == [
            ((0, 0), []),
            ((0, 1), []),
            ((0,), [2, 2]),
            ((1,), []),
            ((), [1, 1]),
        ]

    def test_mixed_result_types_are_collected(self):
        def describe(path, node, children):
            if not isinstance(node, list):
                return node if node % 2 else str(node)
            return tuple(children)

        assert treemap(describe, PostOrderDFS([1, [2, 3.5], 4])) == (1, ('2', 3.5), '4')

    @pytest.mark.parametrize("seed", range(10))
    def test_matches_manual_bottom_up_fold(self, seed):
        tree = random_nested_tree(seed)

        def height(path, node, children):
            return 1 + max(children) if children else 0

        def manual(node):
            if isinstance(node, list) and node:
                return 1 + max(manual(child) for child in node)
            return 0

        assert treemap(height, PostOrderDFS(tree)) == manual(tree)
        assert treemap(rebuild, PostOrderDFS(tree)) == tree

    def test_root_value_is_returned(self):
        # The root is the last post-order position, so its value is the result
        assert treemap(lambda path, node, cs: path, PostOrderDFS([[1], [2]])) == ()

    def test_single_node_tree(self):
        assert treemap(lambda path, node, cs: ('leaf', node, cs), PostOrderDFS([])) == ('leaf', [], [])

    def test_regular_and_linked_trees(self):
        tree = [[1, 2], 3]
        adapter = CallableAdapter(lambda n: n if isinstance(n, list) else [])
        assert treemap(rebuild, PostOrderDFS(tree, adapter=adapter)) == tree

        linked = LinkedNode.from_nested(tree)
        nested = treemap(lambda path, node, cs: cs if node.children else node.value,
                         PostOrderDFS(linked, adapter=LinkedAdapter()))
        assert nested == tree

    def test_requires_post_order(self):
        with pytest.raises(TypeError):
            treemap(rebuild, PreOrderDFS([1]))

    def test_traversal_that_never_reaches_root_is_reported(self):
        class Truncated(PostOrderDFS):
            def pairs(self):
                for path, node in super().pairs():
                    if path:
                        yield path, node

        with pytest.raises(TreeInconsistencyError):
            treemap(rebuild, Truncated([1, 2]))


class TestTreemapInplace:

    def test_identity_leaves_tree_unchanged(self):
        tree = [[1, 2], [3, [4]]]
        snapshot = [[1, 2], [3, [4]]]
        result = treemap_inplace(lambda node: node, PreOrderDFS(tree))
        assert result is tree
        assert tree == snapshot

    def test_replaces_leaves(self):
        tree = [[1, 2], [3, 4]]
        treemap_inplace(lambda node: node * 10 if isinstance(node, int) else node,
                        PreOrderDFS(tree))
        assert tree == [[10, 20], [30, 40]]

    def test_replacement_children_are_visited(self):
        tree = [1, 2]
        visited = []

        def expand(node):
            visited.append(node)
            return [10, 20] if node == 1 else node

        treemap_inplace(expand, PreOrderDFS(tree))
        assert tree == [[10, 20], 2]
        # The replacement itself is not passed to f, but its children are
        assert visited[1:] == [1, 10, 20, 2]

    def test_idempotent_function_twice_equals_once(self):
        def clamp(node):
            if isinstance(node, int) and node > 2:
                return 2
            return node

        once = [[1, 5], [3, [4, 0]]]
        twice = [[1, 5], [3, [4, 0]]]
        treemap_inplace(clamp, PreOrderDFS(once))
        treemap_inplace(clamp, PreOrderDFS(treemap_inplace(clamp, PreOrderDFS(twice))))
        assert once == twice == [[1, 2], [2, [2, 0]]]

    def test_root_replacement_restarts_over_new_root(self):
        tree = [1, 2]
        calls = []
        wrapped = []

        def wrap_root(node):
            calls.append(node)
            if node is tree and not wrapped:
                wrapped.append(True)
                return [tree, 3]
            if isinstance(node, int):
                return node + 100
            return node

        result = treemap_inplace(wrap_root, PreOrderDFS(tree))
        assert result == [[101, 102], 103]
        assert result[0] is tree
        # The new root itself is not passed to f again
        assert sum(1 for c in calls if c is result) == 0

    def test_descend_filter_is_kept(self):
        tree = [[1, 2], [3, 4]]
        iterator = PreOrderDFS(tree, lambda node: node != [1, 2])
        treemap_inplace(lambda node: -node if isinstance(node, int) else node, iterator)
        assert tree == [[1, 2], [-3, -4]]

    def test_linked_tree_replacement(self):
        def double(node):
            if node.value is not None:
                return LinkedNode(node.value * 2)
            return node

        for adapter in (ParentLinkedAdapter(), LinkedAdapter()):
            root = LinkedNode.from_nested([[1, 2], 3])
            treemap_inplace(double, PreOrderDFS(root, adapter=adapter))
            assert root.to_nested() == [[2, 4], 6]
            first, second = root.children[0].children
            assert first.next is second and second.prev is first

    def test_unsupported_adapter_raises(self):
        adapter = CallableAdapter(lambda n: n if isinstance(n, list) else [])
        with pytest.raises(NotImplementedError, match="does not support modification"):
            treemap_inplace(lambda node: 0 if node == 1 else node,
                            PreOrderDFS([1], adapter=adapter))

    def test_immutable_parent_raises(self):
        with pytest.raises(TypeError):
            treemap_inplace(lambda node: 0 if node == 1 else node, PreOrderDFS((1, 2)))

    def test_requires_pre_order(self):
        with pytest.raises(TypeError):
            treemap_inplace(lambda node: node, PostOrderDFS([1]))


class TestTreemapInplaceEqualSiblings:

    class ValueNode(LinkedNode):
        def __eq__(self, other):
            if not isinstance(other, LinkedNode):
                return NotImplemented
            return self.value == other.value

        def __hash__(self):
            return hash(self.value)

    @pytest.mark.parametrize("adapter", [ParentLinkedAdapter(), LinkedAdapter()])
    def test_replacement_lands_on_the_visited_child(self, adapter):
        ValueNode = self.ValueNode
        root = ValueNode(None, [ValueNode(1), ValueNode(1)])
        first, second = root.children

        treemap_inplace(lambda node: ValueNode(99) if node is second else node,
                        PreOrderDFS(root, adapter=adapter))

        assert [child.value for child in root.children] == [1, 99]
        assert root.children[0] is first
        assert first.next is root.children[1]


class TestTreemapInplaceModificationSupport:

    def test_unsupported_adapter_is_rejected_before_any_call(self):
        calls = []

        def record(node):
            calls.append(node)
            return node

        adapter = CallableAdapter(lambda n: n if isinstance(n, list) else [])
        with pytest.raises(NotImplementedError, match="CallableAdapter does not support modification"):
            treemap_inplace(record, PreOrderDFS([1, 2], adapter=adapter))
        assert calls == []

    def test_supported_adapters_report_it(self):
        assert NestedSequenceAdapter().supports_modification()
        assert ParentLinkedAdapter().supports_modification()
        assert not CallableAdapter(lambda n: []).supports_modification()
