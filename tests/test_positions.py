"""Tests for the position representations."""

import pytest

from treeiterlib import IndexPath, NativePosition, NodeStack, ROOT
from treeiterlib.core.position import RootPosition, child_of


def test_root_is_a_singleton():
    assert RootPosition() is ROOT
    assert ROOT.depth == 0
    assert repr(ROOT) == "ROOT"


def test_index_path_navigation():
    path = IndexPath((1, 2))
    assert path.depth == 2
    assert path.child(0) == IndexPath((1, 2, 0))
    assert path.parent() == IndexPath((1,))
    assert path.sibling(3) == IndexPath((1, 3))
    assert IndexPath().is_root
    with pytest.raises(ValueError):
        IndexPath().parent()


def test_index_paths_are_immutable_and_hashable():
    path = IndexPath((0,))
    with pytest.raises(AttributeError):
        path.indices = (1,)
    assert {path: 'x'}[IndexPath((0,))] == 'x'


def test_node_stack_push_and_pop():
    tree = [['a'], 'b']
    first = child_of(ROOT, tree[0], 0)
    assert first == first
    assert first.nodes == (tree[0],)
    deeper = first.push('a', 0)
    assert deeper.node == 'a'
    assert deeper.path == IndexPath((0, 0))
    assert deeper.pop().node is tree[0]
    assert first.pop() is ROOT
    # Pushing never changes the original stack
    assert first.depth == 1


def test_node_stack_replace_top():
    stack = NodeStack(('x', 'y'), IndexPath((0, 1)))
    replaced = stack.replace_top('z')
    assert replaced.nodes == ('x', 'z')
    assert stack.nodes == ('x', 'y')


def test_node_stack_must_match_path():
    with pytest.raises(ValueError):
        NodeStack(('x',), IndexPath((0, 1)))
    with pytest.raises(ValueError):
        NodeStack((), IndexPath())


def test_native_position_wraps_node():
    node = object()
    assert NativePosition(node).node is node


def test_node_stack_needs_an_explicit_path():
    with pytest.raises(TypeError):
        NodeStack(('x',))
