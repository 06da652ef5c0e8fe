"""Adapter driven by a plain children function."""

from typing import Any, Callable, Iterable, Sequence

from ..core.adapter import TreeAdapter


class CallableAdapter(TreeAdapter):
    """Regular tree whose children are produced by a callable.

    Nothing but the children function is known about the tree, so
    depth-first traversals track ancestors on a node stack.

    Example:
        adapter = CallableAdapter(lambda node: node.get('children', []))
        for node in PreOrderDFS(config_tree, adapter=adapter):
            ...
    """

    def __init__(self, children: Callable[[Any], Iterable[Any]]):
        self._children = children

    def get_children(self, node: Any) -> Sequence[Any]:
        children = self._children(node)
        if children is None:
            return ()
        return children
