"""Caller-driven single-path walks up and down a tree."""

from typing import Any, Callable, Optional

from ..errors import MissingCapabilityError
from .adapter import TreeAdapter, adapter_for
from .capabilities import ParentLinks, classify


def ascend(select: Callable[[Any], bool],
           node: Any,
           adapter: Optional[TreeAdapter] = None) -> Any:
    """Ascend the tree, at each node choosing whether or not to continue.

    The parent is computed before ``select`` runs, so the callback may modify
    the node it is given, as long as the tree structure stays the same.

    Args:
        select: Called with each node; return True to move on to the parent
        node: Node to start from
        adapter: Adapter with stored parent links

    Returns:
        The root, or the first node for which ``select`` returned False
    """
    if adapter is None:
        adapter = adapter_for(node)
    if classify(type(adapter)).parent_links is not ParentLinks.STORED:
        raise MissingCapabilityError(
            type(adapter).__name__, 'get_parent',
            "ascend needs stored parent links"
        )

    if adapter.is_root(node):
        select(node)
        return node
    parent = adapter.get_parent(node)
    while select(node) and not adapter.is_root(node):
        node = parent
        parent = None if adapter.is_root(node) else adapter.get_parent(node)
    return node


def descend(select: Callable[[Any], int],
            tree: Any,
            adapter: Optional[TreeAdapter] = None) -> Any:
    """Descend the tree, at each node choosing a child or stopping.

    Args:
        select: Called with each node; returns 0 to stop at that node, or the
            1-based number of the child to move into
        tree: Node to start from
        adapter: Adapter for the tree

    Returns:
        The node at which ``select`` returned 0

    Raises:
        IndexError: If ``select`` names a child that does not exist
    """
    if adapter is None:
        adapter = adapter_for(tree)
    node = tree
    while True:
        choice = select(node)
        if choice == 0:
            return node
        children = adapter.children_of(node)
        if not 1 <= choice <= len(children):
            raise IndexError(
                f"descend selected child {choice} of a node with {len(children)} children"
            )
        node = children[choice - 1]
