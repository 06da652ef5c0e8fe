"""Stepping algorithms for the depth-first traversal family.

One algorithm advances pre-order, post-order and leaves traversals alike; the
three differ only in where a traversal (or a sibling subtree) starts and in
whether climbing stops at a parent. All position bookkeeping is delegated to
a Navigator, so the same code runs on index paths, node stacks and native
positions.
"""

from typing import Any, Callable, Optional

from ..config import TraversalStrategy
from ..errors import MissingCapabilityError
from .adapter import TreeAdapter, adapter_for
from .capabilities import ParentLinks, SiblingLinks, classify
from .navigation import Navigator, index_of
from .position import Position


class Subtree:
    """View of the node at ``position`` as the root of its own tree.

    Only used to compute where a traversal of a sibling subtree starts.
    Positions it hands out are positions of the outer tree.
    """

    __slots__ = ('navigator', 'position')

    def __init__(self, navigator: Navigator, position: Position):
        self.navigator = navigator
        self.position = position

    def root_position(self) -> Position:
        return self.position

    def first_child(self, position: Position) -> Optional[Position]:
        return self.navigator.first_child(position)


def first_position(strategy: TraversalStrategy, view) -> Position:
    """Where a depth-first traversal of ``view`` starts.

    Pre-order starts at the root; post-order and leaves start at the
    leftmost deepest node.

    Args:
        strategy: PRE_ORDER, POST_ORDER or LEAVES
        view: A Navigator or a Subtree
    """
    position = view.root_position()
    if strategy is TraversalStrategy.PRE_ORDER:
        return position
    while True:
        child = view.first_child(position)
        if child is None:
            return position
        position = child


def step_position(strategy: TraversalStrategy,
                  navigator: Navigator,
                  position: Position,
                  descend_filter: Optional[Callable[[Any], bool]] = None) -> Optional[Position]:
    """Compute the position visited after ``position``.

    Returns:
        The next position, or None when the traversal is finished
    """
    if strategy is TraversalStrategy.PRE_ORDER:
        if descend_filter is None or descend_filter(navigator.resolve(position)):
            child = navigator.first_child(position)
            if child is not None:
                return child

    while not navigator.is_root(position):
        sibling = navigator.next_sibling(position)
        if sibling is not None:
            return first_position(strategy, Subtree(navigator, sibling))
        position = navigator.parent(position)
        if strategy is TraversalStrategy.POST_ORDER:
            # A parent is visited exactly once, right after its last child
            return position
    return None


def _scan_siblings(node: Any, adapter: TreeAdapter, following: bool) -> Optional[Any]:
    if adapter.is_root(node):
        return None
    siblings = adapter.children_of(adapter.get_parent(node))
    candidate = index_of(siblings, node) + (1 if following else -1)
    if 0 <= candidate < len(siblings):
        return siblings[candidate]
    return None


def _sibling(node: Any, adapter: Optional[TreeAdapter], following: bool) -> Optional[Any]:
    if adapter is None:
        adapter = adapter_for(node)
    profile = classify(type(adapter))
    if profile.sibling_links is SiblingLinks.STORED:
        return adapter.next_sibling(node) if following else adapter.prev_sibling(node)
    if profile.parent_links is not ParentLinks.STORED:
        raise MissingCapabilityError(
            type(adapter).__name__, 'get_parent',
            "sibling lookup on a bare node needs stored parent or sibling links"
        )
    return _scan_siblings(node, adapter, following)


def next_sibling(node: Any, adapter: Optional[TreeAdapter] = None) -> Optional[Any]:
    """Get the sibling right after ``node``, or None if it is the last child.

    Stored sibling links are asked directly; otherwise the parent's children
    are scanned.

    Raises:
        TreeInconsistencyError: If the node is not among its parent's children
        MissingCapabilityError: If the adapter can locate neither parents
            nor siblings
    """
    return _sibling(node, adapter, True)


def prev_sibling(node: Any, adapter: Optional[TreeAdapter] = None) -> Optional[Any]:
    """Get the sibling right before ``node``, or None if it is the first child.

    See :func:`next_sibling` for the lookup rules and errors.
    """
    return _sibling(node, adapter, False)
