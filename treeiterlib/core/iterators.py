"""Iterator front-ends for TreeIterLib.

Each front-end wraps a tree value and lazily yields its nodes in one order.
The iterator itself holds no traversal state: ``start`` returns the first
``(node, position)`` pair and ``advance`` maps a position to the next pair,
so any number of traversals can run over the same iterator value.

Example, for the tree ``[1, [2, 3]]``::

    >>> list(Leaves([1, [2, 3]]))
    [1, 2, 3]
    >>> list(PostOrderDFS([1, [2, 3]]))
    [1, 2, 3, [2, 3], [1, [2, 3]]]
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, Optional, Tuple

from ..config import TraversalStrategy
from .adapter import TreeAdapter, adapter_for
from .capabilities import CapabilityProfile, classify
from .navigation import Navigator, make_navigator
from .position import Position
from .stepping import first_position, step_position


class TreeIterator(ABC):
    """Abstract base class for all traversal kinds.

    Args:
        tree: Root of the tree to traverse
        adapter: TreeAdapter for the tree (looked up from the tree's type
            if omitted)
    """

    strategy: TraversalStrategy

    def __init__(self, tree: Any, *, adapter: Optional[TreeAdapter] = None):
        self.tree = tree
        self.adapter = adapter if adapter is not None else adapter_for(tree)
        self.profile: CapabilityProfile = classify(type(self.adapter))

    @abstractmethod
    def first_position(self) -> Position:
        pass

    @abstractmethod
    def step_position(self, position: Position) -> Optional[Position]:
        """Next position after ``position``, or None when exhausted."""
        pass

    @abstractmethod
    def resolve(self, position: Position) -> Any:
        """Map a position to the node visited there."""
        pass

    @abstractmethod
    def path_of(self, position: Position) -> Tuple[int, ...]:
        """0-based index path from the root to ``position``."""
        pass

    def start(self) -> Tuple[Any, Position]:
        position = self.first_position()
        return self.resolve(position), position

    def advance(self, position: Position) -> Optional[Tuple[Any, Position]]:
        position = self.step_position(position)
        if position is None:
            return None
        return self.resolve(position), position

    def positions(self) -> Iterator[Tuple[Position, Any]]:
        """Yield ``(position, node)`` for every visited node."""
        node, position = self.start()
        while True:
            yield position, node
            step = self.advance(position)
            if step is None:
                return
            node, position = step

    def pairs(self) -> Iterator[Tuple[Tuple[int, ...], Any]]:
        """Yield ``(path, node)`` where path is the node's 0-based index path."""
        for position, node in self.positions():
            yield self.path_of(position), node

    def __iter__(self) -> Iterator[Any]:
        for _, node in self.positions():
            yield node

    def over(self, tree: Any) -> 'TreeIterator':
        """Same kind of iterator, with the same adapter, over another tree."""
        return type(self)(tree, adapter=self.adapter)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.tree!r})"


class DepthFirstIterator(TreeIterator):
    """Shared machinery of the depth-first family.

    The navigator (and with it the position representation) is chosen here,
    once, from the adapter's capability profile.
    """

    def __init__(self, tree: Any, *, adapter: Optional[TreeAdapter] = None):
        super().__init__(tree, adapter=adapter)
        self.navigator: Navigator = make_navigator(self.tree, self.adapter, self.profile)

    def first_position(self) -> Position:
        return first_position(self.strategy, self.navigator)

    def step_position(self, position: Position) -> Optional[Position]:
        return step_position(self.strategy, self.navigator, position)

    def resolve(self, position: Position) -> Any:
        return self.navigator.resolve(position)

    def path_of(self, position: Position) -> Tuple[int, ...]:
        return self.navigator.path_of(position)

    def is_root(self, position: Position) -> bool:
        return self.navigator.is_root(position)


class Leaves(DepthFirstIterator):
    """Visit the leaves of a tree, left to right.

    For ``[1, [2, 3]]`` this yields ``1, 2, 3``.
    """

    strategy = TraversalStrategy.LEAVES


class PostOrderDFS(DepthFirstIterator):
    """Visit every node, children before their parent.

    For ``[1, [2, 3]]`` this yields ``1, 2, 3, [2, 3], [1, [2, 3]]``.
    The root is always the last node visited.
    """

    strategy = TraversalStrategy.POST_ORDER


def _always(node: Any) -> bool:
    return True


class PreOrderDFS(DepthFirstIterator):
    """Visit every node, parents before their children.

    An optional descend filter decides, per node, whether to continue into
    its children (if it has any) or to treat it as a leaf. The node itself is
    visited either way.

    For ``[[1, 2], [3, 4]]`` this yields
    ``[[1, 2], [3, 4]], [1, 2], 1, 2, [3, 4], 3, 4``.

    Invalidation: mutating nodes while iterating is allowed, but unless
    parent and sibling links are stored, the identity of the ancestors of
    the last visited node must not change (mutate nodes, don't replace them).
    """

    strategy = TraversalStrategy.PRE_ORDER

    def __init__(self,
                 tree: Any,
                 descend_filter: Optional[Callable[[Any], bool]] = None,
                 *,
                 adapter: Optional[TreeAdapter] = None):
        super().__init__(tree, adapter=adapter)
        self.descend_filter = descend_filter if descend_filter is not None else _always

    def step_position(self, position: Position) -> Optional[Position]:
        return step_position(self.strategy, self.navigator, position, self.descend_filter)

    def over(self, tree: Any) -> 'PreOrderDFS':
        return type(self)(tree, self.descend_filter, adapter=self.adapter)
