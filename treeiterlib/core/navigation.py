"""Navigators: one algorithm variant per position representation.

A navigator binds a tree, its adapter and one position representation. It is
selected once, when an iterator is constructed, from the adapter's capability
profile; the stepping algorithms then only talk to the navigator and never
re-check capabilities.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, Tuple

from ..errors import TreeInconsistencyError
from .adapter import TreeAdapter
from .capabilities import CapabilityProfile, PositionKind, classify
from .position import (
    ROOT,
    IndexPath,
    NativePosition,
    NodeStack,
    Position,
    child_of,
)


def index_of(children: Sequence[Any], node: Any) -> int:
    """Find the position of ``node`` among ``children``.

    The child that is ``node`` itself wins over any earlier child that only
    compares equal to it; equality is the fallback for trees that re-create
    their nodes on every listing.

    Raises:
        TreeInconsistencyError: If the node is not a child of its parent
    """
    for index, child in enumerate(children):
        if child is node:
            return index
    for index, child in enumerate(children):
        if child == node:
            return index
    raise TreeInconsistencyError("Tree inconsistency: node not a child of parent")


class Navigator(ABC):
    """Moves between positions of one tree."""

    kind: PositionKind

    def __init__(self, tree: Any, adapter: TreeAdapter):
        self.tree = tree
        self.adapter = adapter

    @abstractmethod
    def root_position(self) -> Position:
        pass

    @abstractmethod
    def is_root(self, position: Position) -> bool:
        pass

    @abstractmethod
    def resolve(self, position: Position) -> Any:
        """Map a position to the node it denotes."""
        pass

    @abstractmethod
    def child_positions(self, position: Position) -> Sequence[Position]:
        pass

    @abstractmethod
    def parent(self, position: Position) -> Position:
        pass

    @abstractmethod
    def next_sibling(self, position: Position) -> Optional[Position]:
        pass

    @abstractmethod
    def prev_sibling(self, position: Position) -> Optional[Position]:
        pass

    @abstractmethod
    def path_of(self, position: Position) -> Tuple[int, ...]:
        """0-based index path from the traversal root to ``position``."""
        pass

    @abstractmethod
    def replaced(self, position: Position, node: Any) -> Position:
        """Position of ``node`` after it was stored at ``position`` via ``set_at``."""
        pass

    def first_child(self, position: Position) -> Optional[Position]:
        children = self.child_positions(position)
        return children[0] if children else None


class IndexPathNavigator(Navigator):
    """Indexed trees: positions are index paths, nodes are looked up by path."""

    kind = PositionKind.INDEX_PATH

    def root_position(self) -> IndexPath:
        return IndexPath()

    def is_root(self, position: IndexPath) -> bool:
        return position.is_root

    def resolve(self, position: IndexPath) -> Any:
        return self.adapter.get_at(self.tree, position.indices)

    def child_positions(self, position: IndexPath) -> Sequence[IndexPath]:
        indices = self.adapter.child_indices(self.tree, position.indices)
        return [position.child(index) for index in indices]

    def first_child(self, position: IndexPath) -> Optional[IndexPath]:
        indices = self.adapter.child_indices(self.tree, position.indices)
        if len(indices) == 0:
            return None
        return position.child(indices[0])

    def parent(self, position: IndexPath) -> IndexPath:
        return position.parent()

    def _sibling(self, position: IndexPath, offset: int) -> Optional[IndexPath]:
        if position.is_root:
            return None
        candidate = position.indices[-1] + offset
        if candidate in self.adapter.child_indices(self.tree, position.indices[:-1]):
            return position.sibling(candidate)
        return None

    def next_sibling(self, position: IndexPath) -> Optional[IndexPath]:
        return self._sibling(position, 1)

    def prev_sibling(self, position: IndexPath) -> Optional[IndexPath]:
        return self._sibling(position, -1)

    def path_of(self, position: IndexPath) -> Tuple[int, ...]:
        return position.indices

    def replaced(self, position: IndexPath, node: Any) -> IndexPath:
        return position


class NodeStackNavigator(Navigator):
    """Regular trees without stored links.

    The ancestor stack lets us find the parent's children (and therefore
    siblings) without indexed lookup or parent links.
    """

    kind = PositionKind.NODE_STACK

    def root_position(self) -> Position:
        return ROOT

    def is_root(self, position: Position) -> bool:
        return position is ROOT

    def resolve(self, position: Position) -> Any:
        if position is ROOT:
            return self.tree
        return position.node

    def child_positions(self, position: Position) -> Sequence[Position]:
        children = self.adapter.children_of(self.resolve(position))
        return [child_of(position, child, index) for index, child in enumerate(children)]

    def first_child(self, position: Position) -> Optional[Position]:
        children = self.adapter.children_of(self.resolve(position))
        if not children:
            return None
        return child_of(position, children[0], 0)

    def parent(self, position: NodeStack) -> Position:
        return position.pop()

    def _sibling(self, position: Position, offset: int) -> Optional[Position]:
        if position is ROOT:
            return None
        parent = position.pop()
        siblings = self.adapter.children_of(self.resolve(parent))
        candidate = position.path.indices[-1] + offset
        if 0 <= candidate < len(siblings):
            return child_of(parent, siblings[candidate], candidate)
        return None

    def next_sibling(self, position: Position) -> Optional[Position]:
        return self._sibling(position, 1)

    def prev_sibling(self, position: Position) -> Optional[Position]:
        return self._sibling(position, -1)

    def path_of(self, position: Position) -> Tuple[int, ...]:
        if position is ROOT:
            return ()
        return position.path.indices

    def replaced(self, position: Position, node: Any) -> Position:
        if position is ROOT:
            return ROOT
        return position.replace_top(node)


class NativeNavigator(Navigator):
    """Trees storing both parent and sibling links: positions are the nodes."""

    kind = PositionKind.NATIVE

    def root_position(self) -> NativePosition:
        return NativePosition(self.tree)

    def is_root(self, position: NativePosition) -> bool:
        return position.node is self.tree or self.adapter.is_root(position.node)

    def resolve(self, position: NativePosition) -> Any:
        return position.node

    def child_positions(self, position: NativePosition) -> Sequence[NativePosition]:
        return [NativePosition(child) for child in self.adapter.children_of(position.node)]

    def parent(self, position: NativePosition) -> NativePosition:
        return NativePosition(self.adapter.get_parent(position.node))

    def next_sibling(self, position: NativePosition) -> Optional[NativePosition]:
        if self.is_root(position):
            return None
        sibling = self.adapter.next_sibling(position.node)
        return None if sibling is None else NativePosition(sibling)

    def prev_sibling(self, position: NativePosition) -> Optional[NativePosition]:
        if self.is_root(position):
            return None
        sibling = self.adapter.prev_sibling(position.node)
        return None if sibling is None else NativePosition(sibling)

    def path_of(self, position: NativePosition) -> Tuple[int, ...]:
        indices = []
        node = position.node
        while not self.is_root(NativePosition(node)):
            parent = self.adapter.get_parent(node)
            indices.append(index_of(self.adapter.children_of(parent), node))
            node = parent
        return tuple(reversed(indices))

    def replaced(self, position: NativePosition, node: Any) -> NativePosition:
        return NativePosition(node)


_NAVIGATORS = {
    PositionKind.INDEX_PATH: IndexPathNavigator,
    PositionKind.NODE_STACK: NodeStackNavigator,
    PositionKind.NATIVE: NativeNavigator,
}


def make_navigator(tree: Any,
                   adapter: TreeAdapter,
                   profile: Optional[CapabilityProfile] = None) -> Navigator:
    """Select the navigator for an adapter's capability profile.

    Args:
        tree: Root of the tree to traverse
        adapter: Adapter for the tree
        profile: Precomputed profile (classified from the adapter if omitted)

    Returns:
        Navigator instance bound to the tree
    """
    if profile is None:
        profile = classify(type(adapter))
    return _NAVIGATORS[profile.position_kind](tree, adapter)
