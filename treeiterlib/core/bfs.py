"""Stateless level-order traversal.

WARNING: this is O(n^2). Every step may re-walk the tree from the root.
Only use it when you need what it buys: between two steps nothing but the
current index path is kept, no node references, so the tree may change shape
between steps as long as the path still points somewhere meaningful.

The algorithm: go up until there is a right neighbour, go right, then go
left-down until back at the same level. If the root is reached instead, go
left-down from the root to the next level.
"""

from typing import Any, Optional, Tuple

from ..config import TraversalStrategy
from .iterators import TreeIterator
from .position import IndexPath


class StatelessBFS(TreeIterator):
    """Visit all nodes of a level before any node of the next level.

    For ``[[1, 2], [3, 4]]`` this yields
    ``[[1, 2], [3, 4]], [1, 2], [3, 4], 1, 2, 3, 4``.
    """

    strategy = TraversalStrategy.LEVEL_ORDER

    def first_position(self) -> IndexPath:
        return IndexPath()

    def resolve(self, position: IndexPath) -> Any:
        return self.adapter.get_at(self.tree, position.indices)

    def path_of(self, position: IndexPath) -> Tuple[int, ...]:
        return position.indices

    def _descend_left(self, path: Tuple[int, ...], node: Any, level: int) -> Tuple[int, ...]:
        # Go down until we are at the requested level or a dead end
        while len(path) != level:
            children = self.adapter.children_of(node)
            if not children:
                break
            path = path + (0,)
            node = children[0]
        return path

    def _next_index_or_dead_end(self, path: Tuple[int, ...], level: int) -> Optional[Tuple[int, ...]]:
        current_level = len(path)
        # Go up until there is a right neighbour
        while current_level > 0:
            parent_path = path[:current_level - 1]
            siblings = self.adapter.children_of(self.adapter.get_at(self.tree, parent_path))
            next_index = path[current_level - 1] + 1
            current_level -= 1
            if next_index < len(siblings):
                return self._descend_left(parent_path + (next_index,), siblings[next_index], level)
        return None

    def step_position(self, position: IndexPath) -> Optional[IndexPath]:
        original_level = active_level = position.depth
        path: Optional[Tuple[int, ...]] = position.indices
        while True:
            path = self._next_index_or_dead_end(path, active_level)
            if path is None:
                active_level += 1
                if active_level > original_level + 1:
                    return None
                path = self._descend_left((), self.tree, active_level)
            if len(path) == active_level:
                return IndexPath(path)
