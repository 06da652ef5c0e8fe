"""Position representations used while traversing.

A position is the traversal's own notion of "where am I", independent of how
the tree addresses its nodes. Which representation is used depends on the
adapter's capability profile:

- ``ROOT``: the tree itself, for regular trees without stored links
- ``IndexPath``: child positions from the root, for indexed trees
- ``NodeStack``: ancestor nodes paired with an index path, for regular trees
  without stored links (lets us resolve nodes without indexed lookup)
- ``NativePosition``: the tree's own node, when parent and sibling links are
  both stored

Positions are immutable. Every step produces a new one.
"""

from dataclasses import dataclass
from typing import Any, Tuple


class Position:
    """Base class of all position representations."""

    __slots__ = ()

    @property
    def depth(self) -> int:
        raise NotImplementedError


class RootPosition(Position):
    """Sentinel for the root of a regular tree."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def depth(self) -> int:
        return 0

    def __repr__(self) -> str:
        return "ROOT"

    def __reduce__(self):
        return (RootPosition, ())


ROOT = RootPosition()


@dataclass(frozen=True)
class IndexPath(Position):
    """0-based child positions leading from the root to a node."""

    indices: Tuple[int, ...] = ()

    @property
    def depth(self) -> int:
        return len(self.indices)

    @property
    def is_root(self) -> bool:
        return not self.indices

    def child(self, index: int) -> 'IndexPath':
        return IndexPath(self.indices + (index,))

    def parent(self) -> 'IndexPath':
        if not self.indices:
            raise ValueError("The root has no parent")
        return IndexPath(self.indices[:-1])

    def sibling(self, index: int) -> 'IndexPath':
        return IndexPath(self.indices[:-1] + (index,))


@dataclass(frozen=True, eq=False)
class NodeStack(Position):
    """Ancestor nodes below the root, paired with their index path.

    ``nodes[-1]`` is the current node and ``len(nodes) == path.depth``.
    The root itself is represented by ``ROOT``, never by an empty stack.
    """

    nodes: Tuple[Any, ...]
    path: IndexPath

    def __post_init__(self):
        if not self.nodes or len(self.nodes) != self.path.depth:
            raise ValueError("NodeStack needs one node per index and at least one node")

    @property
    def depth(self) -> int:
        return self.path.depth

    @property
    def node(self) -> Any:
        return self.nodes[-1]

    def push(self, node: Any, index: int) -> 'NodeStack':
        return NodeStack(self.nodes + (node,), self.path.child(index))

    def pop(self) -> Position:
        if len(self.nodes) == 1:
            return ROOT
        return NodeStack(self.nodes[:-1], self.path.parent())

    def replace_top(self, node: Any) -> 'NodeStack':
        return NodeStack(self.nodes[:-1] + (node,), self.path)


@dataclass(frozen=True, eq=False)
class NativePosition(Position):
    """The tree's own node, used when links are stored on the nodes."""

    node: Any


def child_of(position: Position, node: Any, index: int) -> Position:
    """Build the node-stack position of a child of ``position``."""
    if position is ROOT:
        return NodeStack((node,), IndexPath((index,)))
    return position.push(node, index)
