"""Core traversal engine for TreeIterLib.

This package contains the capability model, the position representations,
the stepping algorithms and the iterator front-ends built on them.
"""

from .capabilities import (
    Addressing,
    ParentLinks,
    SiblingLinks,
    PositionKind,
    CapabilityProfile,
    classify,
)
from .adapter import TreeAdapter, register_adapter, adapter_for
from .position import Position, RootPosition, ROOT, IndexPath, NodeStack, NativePosition
from .navigation import (
    Navigator,
    IndexPathNavigator,
    NodeStackNavigator,
    NativeNavigator,
    make_navigator,
)
from .stepping import Subtree, first_position, step_position, next_sibling, prev_sibling
from .iterators import TreeIterator, DepthFirstIterator, Leaves, PreOrderDFS, PostOrderDFS
from .bfs import StatelessBFS
from .walks import ascend, descend
from .rewrite import treemap, treemap_inplace

__all__ = [
    "Addressing",
    "ParentLinks",
    "SiblingLinks",
    "PositionKind",
    "CapabilityProfile",
    "classify",
    "TreeAdapter",
    "register_adapter",
    "adapter_for",
    "Position",
    "RootPosition",
    "ROOT",
    "IndexPath",
    "NodeStack",
    "NativePosition",
    "Navigator",
    "IndexPathNavigator",
    "NodeStackNavigator",
    "NativeNavigator",
    "make_navigator",
    "Subtree",
    "first_position",
    "step_position",
    "next_sibling",
    "prev_sibling",
    "TreeIterator",
    "DepthFirstIterator",
    "Leaves",
    "PreOrderDFS",
    "PostOrderDFS",
    "StatelessBFS",
    "ascend",
    "descend",
    "treemap",
    "treemap_inplace",
]
