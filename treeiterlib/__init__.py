"""TreeIterLib - Generic Tree Traversal Engine.

TreeIterLib traverses any tree-shaped data - nested lists, linked nodes,
directories, or custom structures - given an adapter that answers a few
questions about it: how to list a node's children, and optionally how to
find its parent or siblings.

Iterators:
    from treeiterlib import PreOrderDFS, PostOrderDFS, Leaves, StatelessBFS

    list(Leaves([1, [2, 3]]))          # [1, 2, 3]

Rewriting:
    from treeiterlib import treemap, treemap_inplace
"""

__version__ = "0.1.0"

from .errors import (
    TreeIterError,
    TreeInconsistencyError,
    MissingCapabilityError,
    CapabilityMismatchError,
)
from .config import TraversalConfig, TraversalStrategy
from .core import (
    Addressing,
    ParentLinks,
    SiblingLinks,
    CapabilityProfile,
    classify,
    TreeAdapter,
    register_adapter,
    adapter_for,
    ROOT,
    IndexPath,
    NodeStack,
    NativePosition,
    TreeIterator,
    Leaves,
    PreOrderDFS,
    PostOrderDFS,
    StatelessBFS,
    next_sibling,
    prev_sibling,
    ascend,
    descend,
    treemap,
    treemap_inplace,
)
from .adapters import (
    NestedSequenceAdapter,
    CallableAdapter,
    LinkedNode,
    ParentLinkedAdapter,
    LinkedAdapter,
    FileSystemNode,
    FileSystemAdapter,
)
from .planning import ExecutionPlan
from .api import (
    traverse_tree,
    traverse_with_paths,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Errors
    "TreeIterError",
    "TreeInconsistencyError",
    "MissingCapabilityError",
    "CapabilityMismatchError",
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    "ExecutionPlan",
    # Core
    "Addressing",
    "ParentLinks",
    "SiblingLinks",
    "CapabilityProfile",
    "classify",
    "TreeAdapter",
    "register_adapter",
    "adapter_for",
    "ROOT",
    "IndexPath",
    "NodeStack",
    "NativePosition",
    "TreeIterator",
    "Leaves",
    "PreOrderDFS",
    "PostOrderDFS",
    "StatelessBFS",
    "next_sibling",
    "prev_sibling",
    "ascend",
    "descend",
    "treemap",
    "treemap_inplace",
    # Adapters
    "NestedSequenceAdapter",
    "CallableAdapter",
    "LinkedNode",
    "ParentLinkedAdapter",
    "LinkedAdapter",
    "FileSystemNode",
    "FileSystemAdapter",
    # API
    "traverse_tree",
    "traverse_with_paths",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "get_tree_stats",
]
