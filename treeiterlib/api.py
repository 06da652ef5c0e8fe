"""High-level API for TreeIterLib.

This module provides simple, functional interfaces for common tree traversal
operations. These functions wrap the iterator front-ends and ExecutionPlan
for ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from .config import TraversalConfig, TraversalStrategy
from .core.adapter import TreeAdapter, adapter_for
from .planning import ExecutionPlan


def traverse_tree(
    tree: Any,
    adapter: Optional[TreeAdapter] = None,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
    descend_filter: Optional[Callable[[Any], bool]] = None,
    max_nodes: Optional[int] = None,
) -> Iterator[Any]:
    """Simple interface for tree traversal.

    Args:
        tree: Root of the tree
        adapter: Tree adapter (looked up from the tree's type if omitted)
        strategy: Traversal strategy (pre, post, leaves, level)
        descend_filter: Pre-order only; return False to skip a node's children
        max_nodes: Stop after this many nodes

    Yields:
        Nodes in traversal order

    Example:
        >>> list(traverse_tree([[1, 2], [3, 4]], strategy="level"))
        [[[1, 2], [3, 4]], [1, 2], [3, 4], 1, 2, 3, 4]
    """
    config = TraversalConfig(
        strategy=_parse_strategy(strategy),
        descend_filter=descend_filter,
        max_nodes=max_nodes,
    )
    plan = ExecutionPlan(config, _resolve_adapter(tree, adapter))
    yield from plan.execute(tree)


def traverse_with_paths(
    tree: Any,
    adapter: Optional[TreeAdapter] = None,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
    **kwargs
) -> Iterator[Tuple[Tuple[int, ...], Any]]:
    """Traverse a tree yielding ``(path, node)`` pairs.

    Paths are tuples of 0-based child positions from the root.

    Args:
        tree: Root of the tree
        adapter: Tree adapter (looked up from the tree's type if omitted)
        strategy: Traversal strategy (pre, post, leaves, level)
        **kwargs: Additional TraversalConfig fields
    """
    config = TraversalConfig(strategy=_parse_strategy(strategy), with_paths=True, **kwargs)
    plan = ExecutionPlan(config, _resolve_adapter(tree, adapter))
    yield from plan.execute(tree)


def count_nodes(tree: Any, adapter: Optional[TreeAdapter] = None, **kwargs) -> int:
    """Count nodes visited by a traversal (see traverse_tree for options)."""
    count = 0
    for _ in traverse_tree(tree, adapter, **kwargs):
        count += 1
    return count


def find_nodes(
    tree: Any,
    predicate: Callable[[Any], bool],
    adapter: Optional[TreeAdapter] = None,
    **kwargs
) -> Iterator[Any]:
    """Find nodes that match a predicate.

    Args:
        tree: Root of the tree
        predicate: Function that returns True for matching nodes
        adapter: Tree adapter (looked up from the tree's type if omitted)
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Nodes that match the predicate, in traversal order
    """
    for node in traverse_tree(tree, adapter, **kwargs):
        if predicate(node):
            yield node


def get_leaf_nodes(tree: Any, adapter: Optional[TreeAdapter] = None) -> List[Any]:
    """Get all leaf nodes of a tree, left to right."""
    return list(traverse_tree(tree, adapter, strategy=TraversalStrategy.LEAVES))


def get_tree_stats(tree: Any, adapter: Optional[TreeAdapter] = None) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total, leaf and internal node counts, maximum depth,
        a per-depth node histogram and the average branching factor

    Example:
        >>> stats = get_tree_stats([1, [2, 3]])
        >>> stats['total_nodes'], stats['leaf_nodes'], stats['max_depth']
        (5, 3, 2)
    """
    adapter = _resolve_adapter(tree, adapter)
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    for path, node in traverse_with_paths(tree, adapter):
        depth = len(path)
        stats['total_nodes'] += 1

        if adapter.is_leaf(node):
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    # Every node but the root is some internal node's child
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats


# Helper functions

def _resolve_adapter(tree: Any, adapter: Optional[TreeAdapter]) -> TreeAdapter:
    return adapter if adapter is not None else adapter_for(tree)


def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string

    Returns:
        TraversalStrategy enum value
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'pre': TraversalStrategy.PRE_ORDER,
        'dfs': TraversalStrategy.PRE_ORDER,
        'dfs_pre': TraversalStrategy.PRE_ORDER,
        'pre_order': TraversalStrategy.PRE_ORDER,
        'post': TraversalStrategy.POST_ORDER,
        'dfs_post': TraversalStrategy.POST_ORDER,
        'post_order': TraversalStrategy.POST_ORDER,
        'leaves': TraversalStrategy.LEAVES,
        'bfs': TraversalStrategy.LEVEL_ORDER,
        'level': TraversalStrategy.LEVEL_ORDER,
        'level_order': TraversalStrategy.LEVEL_ORDER,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")
