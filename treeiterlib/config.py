"""Configuration system for TreeIterLib.

This module defines how users specify their traversal requirements: which
order to visit nodes in, when to stop descending, and how much to visit.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    PRE_ORDER = "pre"          # Parent before children
    POST_ORDER = "post"        # Children before parent
    LEAVES = "leaves"          # Only childless nodes, in post-order
    LEVEL_ORDER = "level"      # Level by level, stateless


@dataclass
class TraversalConfig:
    """Complete configuration for tree traversal.

    The ExecutionPlan validates this configuration against the
    capabilities of the TreeAdapter.
    """

    strategy: TraversalStrategy = TraversalStrategy.PRE_ORDER

    # Pre-order only: return False to visit a node without entering its children
    descend_filter: Optional[Callable[[Any], bool]] = None

    # Stop after this many nodes (None = unlimited)
    max_nodes: Optional[int] = None

    # Yield (path, node) pairs instead of bare nodes
    with_paths: bool = False

    @classmethod
    def leaves_only(cls) -> 'TraversalConfig':
        """Create config that visits only leaf nodes."""
        return cls(strategy=TraversalStrategy.LEAVES)

    @classmethod
    def level_order(cls, max_nodes: Optional[int] = None) -> 'TraversalConfig':
        """Create config for stateless level-order traversal.

        Args:
            max_nodes: Optional cap on the number of nodes visited

        Returns:
            TraversalConfig for level-order traversal
        """
        return cls(strategy=TraversalStrategy.LEVEL_ORDER, max_nodes=max_nodes)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if self.descend_filter is not None:
            if not callable(self.descend_filter):
                errors.append("descend_filter must be callable")
            if self.strategy is not TraversalStrategy.PRE_ORDER:
                errors.append("descend_filter only applies to pre-order traversal")

        if self.max_nodes is not None and self.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        return errors
