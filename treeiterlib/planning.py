"""Execution planning for TreeIterLib.

The ExecutionPlan validates that a TraversalConfig can be satisfied by
a TreeAdapter and coordinates the actual traversal execution.
"""

import logging
from typing import Any, Dict, Iterator, List, Type

from .config import TraversalConfig, TraversalStrategy
from .core.adapter import TreeAdapter
from .core.bfs import StatelessBFS
from .core.capabilities import classify
from .core.iterators import Leaves, PostOrderDFS, PreOrderDFS, TreeIterator
from .errors import CapabilityMismatchError, MissingCapabilityError

logger = logging.getLogger(__name__)


_EXHAUSTED = object()

_ITERATORS: Dict[TraversalStrategy, Type[TreeIterator]] = {
    TraversalStrategy.PRE_ORDER: PreOrderDFS,
    TraversalStrategy.POST_ORDER: PostOrderDFS,
    TraversalStrategy.LEAVES: Leaves,
    TraversalStrategy.LEVEL_ORDER: StatelessBFS,
}


class ExecutionPlan:
    """Validated execution plan for tree traversal.

    The ExecutionPlan is the bridge between user intent (TraversalConfig)
    and execution. It validates the configuration and the adapter's
    declared capabilities before any node is visited, and picks the
    iterator front-end for the requested strategy.
    """

    def __init__(self, config: TraversalConfig, adapter: TreeAdapter):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration
            adapter: Tree adapter for the specific tree type

        Raises:
            CapabilityMismatchError: If the config is invalid or the adapter
                can't satisfy it
        """
        self.config = config
        self.adapter = adapter

        config_errors = config.validate()
        if config_errors:
            raise CapabilityMismatchError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        capability_issues = self._validate_capabilities()
        if capability_issues:
            raise CapabilityMismatchError(
                f"Adapter limitations: {'; '.join(capability_issues)}"
            )

        self.iterator_class = _ITERATORS[config.strategy]
        self.nodes_processed = 0
        logger.debug("Execution plan: %s", self.get_summary())

    def _validate_capabilities(self) -> List[str]:
        """Validate adapter can satisfy configuration requirements.

        Returns:
            List of capability issues (empty if all satisfied)
        """
        issues = []
        try:
            self.profile = classify(type(self.adapter))
        except (MissingCapabilityError, TypeError) as e:
            issues.append(str(e))
        return issues

    def create_iterator(self, tree: Any) -> TreeIterator:
        """Build the iterator front-end for ``tree``."""
        if self.iterator_class is PreOrderDFS:
            return PreOrderDFS(tree, self.config.descend_filter, adapter=self.adapter)
        return self.iterator_class(tree, adapter=self.adapter)

    def _check_limits(self) -> bool:
        """Check if execution limits have been exceeded.

        Returns:
            True if we should continue, False if limits exceeded
        """
        if self.config.max_nodes is None:
            return True
        return self.nodes_processed < self.config.max_nodes

    def execute(self, tree: Any) -> Iterator[Any]:
        """Execute the traversal plan.

        Args:
            tree: Root of the tree to traverse

        Yields:
            Nodes, or ``(path, node)`` pairs if ``config.with_paths`` is set
        """
        self.nodes_processed = 0
        iterator = self.create_iterator(tree)
        source = iterator.pairs() if self.config.with_paths else iter(iterator)

        # Check before advancing so no step runs past the limit
        while self._check_limits():
            item = next(source, _EXHAUSTED)
            if item is _EXHAUSTED:
                return
            self.nodes_processed += 1
            yield item

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Useful for debugging and logging.

        Returns:
            Dictionary with plan details
        """
        return {
            'strategy': self.config.strategy.value,
            'max_nodes': self.config.max_nodes,
            'descend_filter': self.config.descend_filter is not None,
            'with_paths': self.config.with_paths,
            'adapter': self.adapter.__class__.__name__,
            'iterator': self.iterator_class.__name__,
            'addressing': self.profile.addressing.value,
            'parent_links': self.profile.parent_links.value,
            'sibling_links': self.profile.sibling_links.value,
            'position_kind': self.profile.position_kind.value,
        }
