"""Adapter for trees built from nested lists and tuples.

Every ``list`` or ``tuple`` is a branch whose children are its elements;
any other value is a leaf. Nodes are addressed by index paths, so this is an
indexed tree with implicit parent and sibling links.
"""

from typing import Any, Sequence, Tuple

from ..core.adapter import TreeAdapter, register_adapter
from ..core.capabilities import Addressing


class NestedSequenceAdapter(TreeAdapter):
    """Indexed adapter for nested ``list``/``tuple`` values.

    Args:
        branch_types: Types treated as branches (default: list and tuple)
    """

    addressing = Addressing.INDEXED

    def __init__(self, branch_types: Tuple[type, ...] = (list, tuple)):
        self.branch_types = branch_types

    def get_children(self, node: Any) -> Sequence[Any]:
        if isinstance(node, self.branch_types):
            return node
        return ()

    def get_at(self, tree: Any, path: Sequence[int]) -> Any:
        node = tree
        for index in path:
            if not isinstance(node, self.branch_types):
                raise IndexError(f"Index path {tuple(path)!r} passes through leaf {node!r}")
            node = node[index]
        return node

    def supports_modification(self) -> bool:
        return True

    def set_at(self, tree: Any, path: Tuple[int, ...], node: Any) -> None:
        """Replace the element at ``path``; its parent must be a list."""
        if not path:
            raise ValueError("Cannot replace the root of a nested sequence in place")
        parent = self.get_at(tree, path[:-1])
        if not isinstance(parent, list):
            raise TypeError(f"Cannot assign into immutable {type(parent).__name__}")
        parent[path[-1]] = node


register_adapter((list, tuple), NestedSequenceAdapter)
