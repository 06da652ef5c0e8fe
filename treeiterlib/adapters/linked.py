"""Linked node trees: nodes that know their parent and siblings.

``LinkedNode`` keeps a parent reference and next/previous sibling references
up to date as children are appended or replaced. Two adapters expose it:

- ``ParentLinkedAdapter`` uses only the parent links; siblings are found by
  scanning the parent's children.
- ``LinkedAdapter`` uses parent and sibling links, so traversals can step
  directly from node to node.
"""

from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..core.adapter import TreeAdapter
from ..core.capabilities import ParentLinks, SiblingLinks


class LinkedNode:
    """A tree node with a value, ordered children and stored links.

    Nodes compare by identity.
    """

    def __init__(self, value: Any = None, children: Iterable['LinkedNode'] = ()):
        self.value = value
        self.parent: Optional['LinkedNode'] = None
        self.next: Optional['LinkedNode'] = None
        self.prev: Optional['LinkedNode'] = None
        self.children: List['LinkedNode'] = []
        for child in children:
            self.append(child)

    def append(self, child: 'LinkedNode') -> 'LinkedNode':
        """Add a child after the current last child and return it."""
        last = self.children[-1] if self.children else None
        child.parent = self
        child.prev = last
        child.next = None
        if last is not None:
            last.next = child
        self.children.append(child)
        return child

    def replace_child(self, index: int, child: 'LinkedNode') -> None:
        """Put ``child`` in place of the child at ``index``, relinking siblings."""
        old = self.children[index]
        child.parent = self
        child.prev = old.prev
        child.next = old.next
        if child.prev is not None:
            child.prev.next = child
        if child.next is not None:
            child.next.prev = child
        self.children[index] = child
        old.parent = old.prev = old.next = None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def to_nested(self) -> Any:
        """Convert to nested lists: leaves become their value."""
        if not self.children:
            return self.value
        return [child.to_nested() for child in self.children]

    @classmethod
    def from_nested(cls, value: Any) -> 'LinkedNode':
        """Build a linked tree from nested lists; lists become value-less branches."""
        if isinstance(value, (list, tuple)):
            return cls(None, [cls.from_nested(item) for item in value])
        return cls(value)

    def __repr__(self) -> str:
        if self.children:
            return f"LinkedNode({self.value!r}, {len(self.children)} children)"
        return f"LinkedNode({self.value!r})"


class ParentLinkedAdapter(TreeAdapter):
    """Regular tree with stored parent links and implicit siblings."""

    parent_links = ParentLinks.STORED

    def get_children(self, node: LinkedNode) -> Sequence[LinkedNode]:
        return node.children

    def get_parent(self, node: LinkedNode) -> Optional[LinkedNode]:
        return node.parent

    def is_root(self, node: LinkedNode) -> bool:
        return node.parent is None

    def supports_modification(self) -> bool:
        return True

    def set_at(self, tree: LinkedNode, path: Tuple[int, ...], node: LinkedNode) -> None:
        if not path:
            raise ValueError("Cannot replace the root of a linked tree in place")
        self.get_at(tree, path[:-1]).replace_child(path[-1], node)


class LinkedAdapter(ParentLinkedAdapter):
    """Regular tree with stored parent and sibling links."""

    sibling_links = SiblingLinks.STORED

    def next_sibling(self, node: LinkedNode) -> Optional[LinkedNode]:
        return node.next

    def prev_sibling(self, node: LinkedNode) -> Optional[LinkedNode]:
        return node.prev
