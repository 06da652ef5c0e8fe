"""TreeAdapter abstraction for TreeIterLib.

The TreeAdapter is what makes TreeIterLib representation-agnostic. It answers
a small, fixed set of questions about a tree (children, and optionally parent
and siblings) and declares at class level which of those questions it can
answer directly. The traversal engine never stores bookkeeping in the tree.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

from ..errors import MissingCapabilityError
from .capabilities import (
    Addressing,
    ParentLinks,
    SiblingLinks,
    missing_capability,
)


class TreeAdapter(ABC):
    """Abstract adapter for navigating a specific kind of tree.

    Subclasses describe their tree through three class attributes:

    - ``addressing``: INDEXED trees are looked up by index paths from the
      root; REGULAR trees hand out identity-bearing node values.
    - ``parent_links``: STORED if ``get_parent``/``is_root`` are implemented.
    - ``sibling_links``: STORED if ``next_sibling``/``prev_sibling`` are
      implemented. Otherwise siblings are derived from the parent's children.

    Only ``get_children`` is mandatory.
    """

    addressing = Addressing.REGULAR
    parent_links = ParentLinks.IMPLICIT
    sibling_links = SiblingLinks.IMPLICIT

    @abstractmethod
    def get_children(self, node: Any) -> Sequence[Any]:
        """Get the ordered children of a node.

        Args:
            node: The parent node

        Returns:
            Ordered sequence of child nodes (may be empty)
        """
        pass

    def children_of(self, node: Any) -> Sequence[Any]:
        """Get children as an indexable sequence.

        Adapters are allowed to return any iterable from ``get_children``;
        the traversal engine needs ``len`` and indexing.
        """
        children = self.get_children(node)
        if isinstance(children, (list, tuple, range)):
            return children
        return list(children)

    def is_leaf(self, node: Any) -> bool:
        """Check if a node has no children."""
        return len(self.children_of(node)) == 0

    # Indexed access

    def child_indices(self, tree: Any, path: Tuple[int, ...]) -> range:
        """Get the valid child positions of the node at ``path``.

        Args:
            tree: Root of the tree
            path: Index path of the parent node

        Returns:
            range of 0-based child positions
        """
        return range(len(self.children_of(self.get_at(tree, path))))

    def get_at(self, tree: Any, path: Sequence[int]) -> Any:
        """Look up the node at an index path.

        The default walks ``get_children`` from the root, so every adapter
        supports it. Indexed adapters may override with direct access.

        Raises:
            IndexError: If the path does not exist in the tree
        """
        node = tree
        for index in path:
            children = self.children_of(node)
            if not 0 <= index < len(children):
                raise IndexError(f"Index path {tuple(path)!r} does not exist in tree")
            node = children[index]
        return node

    # Stored parent links - only required if parent_links is STORED

    @missing_capability
    def get_parent(self, node: Any) -> Optional[Any]:
        """Get the parent of a node (None for the root).

        Raises:
            MissingCapabilityError: If parent links are not stored
        """
        raise MissingCapabilityError(self.__class__.__name__, 'get_parent')

    @missing_capability
    def is_root(self, node: Any) -> bool:
        """Check whether a node is the root of its tree.

        Raises:
            MissingCapabilityError: If parent links are not stored
        """
        raise MissingCapabilityError(self.__class__.__name__, 'is_root')

    # Stored sibling links - only required if sibling_links is STORED

    @missing_capability
    def next_sibling(self, node: Any) -> Optional[Any]:
        """Get the sibling right after a node (None for the last child).

        Raises:
            MissingCapabilityError: Trees with stored siblings must override this
        """
        raise MissingCapabilityError(
            self.__class__.__name__, 'next_sibling',
            "trees with stored sibling links must override it explicitly"
        )

    @missing_capability
    def prev_sibling(self, node: Any) -> Optional[Any]:
        """Get the sibling right before a node (None for the first child).

        Raises:
            MissingCapabilityError: Trees with stored siblings must override this
        """
        raise MissingCapabilityError(
            self.__class__.__name__, 'prev_sibling',
            "trees with stored sibling links must override it explicitly"
        )

    # Tree modification - only required if supports_modification() returns True

    def supports_modification(self) -> bool:
        """Check if adapter supports replacing nodes in place.

        Returns:
            True if ``set_at`` is implemented
        """
        return False

    def set_at(self, tree: Any, path: Tuple[int, ...], node: Any) -> None:
        """Replace the node at a non-empty index path.

        Args:
            tree: Root of the tree
            path: Index path of the node to replace
            node: The replacement node

        Raises:
            NotImplementedError: If modification not supported
        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support modification")


AdapterFactory = Callable[[], TreeAdapter]

_DEFAULT_ADAPTERS: List[Tuple[Tuple[type, ...], AdapterFactory]] = []


def register_adapter(types: Union[type, Tuple[type, ...]], factory: AdapterFactory) -> None:
    """Register the adapter used for trees of the given type(s).

    Later registrations take precedence over earlier ones.

    Args:
        types: A type or tuple of types, checked with ``isinstance``
        factory: Zero-argument callable returning a TreeAdapter
    """
    if isinstance(types, type):
        types = (types,)
    _DEFAULT_ADAPTERS.insert(0, (types, factory))


def adapter_for(tree: Any) -> TreeAdapter:
    """Find the default adapter for a tree value.

    Raises:
        TypeError: If no adapter is registered for the tree's type
    """
    for types, factory in _DEFAULT_ADAPTERS:
        if isinstance(tree, types):
            return factory()
    raise TypeError(
        f"No default adapter registered for {type(tree).__name__}; "
        f"pass adapter= explicitly"
    )
