"""Tree-rewriting folds built on the depth-first iterators."""

import logging
from typing import Any, Callable, List, Tuple

from ..errors import TreeInconsistencyError
from .iterators import PostOrderDFS, PreOrderDFS

logger = logging.getLogger(__name__)


def treemap(f: Callable[[Tuple[int, ...], Any, List[Any]], Any], iterator: PostOrderDFS) -> Any:
    """Build a new tree bottom-up.

    ``f(path, node, children)`` is called once per node in post-order, where
    ``children`` holds the values ``f`` already returned for the node's
    children (empty for leaves). The value returned for the root is the
    result.

    Transformed siblings are kept in one buffer per depth. Buffers are plain
    lists, so values of any mix of types can be collected.

    Example::

        >>> treemap(lambda path, node, cs: sum(cs) if cs else node,
        ...         PostOrderDFS([1, [2, 3]]))
        6
    """
    if not isinstance(iterator, PostOrderDFS):
        raise TypeError(f"treemap needs a PostOrderDFS iterator, got {type(iterator).__name__}")

    # buffers[d] holds transformed nodes at depth d + 1
    buffers: List[List[Any]] = [[]]
    for path, node in iterator.pairs():
        while len(buffers) < len(path):
            buffers.append([])
        children: List[Any] = []
        if len(path) < len(buffers):
            children = buffers.pop()
        value = f(path, node, children)
        if not path:
            return value
        buffers[-1].append(value)
    raise TreeInconsistencyError("Post-order traversal finished without visiting the root")


def treemap_inplace(f: Callable[[Any], Any], iterator: PreOrderDFS) -> Any:
    """Replace nodes top-down, in place.

    ``f(node)`` is called for each node in pre-order. When it returns a
    different object, that object is stored at the node's path through the
    adapter's ``set_at`` and the walk continues from there, so the new
    node's children are visited next. Replacing the root restarts the walk
    over the new root.

    Returns:
        The root of the rewritten tree (a new object if the root was replaced)

    Raises:
        NotImplementedError: If the adapter does not support modification;
            checked before ``f`` is called on any node
    """
    if not isinstance(iterator, PreOrderDFS):
        raise TypeError(f"treemap_inplace needs a PreOrderDFS iterator, got {type(iterator).__name__}")
    if not iterator.adapter.supports_modification():
        raise NotImplementedError(
            f"{iterator.adapter.__class__.__name__} does not support modification"
        )

    position = iterator.first_position()
    while position is not None:
        node = iterator.resolve(position)
        new_node = f(node)
        if new_node is not node:
            if iterator.is_root(position):
                logger.debug("Root replaced by %r, restarting walk", type(new_node).__name__)

                def skip_new_root(candidate: Any) -> Any:
                    if candidate is new_node:
                        return candidate
                    return f(candidate)

                return treemap_inplace(skip_new_root, iterator.over(new_node))
            iterator.adapter.set_at(iterator.tree, iterator.path_of(position), new_node)
            position = iterator.navigator.replaced(position, new_node)
        position = iterator.step_position(position)
    return iterator.tree
