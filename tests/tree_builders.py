"""Shared tree builders for the TreeIterLib test suite."""

import random
from typing import Any, List

from treeiterlib import CallableAdapter


def random_nested_tree(seed: int, max_depth: int = 4, max_children: int = 3) -> List[Any]:
    """Build a random nested-list tree whose leaves are distinct integers."""
    rng = random.Random(seed)
    counter = [0]

    def build(depth: int) -> Any:
        if depth >= max_depth or (depth > 0 and rng.random() < 0.35):
            counter[0] += 1
            return counter[0]
        return [build(depth + 1) for _ in range(rng.randint(0, max_children))]

    return [build(1) for _ in range(rng.randint(1, max_children))]


def list_children_adapter() -> CallableAdapter:
    """Regular (node-stack) adapter over nested lists."""
    return CallableAdapter(lambda node: node if isinstance(node, list) else [])


def reference_preorder(tree: Any, depth: int = 0):
    """Recursive pre-order returning (depth, node) pairs."""
    yield depth, tree
    if isinstance(tree, list):
        for child in tree:
            yield from reference_preorder(child, depth + 1)


def reference_postorder(tree: Any):
    """Recursive post-order over nested lists."""
    if isinstance(tree, list):
        for child in tree:
            yield from reference_postorder(child)
    yield tree
