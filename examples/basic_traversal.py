#!/usr/bin/env python3
"""
Basic TreeIterLib usage.

This example demonstrates:
- The four traversal orders on a nested-list tree
- Skipping subtrees with a descend filter
- Traversing a linked tree and a directory with explicit adapters
"""

import sys
import tempfile
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treeiterlib import (
    FileSystemAdapter,
    Leaves,
    LinkedAdapter,
    LinkedNode,
    PostOrderDFS,
    PreOrderDFS,
    StatelessBFS,
    get_tree_stats,
)


def nested_lists():
    tree = [[1, 2], [3, [4, 5]]]
    print("Tree:", tree)
    print("  pre-order: ", list(PreOrderDFS(tree)))
    print("  post-order:", list(PostOrderDFS(tree)))
    print("  leaves:    ", list(Leaves(tree)))
    print("  level:     ", list(StatelessBFS(tree)))
    print("  pre-order, not entering [1, 2]:",
          list(PreOrderDFS(tree, lambda node: node != [1, 2])))
    print("  stats:", get_tree_stats(tree))


def linked_nodes():
    root = LinkedNode.from_nested([[1, 2], [3]])
    adapter = LinkedAdapter()
    print("\nLinked tree paths (pre-order):")
    for path, node in PreOrderDFS(root, adapter=adapter).pairs():
        print(f"  {path!s:10} {node!r}")


def directory():
    with tempfile.TemporaryDirectory() as tmpdir:
        base = Path(tmpdir)
        (base / "src" / "pkg").mkdir(parents=True)
        (base / "src" / "pkg" / "module.py").write_text("x = 1\n")
        (base / "README").write_text("hello\n")

        adapter = FileSystemAdapter()
        root = adapter.create_node(base)
        print("\nDirectory leaves:")
        for node in Leaves(root, adapter=adapter):
            print(f"  {node.path.relative_to(base)}")


if __name__ == "__main__":
    nested_lists()
    linked_nodes()
    directory()
