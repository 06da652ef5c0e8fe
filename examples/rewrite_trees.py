#!/usr/bin/env python3
"""
Rewriting trees with treemap and treemap_inplace.

This example demonstrates:
- Computing a value bottom-up (subtree sums, tree height)
- Rebuilding a tree with a different shape
- Replacing nodes in place, top-down
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treeiterlib import PostOrderDFS, PreOrderDFS, treemap, treemap_inplace


def subtree_sums(path, node, children):
    return sum(children) if isinstance(node, list) else node


def height(path, node, children):
    return 1 + max(children) if children else 0


def mirror(path, node, children):
    return list(reversed(children)) if isinstance(node, list) else node


def main():
    tree = [1, [2, 3], [[4], 5]]
    print("Tree:  ", tree)
    print("Sum:   ", treemap(subtree_sums, PostOrderDFS(tree)))
    print("Height:", treemap(height, PostOrderDFS(tree)))
    print("Mirror:", treemap(mirror, PostOrderDFS(tree)))

    treemap_inplace(lambda node: node * node if isinstance(node, int) else node,
                    PreOrderDFS(tree))
    print("Squared in place:", tree)


if __name__ == "__main__":
    main()
