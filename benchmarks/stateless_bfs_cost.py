#!/usr/bin/env python3
"""
Cost of stateless level-order traversal.

StatelessBFS keeps nothing but the current index path between steps, so each
step may re-walk the tree from the root. This benchmark makes the resulting
O(n^2) behaviour visible next to the linear depth-first traversals:

1. Builds complete trees of growing size
2. Times PreOrderDFS and StatelessBFS over each, median of several runs
3. Prints the BFS/DFS ratio, which should grow with the tree size
"""

import gc
import statistics
import sys
import time
from pathlib import Path
from typing import Any, List

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from treeiterlib import PreOrderDFS, StatelessBFS


def complete_tree(depth: int, branching: int) -> Any:
    if depth == 0:
        return 0
    return [complete_tree(depth - 1, branching) for _ in range(branching)]


def time_iteration(iterator, iterations: int = 3) -> float:
    times: List[float] = []
    for _ in range(iterations):
        gc.collect()
        start = time.perf_counter()
        for _ in iterator:
            pass
        times.append(time.perf_counter() - start)
    return statistics.median(times)


def main():
    print(f"{'nodes':>8} {'dfs (s)':>10} {'bfs (s)':>10} {'ratio':>8}")
    print("-" * 40)
    for depth in range(3, 8):
        tree = complete_tree(depth, 3)
        nodes = sum(1 for _ in PreOrderDFS(tree))
        dfs = time_iteration(PreOrderDFS(tree))
        bfs = time_iteration(StatelessBFS(tree))
        print(f"{nodes:>8} {dfs:>10.4f} {bfs:>10.4f} {bfs / dfs:>8.1f}")


if __name__ == "__main__":
    main()
