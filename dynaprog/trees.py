"""Path problems on binary trees: diameter and maximum path sums."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    value: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _postorder(root: TreeNode) -> Iterator[TreeNode]:
    """Yield every node after both of its children, without recursion."""
    stack: list[tuple[TreeNode, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, False))


def _below(results: dict[TreeNode, int], node: TreeNode | None) -> int:
    return results[node] if node is not None else 0


def diameter(root: TreeNode | None) -> int:
    """Number of edges on the longest path between any two nodes."""
    if root is None:
        return 0
    height: dict[TreeNode, int] = {}
    best_nodes = 0
    for node in _postorder(root):
        left = _below(height, node.left)
        right = _below(height, node.right)
        height[node] = 1 + max(left, right)
        best_nodes = max(best_nodes, 1 + left + right)
    return best_nodes - 1


def max_path_sum(root: TreeNode | None) -> int:
    """Largest sum of values along a path between any two nodes."""
    if root is None:
        raise ValueError("tree must not be empty")
    downward: dict[TreeNode, int] = {}
    best: int | None = None
    for node in _postorder(root):
        left = _below(downward, node.left)
        right = _below(downward, node.right)
        # A negative branch is dropped by ending the path at this node.
        down = max(node.value + max(left, right), node.value)
        through = max(down, left + right + node.value)
        best = through if best is None else max(best, through)
        downward[node] = down
    assert best is not None
    return best


def max_leaf_path_sum(root: TreeNode | None) -> int:
    """Largest sum of values along a path from one leaf to another.

    When the root has at most one child, the root itself counts as an
    end of the path.
    """
    if root is None:
        raise ValueError("tree must not be empty")
    to_leaf: dict[TreeNode, int] = {}
    best: int | None = None
    for node in _postorder(root):
        left = _below(to_leaf, node.left)
        right = _below(to_leaf, node.right)
        if node.left is None and node.right is None:
            to_leaf[node] = node.value
        elif node.left is None:
            to_leaf[node] = node.value + right
        elif node.right is None:
            to_leaf[node] = node.value + left
        else:
            through = node.value + left + right
            best = through if best is None else max(best, through)
            to_leaf[node] = node.value + max(left, right)
    if root.left is None or root.right is None:
        from_root = to_leaf[root]
        best = from_root if best is None else max(best, from_root)
    assert best is not None
    return best