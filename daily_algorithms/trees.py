"""Binary tree helpers: traversal and balancing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None

    def inorder(self) -> Iterator[int]:
        """Yield the values in left-root-right order."""
        stack: list[TreeNode] = []
        node: TreeNode | None = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.val
            node = node.right


def build_balanced(values: Iterable[int]) -> TreeNode | None:
    """Build a height-balanced tree whose in-order walk gives ``values``."""
    items: Sequence[int] = list(values)

    def build(low: int, high: int) -> TreeNode | None:
        if low > high:
            return None
        mid = (low + high) // 2
        return TreeNode(items[mid], build(low, mid - 1), build(mid + 1, high))

    return build(0, len(items) - 1)


def balance_bst(root: TreeNode | None) -> TreeNode | None:
    """Return a balanced search tree holding the same values as ``root``."""
    if root is None:
        return None
    return build_balanced(root.inorder())


def preorder_traversal(root: TreeNode | None) -> list[int]:
    """Values in root-left-right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result