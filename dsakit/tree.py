"""Binary trees built from pre-order input, with the standard traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

NULL_MARKER = -1


@dataclass
class TreeNode:
    data: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_tree(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree from values in pre-order, where -1 marks a missing child."""
    stream = iter(values)

    def build() -> Optional[TreeNode]:
        try:
            data = next(stream)
        except StopIteration:
            raise ValueError("not enough values to complete the tree") from None
        if data == NULL_MARKER:
            return None
        node = TreeNode(data)
        node.left = build()
        node.right = build()
        return node

    return build()


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the node values level by level, left to right."""
    levels: list[list[int]] = []
    current = deque([root] if root is not None else [])
    while current:
        levels.append([node.data for node in current])
        following: deque[TreeNode] = deque()
        for node in current:
            if node.left:
                following.append(node.left)
            if node.right:
                following.append(node.right)
        current = following
    return levels


def _inorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _preorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def inorder(root: Optional[TreeNode]) -> list[int]:
    return list(_inorder(root))


def preorder(root: Optional[TreeNode]) -> list[int]:
    return list(_preorder(root))


def postorder(root: Optional[TreeNode]) -> list[int]:
    return list(_postorder(root))