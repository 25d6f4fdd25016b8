"""Binary search trees, plain and AVL-balanced, with search statistics."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

_SPACES = 5


@dataclass(eq=False)
class TreeNode:
    """A tree node; ``height`` is kept up to date only by balanced insertion."""

    data: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None
    height: int = 1


def _height(node: Optional[TreeNode]) -> int:
    return node.height if node is not None else 0


def _balance_factor(node: TreeNode) -> int:
    return _height(node.right) - _height(node.left)


def _fix_height(node: TreeNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_left(node: TreeNode) -> TreeNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _fix_height(node)
    _fix_height(pivot)
    return pivot


def _rotate_right(node: TreeNode) -> TreeNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _fix_height(node)
    _fix_height(pivot)
    return pivot


def balance(node: TreeNode) -> TreeNode:
    """Restore the AVL property at a node and return the new subtree root."""
    _fix_height(node)
    factor = _balance_factor(node)
    if factor == 2:
        if _balance_factor(node.right) < 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    if factor == -2:
        if _balance_factor(node.left) > 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    return node


def insert(tree: Optional[TreeNode], value: int) -> TreeNode:
    """Insert without balancing; equal values go right. Returns the root."""
    node = TreeNode(value)
    if tree is None:
        return node
    current = tree
    while True:
        if value < current.data:
            if current.left is None:
                current.left = node
                return tree
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return tree
            current = current.right


def insert_balanced(tree: Optional[TreeNode], value: int) -> TreeNode:
    """Insert and rebalance on the way back up. Returns the new root."""
    if tree is None:
        return TreeNode(value)
    if value < tree.data:
        tree.left = insert_balanced(tree.left, value)
    else:
        tree.right = insert_balanced(tree.right, value)
    return balance(tree)


def find(tree: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Return the node holding the key, or None."""
    node = tree
    while node is not None and node.data != key:
        node = node.right if node.data < key else node.left
    return node


def find_comparisons(tree: Optional[TreeNode], key: int) -> Optional[int]:
    """Return how many nodes are compared to find the key, or None if absent."""
    count = 0
    node = tree
    while node is not None:
        count += 1
        if node.data == key:
            return count
        node = node.right if node.data < key else node.left
    return None


def depth(tree: Optional[TreeNode]) -> int:
    """Number of levels in the tree."""
    levels = 0
    level = [tree] if tree is not None else []
    while level:
        levels += 1
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return levels


def comparison_stats(tree: Optional[TreeNode]) -> tuple[int, int]:
    """Return the node count and the sum of node depths (the root at depth 0)."""
    vertices = 0
    comparisons = 0
    stack = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        if node is None:
            continue
        vertices += 1
        comparisons += level
        stack.append((node.right, level + 1))
        stack.append((node.left, level + 1))
    return vertices, comparisons


def preorder(tree: Optional[TreeNode]) -> Iterator[int]:
    """Yield the values in pre-order: node, left subtree, right subtree."""
    stack = [tree]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        yield node.data
        stack.append(node.right)
        stack.append(node.left)


def _right_first(tree: Optional[TreeNode]) -> Iterator[tuple[TreeNode, int, bool]]:
    """Yield (node, level, is_right_child) visiting right subtree, node, left subtree."""
    stack: list[tuple[Optional[TreeNode], int, bool, bool]] = [(tree, 0, False, False)]
    while stack:
        node, level, is_right, ready = stack.pop()
        if node is None:
            continue
        if ready:
            yield node, level, is_right
            continue
        stack.append((node.left, level + 1, False, False))
        stack.append((node, level, is_right, True))
        stack.append((node.right, level + 1, True, False))


def draw(tree: Optional[TreeNode]) -> str:
    """Draw the tree sideways with branch lines, right subtree on top."""
    parts: list[str] = []
    path: list[bool] = []
    for node, level, is_right in _right_first(tree):
        level += 1
        if len(path) <= level:
            path.extend([False] * (level + 1 - len(path)))
        if level > 1:
            path[level - 2] = is_right
        if node.left is not None:
            path[level - 1] = True

        parts.append("\n")
        for i in range(level - 1):
            if i == level - 2:
                parts.append("+")
            else:
                parts.append("|" if path[i] else " ")
            parts.append((" " if i < level - 2 else "-") * (_SPACES - 1))
        parts.append(f"[{node.data}]\n")
        for i in range(level):
            parts.append("|" if path[i] else " ")
            parts.append(" " * (_SPACES - 1))
    return "".join(parts)


def display(tree: Optional[TreeNode]) -> str:
    """Draw the tree sideways by indentation only, right subtree on top."""
    return "".join(
        f"\n{' ' * (_SPACES * level)}{node.data}" for node, level, _ in _right_first(tree)
    )