"""Self-balancing AVL binary search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """Tree node holding a value, its children and its subtree height."""

    value: Any
    left: Optional[Node] = None
    right: Optional[Node] = None
    height: int = 1


def _height(node: Optional[Node]) -> int:
    return node.height if node else 0


def _update(node: Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_left(node: Node) -> Node:
    child = node.right
    assert child is not None
    node.right = child.left
    child.left = node
    _update(node)
    _update(child)
    return child


def _rotate_right(node: Node) -> Node:
    child = node.left
    assert child is not None
    node.left = child.right
    child.right = node
    _update(node)
    _update(child)
    return child


def _rebalance(node: Node) -> Node:
    _update(node)
    if _height(node.left) - _height(node.right) > 1:
        child = node.left
        assert child is not None
        if _height(child.left) < _height(child.right):
            node.left = _rotate_left(child)
        return _rotate_right(node)
    if _height(node.right) - _height(node.left) > 1:
        child = node.right
        assert child is not None
        if _height(child.left) > _height(child.right):
            node.right = _rotate_right(child)
        return _rotate_left(node)
    return node


def _insert(node: Optional[Node], value: Any) -> Node:
    if node is None:
        return Node(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    else:
        return node
    return _rebalance(node)


def _erase(node: Optional[Node], value: Any) -> Optional[Node]:
    if node is None:
        return None
    if node.value < value:
        node.right = _erase(node.right, value)
    elif node.value > value:
        node.left = _erase(node.left, value)
    elif node.left and node.right:
        # Replace from the taller side to keep the tree balanced.
        if _height(node.left) > _height(node.right):
            cur = node.left
            while cur.right:
                cur = cur.right
            node.value = cur.value
            node.left = _erase(node.left, node.value)
        else:
            cur = node.right
            while cur.left:
                cur = cur.left
            node.value = cur.value
            node.right = _erase(node.right, node.value)
    else:
        return node.left or node.right
    return _rebalance(node)


def _balanced(node: Optional[Node]) -> bool:
    if node is None:
        return True
    if abs(_height(node.left) - _height(node.right)) > 1:
        return False
    return _balanced(node.left) and _balanced(node.right)


class AVLTree:
    """Ordered set of distinct values kept as a height-balanced tree."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None
        self._size = 0

    def insert(self, value: Any) -> bool:
        """Add value; return False if it was already present."""
        if value in self:
            return False
        self.root = _insert(self.root, value)
        self._size += 1
        return True

    def erase(self, value: Any) -> bool:
        """Remove value; return False if it was not present."""
        if value not in self:
            return False
        self.root = _erase(self.root, value)
        self._size -= 1
        return True

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in ascending order."""
        stack: list[Node] = []
        node = self.root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        node = self.root
        while node:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def is_balanced(self) -> bool:
        """Check that no node's subtrees differ in height by more than one."""
        return _balanced(self.root)