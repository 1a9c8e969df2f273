"""A self-balancing AVL binary search tree of distinct values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["AVLTree"]


@dataclass
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _balance(node)
    if balance > 1:
        assert node.left is not None
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """Ordered set of distinct, mutually comparable values kept height-balanced."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, value: Any) -> bool:
        """Add ``value``; return False if it was already present."""
        self._root, inserted = self._insert(self._root, value)
        if inserted:
            self._size += 1
        return inserted

    def _insert(self, node: _Node | None, value: Any) -> tuple[_Node, bool]:
        if node is None:
            return _Node(value), True
        if value < node.value:
            node.left, inserted = self._insert(node.left, value)
        elif value > node.value:
            node.right, inserted = self._insert(node.right, value)
        else:
            return node, False
        return (_rebalance(node) if inserted else node), inserted

    def remove(self, value: Any) -> None:
        """Delete ``value``; raise KeyError if it is not in the tree."""
        self._root = self._remove(self._root, value)
        self._size -= 1

    def _remove(self, node: _Node | None, value: Any) -> _Node | None:
        if node is None:
            raise KeyError(value)
        if value < node.value:
            node.left = self._remove(node.left, value)
        elif value > node.value:
            node.right = self._remove(node.right, value)
        elif node.left is None or node.right is None:
            return node.left or node.right
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node.right = self._remove(node.right, successor.value)
        return _rebalance(node)

    def search(self, value: Any) -> Any:
        """Return the value of the parent of ``value``, or None if it is the root.

        Raises KeyError if ``value`` is not in the tree.
        """
        parent: _Node | None = None
        node = self._root
        while node is not None:
            if value == node.value:
                return parent.value if parent else None
            parent = node
            node = node.left if value < node.value else node.right
        raise KeyError(value)

    def preorder(self) -> list[Any]:
        """Return the values in root-left-right order."""
        result: list[Any] = []
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)
        return result

    def __contains__(self, value: Any) -> bool:
        try:
            self.search(value)
        except KeyError:
            return False
        return True

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right