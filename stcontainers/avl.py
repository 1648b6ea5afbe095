"""Self-balancing binary search tree (AVL)."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TextIO, TypeVar

from stcontainers.utility import maximum

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    value: T
    height: int = 0
    left: Optional["_Node[T]"] = None
    right: Optional["_Node[T]"] = None


def _height(node: Optional[_Node[Any]]) -> int:
    return -1 if node is None else node.height


def _update_height(node: _Node[Any]) -> None:
    node.height = maximum(_height(node.left), _height(node.right)) + 1


def _balance_factor(node: Optional[_Node[Any]]) -> int:
    if node is None:
        return -1
    return _height(node.left) - _height(node.right)


def _rotate_right(node: _Node[T]) -> _Node[T]:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rotate_left(node: _Node[T]) -> _Node[T]:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rebalance(node: _Node[T]) -> _Node[T]:
    _update_height(node)
    factor = _balance_factor(node)
    if factor > 1:
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
        return _rotate_right(node)
    if factor < -1:
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
        return _rotate_left(node)
    return node


class AVLTree(Generic[T]):
    """An ordered set of unique values kept height-balanced."""

    def __init__(self) -> None:
        self._root: Optional[_Node[T]] = None

    def empty(self) -> bool:
        """True when the tree holds no values."""
        return self._root is None

    def insert(self, value: T) -> None:
        """Add ``value``; a duplicate is reported and ignored."""
        self._root = self._insert(self._root, value)

    def _insert(self, node: Optional[_Node[T]], value: T) -> _Node[T]:
        if node is None:
            return _Node(value)
        if value > node.value:
            node.right = self._insert(node.right, value)
        elif value < node.value:
            node.left = self._insert(node.left, value)
        else:
            print("Duplicate value found.")
            return node
        return _rebalance(node)

    def erase(self, value: T) -> None:
        """Remove ``value``.

        Raises IndexError if the tree is empty and ValueError if the value
        is not present.
        """
        if self.empty():
            raise IndexError("Tree is empty")
        self._root = self._delete(self._root, value)

    def _delete(self, node: Optional[_Node[T]], value: T) -> Optional[_Node[T]]:
        if node is None:
            raise ValueError("deleting value not found")
        if value < node.value:
            node.left = self._delete(node.left, value)
        elif value > node.value:
            node.right = self._delete(node.right, value)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node.right = self._delete(node.right, successor.value)
        return _rebalance(node)

    def search(self, target: T) -> bool:
        """True when ``target`` is stored in the tree."""
        current = self._root
        while current is not None:
            if current.value == target:
                return True
            current = current.left if target < current.value else current.right
        return False

    def __contains__(self, value: object) -> bool:
        return self.search(value)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        stack: list[_Node[T]] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.value
            current = current.right

    def height(self) -> int:
        """Height of the tree: -1 when empty, 0 for a single node."""
        return _height(self._root)

    def dump(self, file: Optional[TextIO] = None) -> None:
        """Write the values in order, each followed by a space.

        Raises ValueError if the tree is empty.
        """
        if self.empty():
            raise ValueError("tree is already empty")
        out = file if file is not None else sys.stdout
        for value in self:
            out.write(f"{value} ")