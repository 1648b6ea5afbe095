"""Doubly linked list with positional insert and erase and a stable merge sort."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "next", "prev")

    def __init__(
        self,
        data: T,
        next_node: Optional["_Node[T]"] = None,
        prev_node: Optional["_Node[T]"] = None,
    ) -> None:
        self.data = data
        self.next = next_node
        self.prev = prev_node


def _merge(left: Optional[_Node[T]], right: Optional[_Node[T]]) -> Optional[_Node[T]]:
    head: Optional[_Node[T]] = None
    tail: Optional[_Node[T]] = None

    def attach(node: _Node[T]) -> None:
        nonlocal head, tail
        node.prev = tail
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node

    while left is not None and right is not None:
        if left.data <= right.data:
            taken, left = left, left.next
        else:
            taken, right = right, right.next
        attach(taken)

    rest = left if left is not None else right
    if rest is not None:
        attach(rest)
    return head


def _merge_sort(head: Optional[_Node[T]]) -> Optional[_Node[T]]:
    if head is None or head.next is None:
        return head

    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next

    middle = slow.next
    slow.next = None
    if middle is not None:
        middle.prev = None

    return _merge(_merge_sort(head), _merge_sort(middle))


class LinkedList(Generic[T]):
    """A doubly linked sequence supporting pushes and pops at both ends."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._count = 0
        if items is not None:
            for value in items:
                self.push_back(value)

    def push_back(self, data: T) -> None:
        """Append ``data`` at the end."""
        node = _Node(data, None, self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1

    def push_front(self, data: T) -> None:
        """Prepend ``data`` at the front."""
        node = _Node(data, self._head, None)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._count += 1

    def pop_back(self) -> T:
        """Remove and return the last value; raises IndexError when empty."""
        if self._tail is None:
            raise IndexError("List is empty")
        return self._unlink(self._tail)

    def pop_front(self) -> T:
        """Remove and return the first value; raises IndexError when empty."""
        if self._head is None:
            raise IndexError("List is empty")
        return self._unlink(self._head)

    def clear(self) -> None:
        """Remove every value."""
        self._head = None
        self._tail = None
        self._count = 0

    def empty(self) -> bool:
        """True when the list holds nothing."""
        return self._count == 0

    def __len__(self) -> int:
        return self._count

    def front(self) -> T:
        """The first value; raises IndexError when empty."""
        if self._head is None:
            raise IndexError("List is empty")
        return self._head.data

    def back(self) -> T:
        """The last value; raises IndexError when empty."""
        if self._tail is None:
            raise IndexError("List is empty")
        return self._tail.data

    def sort(self) -> None:
        """Sort the values in ascending order; equal values keep their order."""
        if self._count <= 1:
            return
        self._head = _merge_sort(self._head)
        tail = self._head
        while tail is not None and tail.next is not None:
            tail = tail.next
        self._tail = tail

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and all(
            a == b for a, b in zip(self, other)
        )

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, index: int) -> _Node[T]:
        if index < self._count // 2:
            node = self._head
            for _ in range(index):
                node = node.next  # type: ignore[union-attr]
        else:
            node = self._tail
            for _ in range(self._count - 1 - index):
                node = node.prev  # type: ignore[union-attr]
        assert node is not None
        return node

    def _unlink(self, node: _Node[T]) -> T:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._count -= 1
        return node.data

    def erase(self, index: int) -> T:
        """Remove and return the value at ``index``.

        Raises IndexError when the list is empty or the index is out of range.
        """
        if self._count == 0:
            raise IndexError("List is empty")
        if not 0 <= index < self._count:
            raise IndexError("Invalid position")
        return self._unlink(self._node_at(index))

    def insert(self, value: T, index: int) -> int:
        """Insert ``value`` before the element at ``index`` and return ``index``.

        ``index`` may equal the length, which appends at the end.
        Raises IndexError for any other out-of-range index.
        """
        if not 0 <= index <= self._count:
            raise IndexError("Invalid position")
        if index == self._count:
            self.push_back(value)
        elif index == 0:
            self.push_front(value)
        else:
            current = self._node_at(index)
            previous = current.prev
            node = _Node(value, current, previous)
            current.prev = node
            previous.next = node  # type: ignore[union-attr]
            self._count += 1
        return index