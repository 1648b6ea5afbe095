"""Fixed-capacity stack."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class ArrayStack(Generic[T]):
    """A last-in, first-out stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("Invalid Stack Size")
        self._capacity = capacity
        self._items: list[T] = []

    def push(self, data: T) -> None:
        """Put ``data`` on top; raises OverflowError when full."""
        if len(self._items) >= self._capacity:
            raise OverflowError("Stack is already full")
        self._items.append(data)

    def pop(self) -> T:
        """Remove and return the top item; raises IndexError when empty."""
        if not self._items:
            raise IndexError("Stack is already empty")
        return self._items.pop()

    def top(self) -> T:
        """Return the top item; raises IndexError when empty."""
        if not self._items:
            raise IndexError("Stack has no data")
        return self._items[-1]

    def empty(self) -> bool:
        """True when the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)