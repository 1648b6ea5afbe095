"""Small generic helpers: pairs, comparisons, swapping and cursor distance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, MutableSequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Compare = Callable[[Any, Any], bool]


@dataclass(order=True)
class Pair(Generic[T, U]):
    """Two values held together; compared by ``first``, then by ``second``."""

    first: T = None  # type: ignore[assignment]
    second: U = None  # type: ignore[assignment]

    def __iter__(self):
        yield self.first
        yield self.second


def make_pair(first: T, second: U) -> Pair[T, U]:
    """Build a :class:`Pair` from two values."""
    return Pair(first, second)


def less(first: Any, second: Any) -> bool:
    """Default ordering predicate: ``first < second``."""
    return first < second


def maximum(first: T, second: T, compare: Compare | None = None) -> T:
    """Return the larger value.

    Without ``compare`` this is ``first`` when ``first > second``, else
    ``second``. With ``compare`` it is ``first`` when ``compare(first, second)``
    holds, else ``second``.
    """
    if compare is None:
        return first if first > second else second
    return first if compare(first, second) else second


def minimum(first: T, second: T, compare: Compare | None = None) -> T:
    """Return the smaller value.

    Without ``compare`` this is ``first`` when ``first < second``, else
    ``second``. With ``compare`` it is ``first`` when ``compare(second, first)``
    holds, else ``second``.
    """
    if compare is None:
        return first if first < second else second
    return first if compare(second, first) else second


def swap(items: MutableSequence[Any], i: int, j: int) -> None:
    """Exchange ``items[i]`` and ``items[j]`` in place."""
    items[i], items[j] = items[j], items[i]


def distance(begin: Any, end: Any) -> int:
    """Number of steps from ``begin`` to ``end``.

    Positions that support subtraction (random access) give ``end - begin``.
    Other positions are walked with their ``next()`` method, which must
    return the following position, until one compares equal to ``end``.
    """
    try:
        return end - begin
    except TypeError:
        pass

    count = 0
    current = begin
    while current != end:
        current = current.next()
        count += 1
    return count