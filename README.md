# stcontainers

Small, dependency-free container data structures with explicit, checked behaviour.

## Installation

```
pip install stcontainers
```

For running the test suite:

```
pip install "stcontainers[test]"
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `stcontainers.linked_list` | `LinkedList`, a doubly linked list with positional insert and erase and a stable merge sort |
| `stcontainers.avl` | `AVLTree`, a self-balancing binary search tree of unique values |
| `stcontainers.stack` | `ArrayStack`, a stack that holds at most a fixed number of items |
| `stcontainers.reader` | `TokenReader`, which reads words and numbers from a text stream one character at a time |
| `stcontainers.utility` | `Pair`, `make_pair`, `maximum`, `minimum`, `less`, `swap`, `distance` |

## Examples

```python
from stcontainers.linked_list import LinkedList

lst = LinkedList([5, 3, 8, 1, 2, 4])
lst.insert(10, 2)      # inserts before index 2: [5, 3, 10, 8, 1, 2, 4]
lst.sort()
print(list(lst))       # [1, 2, 3, 4, 5, 8, 10]
print(lst.erase(0))    # 1, removed and returned
print(lst.pop_back(), lst.front())   # 10 2
```

```python
from stcontainers.avl import AVLTree

tree = AVLTree()
for n in (10, 20, 30, 40, 50, 25):
    tree.insert(n)
print(list(tree), tree.height())   # [10, 20, 25, 30, 40, 50] 2
print(25 in tree)                  # True
tree.erase(25)
tree.dump()                        # writes "10 20 30 40 50 " to stdout
```

Inserting a value that is already present prints `Duplicate value found.` and
leaves the tree unchanged.

```python
from stcontainers.stack import ArrayStack

stack = ArrayStack(2)
stack.push("a")
stack.push("b")
print(stack.top(), len(stack))   # b 2
stack.pop()
```

```python
import io
from stcontainers.reader import TokenReader

reader = TokenReader(io.StringIO("  -42 3.5 word"))
print(reader.read_int(), reader.read_float(), reader.read_word())   # -42 3.5 word
```

`TokenReader()` with no stream reads from standard input. `read_short`,
`read_unsigned` and `read_unsigned_short` wrap their results to 16 or 32 bits.

```python
from stcontainers.utility import make_pair, maximum, minimum, swap

p = make_pair(1, "x")
first, second = p
print(maximum(3, 7), minimum(3, 7))   # 7 3
items = [1, 2, 3]
swap(items, 0, 2)                     # items is now [3, 2, 1]
```

## Errors

Operations on empty containers and out-of-range positions raise exceptions instead of
returning sentinel values:

- `LinkedList.pop_front`, `pop_back`, `front`, `back`, `erase` and `insert` raise `IndexError`.
- `AVLTree.erase` raises `IndexError` on an empty tree and `ValueError` for a missing value;
  `AVLTree.dump` raises `ValueError` on an empty tree.
- `ArrayStack` raises `ValueError` for a capacity below 1, `OverflowError` when pushing onto a
  full stack and `IndexError` when popping or reading an empty one.

## What this package does not provide

There is no growable array type with explicit capacity or checked cursors, and no binary heap
or priority queue. For those, Python's built-in `list` and the standard `heapq` module serve.
There is no command-line program; everything here is used as a library.