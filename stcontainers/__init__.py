"""Container data structures: doubly linked list, AVL tree, fixed-capacity stack, helpers and a token reader."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "linked_list",
    "reader",
    "stack",
    "utility",
]