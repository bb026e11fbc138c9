"""Linked binary trees with parent links, and complete binary trees stored in a list."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class BinaryTree:
    """A binary tree node owning its children; each child knows its parent."""

    value: Any
    left: Optional["BinaryTree"] = None
    right: Optional["BinaryTree"] = None
    parent: Optional["BinaryTree"] = field(default=None, repr=False)

    def __post_init__(self):
        for child in (self.left, self.right):
            if child is not None:
                child.parent = self


def make_binary_tree(value, left=None, right=None):
    """Build a tree node holding ``value`` over the given subtrees."""
    return BinaryTree(value, left, right)


class CompleteBT:
    """A view of a list as a complete binary tree rooted at index ``root``.

    The children of index ``i`` are ``2 * i + 1`` and ``2 * i + 2``; only the
    first ``size`` elements of the list belong to the tree.  A view whose root
    lies outside the tree is empty and evaluates as false.
    """

    __slots__ = ("storage", "root", "size")

    def __init__(self, storage, root=0, size=None):
        self.storage = storage
        self.root = root
        self.size = len(storage) if size is None else size

    def subtree(self, root):
        """Return the view of the same tree rooted at index ``root``."""
        return CompleteBT(self.storage, root, self.size)

    @property
    def value(self):
        return self.storage[self.root]

    @value.setter
    def value(self, new_value):
        self.storage[self.root] = new_value

    @property
    def left(self):
        return self.subtree(2 * self.root + 1)

    @property
    def right(self):
        return self.subtree(2 * self.root + 2)

    @property
    def parent(self):
        """The parent subtree, or None at the root."""
        if self.root == 0:
            return None
        return self.subtree((self.root - 1) // 2)

    def __bool__(self):
        return 0 <= self.root < self.size

    def __eq__(self, other):
        if not isinstance(other, CompleteBT):
            return NotImplemented
        return (
            self.storage is other.storage
            and self.root == other.root
            and self.size == other.size
        )

    def __hash__(self):
        return hash((id(self.storage), self.root, self.size))

    def __repr__(self):
        return f"CompleteBT(root={self.root}, size={self.size})"