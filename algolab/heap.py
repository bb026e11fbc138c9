"""Binary heaps on lists, heap sort and priority queues.

The default comparison is ``operator.gt``, which gives a max-heap; pass
``operator.lt`` (or any ordering) for a min-heap.
"""

import operator

from .binary_tree import CompleteBT

DEFAULT_COMPARE = operator.gt


def heap_sift_up(tree, compare=DEFAULT_COMPARE):
    """Move the value at ``tree`` towards the root while it beats its parent."""
    parent = tree.parent
    while parent:
        if compare(tree.value, parent.value):
            tree.value, parent.value = parent.value, tree.value
        tree = parent
        parent = tree.parent


def heap_sift_down(tree, compare=DEFAULT_COMPARE):
    """Move the value at ``tree`` towards the leaves while a child beats it."""
    while True:
        child = tree.left
        other = tree.right
        if not child or (other and compare(other.value, child.value)):
            child = other
        if not child:
            return
        if compare(child.value, tree.value):
            child.value, tree.value = tree.value, child.value
        tree = child


def build_heap(storage, compare=DEFAULT_COMPARE):
    """Rearrange ``storage`` in place into a heap."""
    size = len(storage)
    for i in range(size // 2 - 1, -1, -1):
        heap_sift_down(CompleteBT(storage, i, size), compare)


def heap_sort(storage, compare=DEFAULT_COMPARE):
    """Sort ``storage`` in place; the default comparison sorts ascending."""
    build_heap(storage, compare)
    for back in range(len(storage) - 1, 0, -1):
        storage[0], storage[back] = storage[back], storage[0]
        heap_sift_down(CompleteBT(storage, 0, back), compare)


def priority_enqueue(storage, value, compare=DEFAULT_COMPARE):
    """Add ``value`` to the heap held in ``storage``."""
    storage.append(value)
    heap_sift_up(CompleteBT(storage, len(storage) - 1), compare)


def priority_dequeue(storage, compare=DEFAULT_COMPARE):
    """Remove and return the top of the heap held in ``storage``."""
    if not storage:
        raise IndexError("dequeue from an empty priority queue")
    storage[0], storage[-1] = storage[-1], storage[0]
    top = storage.pop()
    heap_sift_down(CompleteBT(storage, 0), compare)
    return top