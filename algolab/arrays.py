"""Insertion, deletion and counting sort on Python lists."""


def array_insert(items, index, value):
    """Insert ``value`` at position ``index`` and shift later elements right.

    ``index`` may equal ``len(items)``, in which case the value is appended.
    """
    if not 0 <= index <= len(items):
        raise IndexError(f"insert position {index} out of range for size {len(items)}")
    items.insert(index, value)


def array_delete(items, index):
    """Delete the element at ``index`` and shift later elements left.

    An ``index`` equal to ``len(items)`` removes the last element.
    """
    if not items:
        raise IndexError("cannot delete from an empty array")
    if not 0 <= index <= len(items):
        raise IndexError(f"delete position {index} out of range for size {len(items)}")
    if index == len(items):
        items.pop()
    else:
        del items[index]


def counting_sort(items, k):
    """Sort a list of integers in ``range(k)`` in place by counting occurrences."""
    counts = [0] * k
    for value in items:
        if not 0 <= value < k:
            raise ValueError(f"value {value} outside the range [0, {k})")
        counts[value] += 1
    items[:] = [value for value, count in enumerate(counts) for _ in range(count)]