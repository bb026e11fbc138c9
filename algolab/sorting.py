"""Insertion sort and merge sort."""


def insert(items, i):
    """Move ``items[i]`` left until ``items[:i + 1]`` is sorted.

    ``items[:i]`` is assumed to be sorted already.
    """
    if not 0 <= i < len(items):
        raise IndexError(f"position {i} out of range for size {len(items)}")
    for j in range(i, 0, -1):
        if items[j - 1] <= items[j]:
            return
        items[j - 1], items[j] = items[j], items[j - 1]


def insertion_sort(items):
    """Sort a list in place by repeated insertion."""
    for i in range(1, len(items)):
        insert(items, i)


def merge(left, right):
    """Merge two sorted sequences into a new sorted list, preferring ``left`` on ties."""
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sorted(seq):
    if len(seq) <= 1:
        return list(seq)
    middle = len(seq) // 2
    return merge(_merge_sorted(seq[:middle]), _merge_sorted(seq[middle:]))


def merge_sort(items):
    """Sort a list in place with a stable top-down merge sort."""
    items[:] = _merge_sorted(list(items))