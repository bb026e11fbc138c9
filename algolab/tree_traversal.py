"""Height, depth-first and breadth-first traversal, and text drawing of binary trees.

These functions work with any tree whose nodes expose ``value``, ``left`` and
``right`` and where an empty tree evaluates as false.
"""

from collections import deque


def height(tree):
    """Return the height of ``tree``; an empty tree has height -1."""
    if not tree:
        return -1
    return 1 + max(height(tree.left), height(tree.right))


def df_traversal(tree):
    """Yield the subtrees of ``tree`` in depth-first, in-order sequence."""
    if not tree:
        return
    yield from df_traversal(tree.left)
    yield tree
    yield from df_traversal(tree.right)


def bf_traversal(tree):
    """Yield the subtrees of ``tree`` level by level, left to right."""
    queue = deque([tree])
    while queue:
        current = queue.popleft()
        if current:
            yield current
            queue.append(current.left)
            queue.append(current.right)


def _text(value):
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def _tree_lines(tree):
    if not tree:
        return []
    text = _text(tree.value)
    llines = _tree_lines(tree.left)
    rlines = _tree_lines(tree.right)

    lwidth = len(llines[0]) if llines else 0
    rwidth = len(rlines[0]) if rlines else 0

    n = max(len(llines), len(rlines))
    llines += [" " * lwidth] * (n - len(llines))
    rlines += [" " * rwidth] * (n - len(rlines))

    lwidthp = max(len(text) + 2, lwidth)
    pad = " " * (lwidthp - lwidth)
    text += " " + ("-" if rwidth else " ") * (lwidthp - len(text) - 1)
    if rwidth:
        text += "v" + " " * (rwidth - 1)

    return [text] + [a + pad + b for a, b in zip(llines, rlines)]


def format_binary_tree(tree):
    """Draw ``tree`` as text: each node above its left subtree, with an arrow to its right one."""
    return "".join(line + "\n" for line in _tree_lines(tree))


def print_binary_tree(tree):
    """Print the drawing made by :func:`format_binary_tree`."""
    print(format_binary_tree(tree), end="")