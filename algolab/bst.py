"""Binary search trees built from linked tree nodes."""

from .binary_tree import make_binary_tree


def bst_search(tree, value):
    """Return the node holding the largest value not exceeding ``value``, or None."""
    if not tree or value == tree.value:
        return tree
    if value < tree.value:
        return bst_search(tree.left, value)
    other = bst_search(tree.right, value)
    return other if other else tree


def bst_insert(tree, value):
    """Insert ``value`` into ``tree`` and return the resulting root.

    Values equal to a node's value go into its left subtree.
    """
    if not tree:
        return make_binary_tree(value)
    if value <= tree.value:
        tree.left = bst_insert(tree.left, value)
        tree.left.parent = tree
    else:
        tree.right = bst_insert(tree.right, value)
        tree.right.parent = tree
    return tree


def bst_min(tree):
    """Return the node holding the smallest value."""
    if not tree:
        raise ValueError("empty tree has no minimum")
    while tree.left:
        tree = tree.left
    return tree


def bst_max(tree):
    """Return the node holding the largest value."""
    if not tree:
        raise ValueError("empty tree has no maximum")
    while tree.right:
        tree = tree.right
    return tree