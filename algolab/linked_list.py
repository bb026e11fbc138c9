"""Singly linked list built from nodes, with a sentinel head node."""


class Node:
    """A list node; a node used as list head acts as a sentinel whose value is ignored."""

    __slots__ = ("value", "next")

    def __init__(self, value=None, next=None):
        self.value = value
        self.next = next

    def insert_after(self, value):
        """Insert a new node holding ``value`` right after this one and return it."""
        self.next = Node(value, self.next)
        return self.next

    def find_predecessor(self, predicate):
        """Return the node whose successor's value satisfies ``predicate``, or None."""
        node = self
        while node.next is not None:
            if predicate(node.next.value):
                return node
            node = node.next
        return None

    def delete_after(self):
        """Remove the node following this one, if there is one."""
        if self.next is not None:
            self.next = self.next.next

    def to_list(self):
        """Return the values of the nodes after this one as a list."""
        return list(self)

    def __iter__(self):
        node = self.next
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self):
        return f"Node({self.value!r})"