"""Bounded stack with stream-style pushing and reverse Polish operators."""


class Stack:
    """A last-in first-out stack holding at most ``capacity`` values."""

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items = []

    def push(self, value):
        """Put ``value`` on top of the stack."""
        if self.full():
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self):
        """Remove and return the value on top of the stack."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self):
        """Return the value on top of the stack without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def empty(self):
        return not self._items

    def full(self):
        return len(self._items) == self.capacity

    def clear(self):
        """Remove every value from the stack."""
        self._items.clear()

    def __len__(self):
        return len(self._items)

    def __lshift__(self, item):
        """Push a value, or apply an operator if ``item`` is callable; return the stack."""
        if callable(item):
            item(self)
        else:
            self.push(item)
        return self


def _pop_two(stack):
    a = stack.pop()
    b = stack.pop()
    return a, b


def _divide(a, b):
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    return a / b


def plus(stack):
    """Replace the two top values ``a`` (top) and ``b`` with ``a + b``."""
    a, b = _pop_two(stack)
    stack.push(a + b)


def minus(stack):
    """Replace the two top values ``a`` (top) and ``b`` with ``a - b``."""
    a, b = _pop_two(stack)
    stack.push(a - b)


def multiplies(stack):
    """Replace the two top values ``a`` (top) and ``b`` with ``a * b``."""
    a, b = _pop_two(stack)
    stack.push(a * b)


def divides(stack):
    """Replace the two top values ``a`` (top) and ``b`` with ``a / b``.

    Integers divide with truncation toward zero.
    """
    a, b = _pop_two(stack)
    stack.push(_divide(a, b))


def negate(stack):
    """Replace the top value with its negation."""
    stack.push(-stack.pop())