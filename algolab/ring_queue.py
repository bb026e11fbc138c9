"""Fixed-capacity queue and double-ended queue over a ring buffer."""


class Queue:
    """A first-in first-out queue with a fixed capacity."""

    def __init__(self, capacity):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._storage = [None] * capacity
        self._position = 0
        self._size = 0

    @property
    def capacity(self):
        return len(self._storage)

    def _wrap(self, index):
        return index % len(self._storage)

    def _head(self):
        if self._size == 0:
            raise IndexError("queue is empty")
        return self._wrap(self._position + self._size)

    def front(self):
        """Return the element at the front of the queue."""
        return self._storage[self._head()]

    def enqueue(self, value):
        """Add ``value`` to the back of the queue."""
        if self.full():
            raise OverflowError("queue is full")
        self._storage[self._position] = value
        self._size += 1
        self._position = self._wrap(self._position - 1)

    def dequeue(self):
        """Remove the element at the front of the queue."""
        if self._size == 0:
            raise IndexError("dequeue from an empty queue")
        self._size -= 1

    def empty(self):
        return self._size == 0

    def full(self):
        return self._size == len(self._storage)

    def __len__(self):
        return self._size


class Deque(Queue):
    """A queue that also accepts and releases elements at the other end."""

    def _tail(self):
        if self._size == 0:
            raise IndexError("queue is empty")
        return self._wrap(self._position + 1)

    def back(self):
        """Return the element at the back of the queue."""
        return self._storage[self._tail()]

    def enqueue_front(self, value):
        """Add ``value`` to the front of the queue."""
        if self.full():
            raise OverflowError("queue is full")
        if self.empty():
            self._position = self._wrap(self._position - 1)
        self._storage[self._wrap(self._position + self._size + 1)] = value
        self._size += 1

    def dequeue_back(self):
        """Remove the element at the back of the queue."""
        if self._size == 0:
            raise IndexError("dequeue from an empty queue")
        self._size -= 1
        self._position = self._wrap(self._position + 1)

    def clear(self):
        """Remove every element."""
        self._size = 0
        self._position = 0