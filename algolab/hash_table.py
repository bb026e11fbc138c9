"""Hash table with separate chaining over singly linked lists."""

from dataclasses import dataclass
from typing import Any

from .linked_list import Node


@dataclass
class _Entry:
    key: Any
    value: Any


class HashTable:
    """A map from keys to values spread over ``num_chains`` chains.

    ``hash_function`` maps a key to an integer; the key lands in chain
    ``hash_function(key) % num_chains``.  New keys go to the front of their chain.
    """

    def __init__(self, num_chains, hash_function=hash):
        if num_chains <= 0:
            raise ValueError("a hash table needs at least one chain")
        self._hash = hash_function
        self._table = [Node() for _ in range(num_chains)]

    def _locate(self, key):
        head = self._table[self._hash(key) % len(self._table)]
        predecessor = head.find_predecessor(lambda entry: entry.key == key)
        return head, predecessor

    def insert(self, key, value):
        """Store ``value`` under ``key``, replacing any value already there."""
        head, predecessor = self._locate(key)
        if predecessor is None:
            head.insert_after(_Entry(key, value))
        else:
            predecessor.next.value.value = value

    def get(self, key):
        """Return the value stored under ``key``, or None if the key is absent."""
        _, predecessor = self._locate(key)
        if predecessor is None:
            return None
        return predecessor.next.value.value

    def __contains__(self, key):
        return self._locate(key)[1] is not None

    def format_stats(self, details=False):
        """Describe how keys are spread over the chains.

        With ``details`` each chain is listed with its keys, newest first.
        """
        lines = []
        counts = []
        for slot, head in enumerate(self._table):
            keys = [entry.key for entry in head]
            counts.append(len(keys))
            if details:
                quoted = "".join(f" '{key}'" for key in keys)
                lines.append(f"Slot {slot} contains{quoted} ({len(keys)})")
        average = sum(counts) / len(counts)
        lines.append(
            f"Slot sizes: min: {min(counts)}, max: {max(counts)}, average: {average:g}"
        )
        return "\n".join(lines) + "\n"