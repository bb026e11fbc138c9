"""Classic data structures and algorithms: sorting, lists, stacks, queues, trees, heaps, hash tables, shortest paths and locality-sensitive hashing."""

__version__ = "0.1.0"