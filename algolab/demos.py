"""Small demonstrations of the data structures, selected by name."""

import argparse

from .arrays import array_delete, array_insert
from .binary_tree import CompleteBT, make_binary_tree
from .bst import bst_insert, bst_max, bst_min, bst_search
from .formatting import format_sequence
from .hash_table import HashTable
from .heap import build_heap, heap_sort, priority_dequeue, priority_enqueue
from .linked_list import Node
from .ring_queue import Deque, Queue
from .sorting import insertion_sort, merge_sort
from .stack import Stack, multiplies, plus
from .tree_traversal import bf_traversal, df_traversal, print_binary_tree

_SORT_INPUT = [1, 19, 2, 9, 12, 18, 4, 8, 5, 6, 17, 10, 11, 14, 16, 15, 7, 3, 13, 20]
_BST_INPUT = [12, 5, 18, 2, 9, 15, 19, 13, 17]
_FRUITS = [
    "Apple", "Apricots", "Avocado", "Banana", "Blackberries", "Blackcurrant",
    "Blueberries", "Breadfruit", "Cantaloupe", "Carambola", "Cherimoya",
    "Cherries", "Clementine",
]
_NUM_CHAINS = 31


def _num(value):
    return format(value, "g") if isinstance(value, float) else str(value)


def _sample_tree():
    return make_binary_tree(
        1.0,
        make_binary_tree(2.0, make_binary_tree(4.0),
                         make_binary_tree(5.0, None, make_binary_tree(8.0))),
        make_binary_tree(3.0, make_binary_tree(6.0), make_binary_tree(7.0)),
    )


def _show_traversals(tree):
    print("\nDepth-first traversal (DFT)")
    for subtree in df_traversal(tree):
        print(f"Visited subtree: {_num(subtree.value)}")
    print("\nBreadth-first traversal (BFT)")
    for subtree in bf_traversal(tree):
        print(f"Visited subtree: {_num(subtree.value)}")


def demo_array():
    items = []
    print(format_sequence(items, "Array before inserting any elment = "))
    for i in range(5):
        array_insert(items, 0, float(i))
        print(format_sequence(items, f"Array after inserting {i} at position 0 = "))


def demo_array_delete():
    items = [0.0, 1.0, 2.0, 3.0, 4.0]
    print(format_sequence(items, "Initially A = "))
    while items:
        array_delete(items, 0)
        print(format_sequence(items, "After deleting the element at position 0: A = "))


def demo_insertion_sort():
    items = [3.0, 1.0, 0.0, 18.0, 7.0]
    print(format_sequence(items, "Before sorting: "))
    insertion_sort(items)
    print(format_sequence(items, "After sorting: "))


def demo_merge_sort():
    items = [float(x) for x in _SORT_INPUT]
    print(format_sequence(items, "Before merge sort: "))
    merge_sort(items)
    print(format_sequence(items, "After merge sort: "))


def demo_list():
    head = Node()
    for i in range(10):
        head.insert_after(float(i))
    print(format_sequence(head.to_list()))


def demo_list_enhanced():
    head = Node()
    last = head
    for i in range(10):
        last = last.insert_after(float(i))
        print(format_sequence(head.to_list()))
    for _ in range(10):
        head.delete_after()
        print(format_sequence(head.to_list()))


def demo_list_iterator():
    head = Node()
    for i in range(10):
        head.insert_after(float(i))
    print("".join(f"{_num(x)} " for x in iter(head)))
    print("".join(f"{_num(x)} " for x in head))
    print(format_sequence(head, "List content: "))


def demo_stack():
    stack = Stack(10)
    pushed = []
    for i in range(5):
        stack.push(i)
        pushed.append(str(i))
    print("Pushing " + " ".join(pushed))
    popped = []
    while not stack.empty():
        popped.append(_num(stack.top()))
        stack.pop()
    print("Popping " + " ".join(popped))


def demo_stack_enhanced():
    stack = Stack(100)
    stack << 1 << 2 << 3
    stack.clear()
    stack << 4 << 5 << 6
    content = []
    while not stack.empty():
        content.append(_num(stack.pop()))
    print("Stack content: " + " ".join(content))


def demo_stack_rpn():
    stack = Stack(100)
    stack.push(2)
    stack.push(2)
    stack.push(3)
    plus(stack)
    multiplies(stack)
    print(f"2 2 3 + * = {stack.top()}")
    stack << 2 << 2 << 3 << plus << multiplies
    print(f"2 2 3 + * = {stack.top()}")


def demo_queue():
    queue = Queue(5)
    for _ in range(3):
        enqueued = []
        for i in range(3):
            queue.enqueue(i)
            enqueued.append(str(i))
        print("Enqueued " + " ".join(enqueued))
        dequeued = []
        for _ in range(3):
            dequeued.append(_num(queue.front()))
            queue.dequeue()
        print("Dequeued " + " ".join(dequeued))


def demo_deque():
    queue = Deque(5)
    for _ in range(3):
        for i in range(3):
            queue.enqueue_front(i)
        print("Enqueued front " + " ".join(str(i) for i in range(3)))
        fronts = []
        for _ in range(3):
            fronts.append(_num(queue.front()))
            queue.dequeue()
        print("Dequeued front " + " ".join(fronts))
        for i in range(3):
            queue.enqueue(i)
        print("Enqueued back " + " ".join(str(i) for i in range(3)))
        backs = []
        for _ in range(3):
            backs.append(_num(queue.back()))
            queue.dequeue_back()
        print("Dequeued back " + " ".join(backs))


def demo_bst():
    tree = None
    for x in _BST_INPUT:
        tree = bst_insert(tree, x)
        print(f"Tree after inserting {x}:")
        print_binary_tree(tree)
        print()
    for x in (0, 5, 6, 18, 19, 20):
        result = bst_search(tree, x)
        found = str(result.value) if result else "none"
        print(f"The largest element not exceeding {x} is {found}")


def demo_bst_enhanced():
    tree = None
    for x in _BST_INPUT:
        tree = bst_insert(tree, x)
    print("Tree:", end="")
    print_binary_tree(tree)
    print()
    print(f"The smallest element is {bst_min(tree).value}")
    print(f"The largest element is {bst_max(tree).value}")


def demo_complete_tree():
    tree = CompleteBT([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0])
    print("Tree:")
    print_binary_tree(tree)
    _show_traversals(tree)


def demo_tree_enhanced():
    tree = _sample_tree()
    print("Tree:")
    print_binary_tree(tree)
    for subtree in df_traversal(tree):
        if subtree.parent is not None:
            print(f"The parent of {_num(subtree.value)} is {_num(subtree.parent.value)}")
        else:
            print(f"Node {_num(subtree.value)} has no parent")


def demo_tree_traversal():
    tree = _sample_tree()
    print("Tree:")
    print_binary_tree(tree)
    _show_traversals(tree)


def demo_heap():
    array = [float(x) for x in _SORT_INPUT]
    print(format_sequence(array, "Before building the heap: "))
    print_binary_tree(CompleteBT(array))
    build_heap(array)
    print(format_sequence(array, "\nAfter building the heap: "))
    print_binary_tree(CompleteBT(array))
    heap_sort(array)
    print(format_sequence(array, "\nArray after heapsort: "))


def demo_priority_queue():
    queue = []

    def enqueue(x):
        priority_enqueue(queue, x)
        print(format_sequence(queue, f"Enqueued {x} "))

    def dequeue():
        top = priority_dequeue(queue)
        print(format_sequence(queue, f"Dequeued {top} "))

    for x in (15, 9, 3, 23):
        enqueue(x)
    dequeue()
    dequeue()
    for x in (2, 1):
        enqueue(x)
    while queue:
        dequeue()


def _fruit_hash(text):
    return sum(map(ord, text)) % _NUM_CHAINS


def demo_hash():
    table = HashTable(_NUM_CHAINS, _fruit_hash)
    for index, fruit in enumerate(_FRUITS):
        table.insert(fruit, index)
    print(table.format_stats(), end="")
    print(f"'Carambola' is the {table.get('Carambola')}-th fruit")
    print(f"Retrieving 'Beans' results in {table.get('Beans')}")


DEMOS = {
    "array": demo_array,
    "array-delete": demo_array_delete,
    "insertion-sort": demo_insertion_sort,
    "merge-sort": demo_merge_sort,
    "list": demo_list,
    "list-enhanced": demo_list_enhanced,
    "list-iterator": demo_list_iterator,
    "stack": demo_stack,
    "stack-enhanced": demo_stack_enhanced,
    "stack-rpn": demo_stack_rpn,
    "queue": demo_queue,
    "deque": demo_deque,
    "bst": demo_bst,
    "bst-enhanced": demo_bst_enhanced,
    "complete-tree": demo_complete_tree,
    "tree-enhanced": demo_tree_enhanced,
    "tree-traversal": demo_tree_traversal,
    "heap": demo_heap,
    "priority-queue": demo_priority_queue,
    "hash": demo_hash,
}


def main(argv=None):
    """Run the named demonstrations, or all of them when none is named."""
    parser = argparse.ArgumentParser(
        prog="algolab-demos", description="Demonstrate the data structures."
    )
    parser.add_argument("names", nargs="*", metavar="DEMO",
                        help="one of: " + ", ".join(DEMOS))
    args = parser.parse_args(argv)
    unknown = [name for name in args.names if name not in DEMOS]
    if unknown:
        parser.error("unknown demo: " + ", ".join(unknown))
    names = args.names or list(DEMOS)
    for name in names:
        if len(names) > 1:
            print(f"--- {name} ---")
        DEMOS[name]()
    return 0