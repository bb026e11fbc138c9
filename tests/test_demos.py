import pytest

from algolab.demos import main
from algolab.formatting import format_sequence


def run(capsys, name):
    assert main([name]) == 0
    return capsys.readouterr().out.splitlines()


def test_array(capsys):
    lines = run(capsys, "array")
    assert lines[0] == "Array before inserting any elment = []"
    assert len(lines) == 6
    assert lines[-1].endswith(format_sequence(list(reversed(range(5)))))


def test_array_delete(capsys):
    lines = run(capsys, "array-delete")
    assert lines[0] == "Initially A = " + format_sequence(range(5))
    assert len(lines) == 6
    assert lines[-1].endswith("[]")


def test_insertion_sort(capsys):
    lines = run(capsys, "insertion-sort")
    assert lines[1] == format_sequence(sorted([3, 1, 0, 18, 7]), "After sorting: ")


def test_merge_sort(capsys):
    lines = run(capsys, "merge-sort")
    assert lines[1] == format_sequence(range(1, 21), "After merge sort: ")


def test_list(capsys):
    assert run(capsys, "list") == [format_sequence(reversed(range(10)))]


def test_list_enhanced(capsys):
    lines = run(capsys, "list-enhanced")
    assert len(lines) == 20
    assert lines[9] == format_sequence(range(10))
    assert lines[10] == format_sequence(range(1, 10))
    assert lines[-1] == "[]"


def test_list_iterator(capsys):
    lines = run(capsys, "list-iterator")
    assert lines[0] == lines[1] == " ".join(str(i) for i in reversed(range(10))) + " "
    assert lines[2] == format_sequence(reversed(range(10)), "List content: ")


def test_stack(capsys):
    lines = run(capsys, "stack")
    assert lines[0] == "Pushing 0 1 2 3 4"
    assert lines[1].split()[1:] == lines[0].split()[1:][::-1]


def test_stack_enhanced(capsys):
    assert run(capsys, "stack-enhanced") == ["Stack content: 6 5 4"]


def test_stack_rpn(capsys):
    lines = run(capsys, "stack-rpn")
    assert lines == ["2 2 3 + * = 10", "2 2 3 + * = 10"]


def test_queue(capsys):
    lines = run(capsys, "queue")
    assert len(lines) == 6
    for enq, deq in zip(lines[::2], lines[1::2]):
        assert enq.split()[1:] == deq.split()[1:]


def test_deque(capsys):
    lines = run(capsys, "deque")
    assert len(lines) == 12
    for k in range(0, 12, 2):
        enqueued = lines[k].split()[2:]
        dequeued = lines[k + 1].split()[2:]
        assert dequeued == enqueued[::-1]


def test_bst(capsys):
    lines = run(capsys, "bst")
    results = [line for line in lines if line.startswith("The largest element")]
    assert results[0] == "The largest element not exceeding 0 is none"
    inserted = {12, 5, 18, 2, 9, 15, 19, 13, 17}
    for line in results[1:]:
        words = line.split()
        x, found = int(words[5]), int(words[-1])
        assert found <= x
        assert found in inserted
        assert not any(found < v <= x for v in inserted)


def test_bst_enhanced(capsys):
    lines = run(capsys, "bst-enhanced")
    inserted = [12, 5, 18, 2, 9, 15, 19, 13, 17]
    assert lines[0].startswith("Tree:12")
    assert f"The smallest element is {min(inserted)}" in lines
    assert f"The largest element is {max(inserted)}" in lines


def test_complete_tree(capsys):
    lines = run(capsys, "complete-tree")
    start = lines.index("Breadth-first traversal (BFT)")
    visited = [line.split()[-1] for line in lines[start + 1:]]
    assert visited == [str(i) for i in range(1, 9)]
    dft = lines.index("Depth-first traversal (DFT)")
    dft_visited = [line.split()[-1] for line in lines[dft + 1:start - 1]]
    assert sorted(dft_visited) == sorted(visited)


def test_tree_enhanced(capsys):
    lines = run(capsys, "tree-enhanced")
    assert "Node 1 has no parent" in lines
    assert "The parent of 8 is 5" in lines
    assert sum(line.startswith("The parent of") for line in lines) == 7


def test_tree_traversal(capsys):
    lines = run(capsys, "tree-traversal")
    start = lines.index("Breadth-first traversal (BFT)")
    assert [line.split()[-1] for line in lines[start + 1:]] == [str(i) for i in range(1, 9)]


def test_heap(capsys):
    lines = run(capsys, "heap")
    assert format_sequence(range(1, 21), "Array after heapsort: ") in lines
    built = next(line for line in lines if line.startswith("After building the heap: "))
    assert built.startswith("After building the heap: [20,")


def test_priority_queue(capsys):
    lines = run(capsys, "priority-queue")
    dequeued = [int(line.split()[1]) for line in lines if line.startswith("Dequeued")]
    assert dequeued == sorted(dequeued, reverse=True)
    assert sorted(dequeued) == sorted([15, 9, 3, 23, 2, 1])
    assert lines[-1] == "Dequeued 1 []"


def test_hash(capsys):
    lines = run(capsys, "hash")
    assert lines[0].startswith("Slot sizes: min: ")
    assert "'Carambola' is the 9-th fruit" in lines
    assert lines[-1] == "Retrieving 'Beans' results in None"


def test_unknown_demo():
    with pytest.raises(SystemExit):
        main(["no-such-demo"])


def test_all_demos(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "--- hash ---" in out
    assert "--- stack-rpn ---" in out
    assert out.index("--- array ---") < out.index("--- hash ---")