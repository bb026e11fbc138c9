import operator
from urllib.parse import unquote

from algolab.graph import (
    INF,
    SPARSE_TEST_GRAPH,
    TEST_GRAPH,
    Hop,
    encode_dot,
    graph_to_dot,
    print_graph,
    to_sparse,
)


def test_to_sparse_of_test_graph_matches_sparse_test_graph():
    assert to_sparse(TEST_GRAPH) == SPARSE_TEST_GRAPH


def test_to_sparse_keeps_only_finite_entries():
    sparse = to_sparse(TEST_GRAPH)
    for row, hops in zip(TEST_GRAPH, sparse):
        assert [hop.vertex for hop in hops] == [
            v for v, w in enumerate(row) if w != INF
        ]
        assert all(row[hop.vertex] == hop.weight for hop in hops)


def test_hop_orders_by_weight_only():
    assert Hop(1, 5) < Hop(2, 0)
    assert not Hop(2, 0) < Hop(1, 5)
    assert operator.lt(Hop(3, 9), Hop(4, 1))
    assert Hop(1, 2) != Hop(1, 3)


def test_hop_str():
    assert str(Hop(4.0, 1)) == "(4,1)"
    assert str(Hop(INF, -1)) == "(inf,-1)"


def test_small_graph_to_dot():
    assert graph_to_dot([[INF, 4], [INF, INF]]) == (
        "digraph G {\n    0 -> 1 [label= 4];\n}\n"
    )


def test_dot_same_for_both_representations():
    assert graph_to_dot(TEST_GRAPH) == graph_to_dot(SPARSE_TEST_GRAPH)


def test_dot_has_one_line_per_edge():
    dot = graph_to_dot(TEST_GRAPH)
    edges = sum(len(hops) for hops in SPARSE_TEST_GRAPH)
    assert dot.count(" -> ") == edges
    assert dot.startswith("digraph G {\n")
    assert dot.endswith("}\n")


def test_encode_dot_pins_format():
    assert encode_dot("ab") == "%61%62"


def test_encode_dot_round_trip():
    dot = graph_to_dot(TEST_GRAPH)
    encoded = encode_dot(dot)
    assert unquote(encoded) == dot
    assert len(encoded) == 3 * len(dot)


def test_print_graph_plain(capsys):
    print_graph(SPARSE_TEST_GRAPH)
    assert capsys.readouterr().out == graph_to_dot(SPARSE_TEST_GRAPH) + "\n"


def test_print_graph_as_url(capsys):
    base = "http://localhost/view#"
    print_graph(TEST_GRAPH, base)
    out = capsys.readouterr().out
    assert out == base + encode_dot(graph_to_dot(TEST_GRAPH)) + "\n"