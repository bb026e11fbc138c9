import pytest

from algolab.cli import main
from algolab.formatting import format_sequence
from algolab.graph import SPARSE_TEST_GRAPH, TEST_GRAPH, encode_dot, graph_to_dot
from algolab.shortest_paths import bellman_ford, dijkstra, dijkstra_priority, floyd_warshall

DOT = graph_to_dot(TEST_GRAPH) + "\n"


def test_graph_command(capsys):
    assert main(["graph"]) == 0
    out = capsys.readouterr().out
    assert out == DOT + graph_to_dot(SPARSE_TEST_GRAPH) + "\n"


def test_bellman_ford_command(capsys):
    assert main(["bellman-ford"]) == 0
    out = capsys.readouterr().out
    distances, _ = bellman_ford(TEST_GRAPH, 2)
    assert out == (
        DOT + "Bellman-Ford SSSP from source 2\n" + format_sequence(distances) + "\n\n"
    )


def test_dijkstra_command_with_source(capsys):
    assert main(["dijkstra", "--source", "6"]) == 0
    out = capsys.readouterr().out
    assert out == (
        DOT
        + "Dijkstra from source 6\n" + format_sequence(dijkstra(TEST_GRAPH, 6)) + "\n\n"
        + "Dijkstra priority from source 6\n"
        + format_sequence(dijkstra_priority(TEST_GRAPH, 6)) + "\n\n"
    )


def test_floyd_warshall_command(capsys):
    assert main(["floyd-warshall"]) == 0
    out = capsys.readouterr().out
    rows = "".join(format_sequence(row) + "\n" for row in floyd_warshall(TEST_GRAPH))
    assert out == DOT + "Floyd-Warshall all pairs\n" + rows + "\n"


def test_url_option(capsys):
    base = "http://localhost/view#"
    assert main(["graph", "--url", base]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        base + encode_dot(graph_to_dot(TEST_GRAPH)),
        base + encode_dot(graph_to_dot(SPARSE_TEST_GRAPH)),
    ]


def test_bad_source_exits():
    with pytest.raises(SystemExit) as info:
        main(["dijkstra", "--source", "42"])
    assert info.value.code == 2


def test_unknown_command_exits():
    with pytest.raises(SystemExit) as info:
        main(["nonsense"])
    assert info.value.code == 2