"""Command line front end showing the test graph and its shortest paths."""

import argparse

from .formatting import format_sequence
from .graph import SPARSE_TEST_GRAPH, TEST_GRAPH, print_graph
from .shortest_paths import bellman_ford, dijkstra, dijkstra_priority, floyd_warshall


def _show_graph(args):
    print_graph(TEST_GRAPH, args.url)
    print_graph(SPARSE_TEST_GRAPH, args.url)


def _show_bellman_ford(args):
    print_graph(TEST_GRAPH, args.url)
    print(f"Bellman-Ford SSSP from source {args.source}")
    distances, has_negative_cycle = bellman_ford(TEST_GRAPH, args.source)
    if has_negative_cycle:
        print("The graph has a negative cycle.")
    else:
        print(format_sequence(distances))
    print()


def _show_dijkstra(args):
    print_graph(TEST_GRAPH, args.url)
    print(f"Dijkstra from source {args.source}")
    print(format_sequence(dijkstra(TEST_GRAPH, args.source)))
    print()
    print(f"Dijkstra priority from source {args.source}")
    print(format_sequence(dijkstra_priority(TEST_GRAPH, args.source)))
    print()


def _show_floyd_warshall(args):
    print_graph(TEST_GRAPH, args.url)
    print("Floyd-Warshall all pairs")
    for row in floyd_warshall(TEST_GRAPH):
        print(format_sequence(row))
    print()


_COMMANDS = {
    "graph": _show_graph,
    "bellman-ford": _show_bellman_ford,
    "dijkstra": _show_dijkstra,
    "floyd-warshall": _show_floyd_warshall,
}


def main(argv=None):
    """Run one of the graph demonstrations and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="algolab", description="Shortest paths on a small test graph."
    )
    parser.add_argument("command", choices=sorted(_COMMANDS))
    parser.add_argument("--source", type=int, default=2, help="source vertex (default 2)")
    parser.add_argument(
        "--url", metavar="BASE", default=None,
        help="print graphs as BASE followed by the percent-encoded DOT text",
    )
    args = parser.parse_args(argv)
    try:
        _COMMANDS[args.command](args)
    except IndexError as error:
        parser.error(str(error))
    return 0