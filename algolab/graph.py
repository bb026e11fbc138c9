"""Weighted directed graphs as adjacency matrices and adjacency lists, and DOT output."""

import math
from dataclasses import dataclass

INF = math.inf


def _number(value):
    return format(value, "g")


@dataclass(frozen=True)
class Hop:
    """An edge end: the weight to reach ``vertex``; hops order by weight alone."""

    weight: float
    vertex: int

    def __lt__(self, other):
        if not isinstance(other, Hop):
            return NotImplemented
        return self.weight < other.weight

    def __str__(self):
        return f"({_number(self.weight)},{self.vertex})"


TEST_GRAPH = [
    [INF, 4, INF, INF, INF, INF, INF, 8, INF],
    [INF, INF, INF, INF, INF, INF, INF, 11, INF],
    [INF, INF, INF, INF, INF, 4, INF, INF, 2],
    [INF, INF, INF, INF, 9, 14, INF, INF, INF],
    [INF, INF, INF, INF, INF, 10, INF, INF, INF],
    [INF, INF, INF, INF, INF, INF, 2, INF, INF],
    [INF, INF, INF, 3, INF, INF, INF, 1, 6],
    [INF, INF, INF, INF, INF, INF, INF, INF, 7],
    [INF, INF, INF, INF, INF, INF, INF, INF, INF],
]

SPARSE_TEST_GRAPH = [
    [Hop(4, 1), Hop(8, 7)],
    [Hop(11, 7)],
    [Hop(4, 5), Hop(2, 8)],
    [Hop(9, 4), Hop(14, 5)],
    [Hop(10, 5)],
    [Hop(2, 6)],
    [Hop(3, 3), Hop(1, 7), Hop(6, 8)],
    [Hop(7, 8)],
    [],
]


def to_sparse(graph):
    """Turn an adjacency matrix into adjacency lists holding the finite entries."""
    return [
        [Hop(weight, vertex) for vertex, weight in enumerate(row) if math.isfinite(weight)]
        for row in graph
    ]


def _as_sparse(graph):
    if any(isinstance(item, Hop) for row in graph for item in row):
        return graph
    return to_sparse(graph)


def graph_to_dot(graph):
    """Render a graph, in either representation, in the DOT language."""
    lines = ["digraph G {"]
    for source, hops in enumerate(_as_sparse(graph)):
        lines.extend(
            f"    {source} -> {hop.vertex} [label= {_number(hop.weight)}];" for hop in hops
        )
    lines.append("}")
    return "\n".join(lines) + "\n"


def encode_dot(text):
    """Percent-encode every byte of ``text`` as two lower-case hex digits."""
    return "".join(f"%{byte:02x}" for byte in text.encode("utf-8"))


def print_graph(graph, base_url=None):
    """Print the DOT form of ``graph``, or a link made of ``base_url`` and its encoding."""
    dot = graph_to_dot(graph)
    if base_url is None:
        print(dot)
    else:
        print(base_url + encode_dot(dot))