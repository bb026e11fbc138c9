"""Single-source and all-pairs shortest paths on adjacency matrices.

Results are lists of :class:`Hop`: the path weight to each vertex and the
vertex preceding it on the path (-1 for the source and unreachable vertices).
"""

import math
import operator
from itertools import product

from .graph import INF, Hop
from .heap import priority_dequeue, priority_enqueue


def _initial(graph, source):
    if not 0 <= source < len(graph):
        raise IndexError(f"source vertex {source} out of range for {len(graph)} vertices")
    dp = [Hop(INF, -1) for _ in graph]
    dp[source] = Hop(0.0, -1)
    return dp


def relax(graph, dp, r, v):
    """Route the path to ``v`` through ``r`` if that is shorter; return whether it was."""
    via_r = dp[r].weight + graph[r][v]
    if via_r < dp[v].weight:
        dp[v] = Hop(via_r, r)
        return True
    return False


def bellman_ford(graph, source):
    """Return ``(distances, has_negative_cycle)``.

    The flag is set when the last of the ``V - 1`` rounds still shortened a path.
    """
    dp = _initial(graph, source)
    vertices = range(len(graph))
    has_negative_cycle = False
    for _ in range(len(graph) - 1):
        changed = False
        for r, v in product(vertices, vertices):
            changed |= relax(graph, dp, r, v)
        has_negative_cycle = changed
    return dp, has_negative_cycle


def dijkstra(graph, source):
    """Shortest paths from ``source`` for non-negative weights, scanning for the closest open vertex."""
    dp = _initial(graph, source)
    is_open = [True] * len(graph)
    while True:
        candidates = [v for v, hop in enumerate(dp) if is_open[v] and hop.weight < INF]
        if not candidates:
            break
        v_star = min(candidates, key=lambda v: dp[v].weight)
        is_open[v_star] = False
        for v, weight in enumerate(graph[v_star]):
            if is_open[v] and math.isfinite(weight):
                relax(graph, dp, v_star, v)
    return dp


def dijkstra_priority(graph, source):
    """Shortest paths from ``source`` for non-negative weights, using a min-priority queue."""
    dp = _initial(graph, source)
    queue = []
    priority_enqueue(queue, Hop(0.0, source), operator.lt)
    while queue:
        v_star = priority_dequeue(queue, operator.lt).vertex
        for v, weight in enumerate(graph[v_star]):
            if math.isfinite(weight) and relax(graph, dp, v_star, v):
                priority_enqueue(queue, Hop(dp[v].weight, v), operator.lt)
    return dp


def floyd_warshall(graph):
    """All-pairs shortest paths; row ``u`` is the single-source result from ``u``."""
    dp = [
        [
            Hop(0.0, -1) if u == v
            else Hop(weight, u) if math.isfinite(weight)
            else Hop(INF, -1)
            for v, weight in enumerate(row)
        ]
        for u, row in enumerate(graph)
    ]
    for r, row_r in enumerate(dp):
        for row_u in dp:
            for v, hop_rv in enumerate(row_r):
                via_r = row_u[r].weight + row_r[v].weight
                if via_r < row_u[v].weight:
                    row_u[v] = Hop(via_r, row_r[v].vertex)
    return dp