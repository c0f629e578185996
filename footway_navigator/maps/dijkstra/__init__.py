"""
Provides the shortest_paths(graph, source) -> ShortestPaths function, which
finds the shortest distances from one vertex to every other vertex of a graph.
"""
from math import inf
from typing import Dict, Hashable, NamedTuple, Optional
from heapq import heapify, heappush, heappop
from logging import debug
from ..graph import WeightedGraph
from .tools import ShortestPaths, reconstruct_path


class PQItem(NamedTuple):
    """A single item in the search priority queue

    Items compare by distance first, then by vertex, so that equally distant
    vertices leave the queue in ascending id order."""
    distance: float
    vertex: Hashable


def shortest_paths(graph: WeightedGraph, source: Hashable) -> ShortestPaths:
    """
    Computes the shortest distance from `source` to every vertex of `graph`.

    Uses `Dijkstra's algorithm`_ with a binary heap. Every vertex enters the queue
    with an infinite distance first; improved distances are pushed as new items, and
    outdated items are skipped when they are popped.

    .. _Dijkstra's algorithm: https://en.wikipedia.org/wiki/Dijkstra%27s_algorithm

    Args:
        graph:
            The graph to search. Edge weights must not be negative.
        source:
            The start vertex. It has to be a vertex of `graph`; this is not checked.

    Returns:
        The distances and predecessors of every vertex. Unreachable vertices keep
        an infinite distance and a `None` predecessor, as does the source itself.
    """
    distances: Dict[Hashable, float] = {}
    predecessors: Dict[Hashable, Optional[Hashable]] = {}

    # The queue
    unvisited = []
    for vertex in graph.vertices():
        distances[vertex] = inf
        predecessors[vertex] = None
        unvisited.append(PQItem(inf, vertex))

    distances[source] = 0.0
    unvisited.append(PQItem(0.0, source))
    heapify(unvisited)

    # The vertices whose distance is final
    visited = set()

    while unvisited:
        current = heappop(unvisited)

        # Everything left in the queue is unreachable from the source
        if current.distance == inf:
            break

        # Outdated queue item
        if current.vertex in visited:
            continue
        visited.add(current.vertex)

        for neighbor in graph.neighbors(current.vertex):
            weight = graph.get_weight(current.vertex, neighbor)
            alternative = distances[current.vertex] + weight
            if alternative < distances[neighbor]:
                distances[neighbor] = alternative
                predecessors[neighbor] = current.vertex
                heappush(unvisited, PQItem(alternative, neighbor))

    debug(f"Dijkstra from {source} settled {len(visited)} of {graph.vertex_count()} vertices")
    return ShortestPaths(distances, predecessors)
