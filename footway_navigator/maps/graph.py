"""Contains the `WeightedGraph` class, the directed graph on which routes are searched.

The graph model
---------------
Vertices
========
A vertex is identified by a hashable and totally ordered key. For OpenStreetMap data,
this is the integer node id.

Edges
=====
An edge connects exactly two vertices in exactly one direction and carries a scalar
weight. For footways, the weight is the walking distance in miles.

A footway can be walked in both directions, but the graph does not know about that.
Whoever builds the graph inserts both directions as two independent edges, so the two
directions may even carry different weights.

The graph is append-only: there are no operations removing vertices or edges.
"""

from typing import Dict, Generic, Hashable, List, Optional, Set, TextIO, TypeVar

Vertex = TypeVar("Vertex", bound=Hashable)
Weight = TypeVar("Weight", int, float)


class WeightedGraph(Generic[Vertex, Weight]):
    """A directed graph with weighted edges, stored as adjacency mappings

    Every key used as edge target is also a vertex of the graph. Between an ordered pair
    of vertices, at most one edge exists."""

    def __init__(self):
        self.adjacency: Dict[Vertex, Dict[Vertex, Weight]] = {}

    def __repr__(self):
        return f"WeightedGraph with {self.vertex_count()} vertices and {self.edge_count()} edges"

    def __contains__(self, vertex: Vertex) -> bool:
        return vertex in self.adjacency

    def __len__(self) -> int:
        return self.vertex_count()

    def vertex_count(self) -> int:
        "Returns the number of vertices in the graph"
        return len(self.adjacency)

    def edge_count(self) -> int:
        "Returns the number of directed edges in the graph"
        return sum(len(edges) for edges in self.adjacency.values())

    def add_vertex(self, vertex: Vertex) -> bool:
        """Adds a vertex without any outgoing edges

        Returns:
            False if the vertex already existed. The graph is unchanged then."""
        if vertex in self.adjacency:
            return False
        self.adjacency[vertex] = {}
        return True

    def add_edge(self, from_vertex: Vertex, to_vertex: Vertex, weight: Weight) -> bool:
        """Adds the directed edge (from_vertex, to_vertex) with `weight`

        If the edge already exists, its weight is overwritten.
        Negative weights are accepted here, but shortest path search assumes
        there are none.

        Returns:
            False if one of the vertices does not exist, True otherwise."""
        if from_vertex not in self.adjacency or to_vertex not in self.adjacency:
            return False
        self.adjacency[from_vertex][to_vertex] = weight
        return True

    def get_weight(self, from_vertex: Vertex, to_vertex: Vertex) -> Optional[Weight]:
        "Returns the weight of the edge (from_vertex, to_vertex), or None if there is none"
        edges = self.adjacency.get(from_vertex)
        if edges is None:
            return None
        return edges.get(to_vertex)

    def neighbors(self, vertex: Vertex) -> Set[Vertex]:
        """Returns all vertices reachable from `vertex` along one edge

        An unknown vertex has no neighbors."""
        return set(self.adjacency.get(vertex, ()))

    def vertices(self) -> List[Vertex]:
        """Returns all vertices of the graph

        The order is the insertion order, but don't rely on it."""
        return list(self.adjacency)

    def dump(self, output: TextIO):
        "Writes the internal state of the graph to `output`, for debugging"
        output.write("*" * 51 + "\n")
        output.write("*" * 21 + " GRAPH " + "*" * 23 + "\n")
        output.write(f"**Num vertices: {self.vertex_count()}\n")
        output.write(f"**Num edges: {self.edge_count()}\n")
        output.write("\n**Vertices:\n")
        for (index, vertex) in enumerate(self.adjacency, start=1):
            output.write(f" {index}. {vertex}\n")
        output.write("\n**Edges:\n")
        for (vertex, edges) in self.adjacency.items():
            row = "  ".join(f"({vertex},{target},{weight})" for (target, weight) in edges.items())
            output.write(f" row {vertex}: {row}\n")
        output.write("*" * 50 + "\n")
