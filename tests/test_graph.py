"Contains a testcase for the maps.graph module"

import unittest
from io import StringIO

from footway_navigator.maps import WeightedGraph


class WeightedGraphTests(unittest.TestCase):
    "Tests the WeightedGraph class"

    def setUp(self):
        self.graph = WeightedGraph()
        for vertex in "ABCD":
            self.graph.add_vertex(vertex)

    def test_empty_graph(self):
        "A new graph has neither vertices nor edges"
        graph = WeightedGraph()
        self.assertEqual(graph.vertex_count(), 0)
        self.assertEqual(graph.edge_count(), 0)
        self.assertSequenceEqual(graph.vertices(), [])

    def test_add_vertex_once(self):
        "Adding a vertex succeeds once, the second time nothing changes"
        graph = WeightedGraph()
        self.assertTrue(graph.add_vertex(42))
        self.assertEqual(graph.vertex_count(), 1)
        self.assertFalse(graph.add_vertex(42))
        self.assertEqual(graph.vertex_count(), 1)

    def test_add_vertex_keeps_edges(self):
        "Re-adding a vertex does not drop its edges"
        self.graph.add_edge("A", "B", 1.0)
        self.assertFalse(self.graph.add_vertex("A"))
        self.assertEqual(self.graph.get_weight("A", "B"), 1.0)

    def test_add_edge(self):
        "An added edge has the given weight, in its direction only"
        self.assertTrue(self.graph.add_edge("A", "B", 2.5))
        self.assertEqual(self.graph.get_weight("A", "B"), 2.5)
        self.assertIsNone(self.graph.get_weight("B", "A"))
        self.assertEqual(self.graph.edge_count(), 1)

    def test_add_edge_overwrites(self):
        "Adding an existing edge again overwrites its weight"
        self.graph.add_edge("A", "B", 2.5)
        self.assertTrue(self.graph.add_edge("A", "B", 4.0))
        self.assertEqual(self.graph.get_weight("A", "B"), 4.0)
        self.assertEqual(self.graph.edge_count(), 1)

    def test_add_edge_missing_vertex(self):
        "Edges to or from unknown vertices are rejected"
        self.assertFalse(self.graph.add_edge("A", "X", 1.0))
        self.assertFalse(self.graph.add_edge("X", "A", 1.0))
        self.assertEqual(self.graph.edge_count(), 0)
        self.assertNotIn("X", self.graph)

    def test_directions_independent(self):
        "Both directions between two vertices may have different weights"
        self.graph.add_edge("A", "B", 1.0)
        self.graph.add_edge("B", "A", 3.0)
        self.assertEqual(self.graph.get_weight("A", "B"), 1.0)
        self.assertEqual(self.graph.get_weight("B", "A"), 3.0)
        self.assertEqual(self.graph.edge_count(), 2)

    def test_get_weight_not_found(self):
        "Looking up a nonexistent edge gives None"
        self.assertIsNone(self.graph.get_weight("A", "B"))
        self.assertIsNone(self.graph.get_weight("X", "A"))
        self.assertIsNone(self.graph.get_weight("A", "X"))

    def test_zero_weight(self):
        "A zero weight is distinguishable from a missing edge"
        self.graph.add_edge("A", "B", 0.0)
        self.assertEqual(self.graph.get_weight("A", "B"), 0.0)
        self.assertIsNotNone(self.graph.get_weight("A", "B"))

    def test_neighbors(self):
        "Neighbors are the targets of outgoing edges"
        self.graph.add_edge("A", "B", 1.0)
        self.graph.add_edge("A", "C", 1.0)
        self.graph.add_edge("D", "A", 1.0)
        self.assertEqual(self.graph.neighbors("A"), {"B", "C"})
        self.assertEqual(self.graph.neighbors("B"), set())

    def test_neighbors_unknown_vertex(self):
        "An unknown vertex has no neighbors"
        self.assertEqual(self.graph.neighbors("X"), set())

    def test_neighbors_is_a_copy(self):
        "Modifying the returned neighbor set leaves the graph alone"
        self.graph.add_edge("A", "B", 1.0)
        self.graph.neighbors("A").add("C")
        self.assertIsNone(self.graph.get_weight("A", "C"))

    def test_vertices(self):
        "All vertices are returned"
        self.assertEqual(sorted(self.graph.vertices()), ["A", "B", "C", "D"])
        self.assertEqual(len(self.graph), 4)
        self.assertIn("C", self.graph)

    def test_edge_count_sums_all_vertices(self):
        "The edge count includes the edges of every vertex"
        self.graph.add_edge("A", "B", 1.0)
        self.graph.add_edge("B", "C", 1.0)
        self.graph.add_edge("C", "D", 1.0)
        self.graph.add_edge("D", "A", 1.0)
        self.graph.add_edge("A", "C", 1.0)
        self.assertEqual(self.graph.edge_count(), 5)

    def test_dump(self):
        "The dump lists counts, vertices and edges"
        self.graph.add_edge("A", "B", 1.5)
        output = StringIO()
        self.graph.dump(output)
        text = output.getvalue()
        self.assertIn("**Num vertices: 4", text)
        self.assertIn("**Num edges: 1", text)
        self.assertIn(" 1. A", text)
        self.assertIn("(A,B,1.5)", text)
