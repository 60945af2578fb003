import unittest

from randgraph.graph import (
    PersistentUndirectedGraph,
    PersistentDirectedGraph,
    PersistentWeightedGraph,
    PersistentWeightedDirectedGraph,
)


class TestPersistentGraph(unittest.TestCase):
    """Test cases for the pyrsistent-backed graphs."""

    def test_add_nodes_returns_new_graph(self):
        empty = PersistentUndirectedGraph()
        graph = empty.add_nodes([0, 1])
        self.assertIsNot(graph, empty)
        self.assertEqual(empty.get_nodes(), set())
        self.assertEqual(graph.get_nodes(), {0, 1})

    def test_add_edges_leaves_receiver_unchanged(self):
        base = PersistentUndirectedGraph().add_nodes([0, 1, 2])
        graph = base.add_edges([(0, 1)])
        self.assertFalse(base.has_edge(0, 1))
        self.assertTrue(graph.has_edge(0, 1))
        self.assertTrue(graph.has_edge(1, 0))

    def test_directed(self):
        graph = PersistentDirectedGraph().add_nodes([0, 1]).add_edges([(0, 1)])
        self.assertTrue(graph.is_directed())
        self.assertEqual(graph.get_successors(0), {1})
        self.assertEqual(graph.get_successors(1), set())
        self.assertEqual(graph.get_predecessors(1), {0})

    def test_weighted(self):
        graph = PersistentWeightedGraph().add_nodes([0, 1, 2])
        graph = graph.add_edges([(0, 1, 3), (1, 2)])
        self.assertEqual(graph.get_weight(1, 0), 3)
        self.assertEqual(graph.get_weight(1, 2), 1)

        digraph = PersistentWeightedDirectedGraph().add_nodes([0, 1])
        digraph = digraph.add_edges([(0, 1, 9)])
        self.assertEqual(digraph.get_edges(), [(0, 1, 9)])

    def test_missing_endpoint(self):
        graph = PersistentDirectedGraph().add_nodes([0])
        with self.assertRaises(ValueError):
            graph.add_edges([(0, 1)])

    def test_equality(self):
        g1 = PersistentDirectedGraph().add_nodes([0, 1]).add_edges([(0, 1)])
        g2 = PersistentDirectedGraph().add_nodes([1, 0]).add_edges([(0, 1)])
        self.assertEqual(g1, g2)
        self.assertEqual(hash(g1), hash(g2))
        self.assertNotEqual(g1, PersistentUndirectedGraph().add_nodes([0, 1]).add_edges([(0, 1)]))


if __name__ == '__main__':
    unittest.main()
