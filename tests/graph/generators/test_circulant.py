import unittest

from randgraph.graph import (
    UndirectedGraph,
    DirectedGraph,
    WeightedGraph,
    WeightedDirectedGraph,
    PersistentUndirectedGraph,
)
from randgraph.generators import ConfigurationError, gen_circle


def endpoints(graph):
    return {(edge[0], edge[1]) for edge in graph.get_edges()}


def both_ways(pairs):
    return set(pairs) | {(t, s) for s, t in pairs}


class TestGenCircle(unittest.TestCase):
    """Generating circle graphs on the different graph types."""

    def test_undirected_ring(self):
        graph = gen_circle(UndirectedGraph(), 5, 1)
        self.assertEqual(graph.get_nodes(), set(range(5)))
        self.assertEqual(endpoints(graph),
                         both_ways([(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)]))

    def test_undirected_two_neighbours(self):
        graph = gen_circle(UndirectedGraph(), 6, 2)
        self.assertEqual(graph.get_nodes(), set(range(6)))
        self.assertEqual(endpoints(graph),
                         both_ways([(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0),
                                    (0, 2), (1, 3), (2, 4), (3, 5), (4, 0), (5, 1)]))

    def test_directed(self):
        graph = gen_circle(DirectedGraph(), 6, 2)
        self.assertEqual(endpoints(graph),
                         {(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0),
                          (0, 2), (1, 3), (2, 4), (3, 5), (4, 0), (5, 1)})

    def test_directed_edge_count_and_form(self):
        n, k = 11, 4
        graph = gen_circle(DirectedGraph(), n, k)
        edges = endpoints(graph)
        self.assertEqual(len(edges), n * k)
        self.assertEqual(edges, {(i, (i + d) % n) for i in range(n) for d in range(1, k + 1)})

    def test_weighted_graph_gets_default_weight(self):
        graph = gen_circle(WeightedGraph(), 10, 1)
        ring = [(i, (i + 1) % 10) for i in range(10)]
        self.assertEqual(endpoints(graph), both_ways(ring))
        self.assertTrue(all(w == 1 for _, _, w in graph.get_edges()))

    def test_weighted_graph_with_existing_edges(self):
        graph = WeightedGraph().add_nodes(range(5))
        graph.add_edges([(0, 1, 42), (0, 2, 42), (1, 2, 42), (1, 3, 42),
                         (2, 3, 42), (2, 4, 42)])
        graph = gen_circle(graph, 10, 1)
        ring = [(i, (i + 1) % 10) for i in range(10)]
        self.assertEqual(graph.get_nodes(), set(range(10)))
        self.assertEqual(endpoints(graph),
                         both_ways(ring + [(0, 2), (1, 3), (2, 4)]))

    def test_weighted_digraph_with_existing_edges(self):
        graph = WeightedDirectedGraph().add_nodes(range(4))
        graph.add_edges([(0, 1, 42), (1, 2, 42), (2, 3, 42),
                         (1, 0, 43), (2, 1, 43), (3, 2, 43)])
        graph = gen_circle(graph, 10, 1)
        ring = [(i, (i + 1) % 10) for i in range(10)]
        self.assertEqual(endpoints(graph), set(ring) | {(1, 0), (2, 1), (3, 2)})

    def test_deterministic(self):
        g1 = gen_circle(DirectedGraph(), 9, 3)
        g2 = gen_circle(DirectedGraph(), 9, 3)
        self.assertEqual(g1.get_nodes(), g2.get_nodes())
        self.assertEqual(set(g1.get_edges()), set(g2.get_edges()))

    def test_zero_out_degree(self):
        graph = gen_circle(DirectedGraph(), 3, 0)
        self.assertEqual(graph.get_nodes(), {0, 1, 2})
        self.assertEqual(graph.get_edges(), [])

    def test_too_few_nodes(self):
        graph = UndirectedGraph()
        for n, k in [(4, 2), (2, 1), (6, 3)]:
            with self.assertRaises(ConfigurationError):
                gen_circle(graph, n, k)
        self.assertEqual(graph.get_nodes(), set())

    def test_degenerate_weight_range_on_weighted_digraph(self):
        graph = WeightedDirectedGraph()
        with self.assertRaises(ConfigurationError):
            gen_circle(graph, 6, 2, min_weight=1, max_weight=1)
        self.assertEqual(graph.get_nodes(), set())

    def test_single_weight_bound_checked_on_weighted_graph(self):
        graph = WeightedGraph()
        with self.assertRaises(ConfigurationError):
            gen_circle(graph, 6, 2, min_weight=3)
        with self.assertRaises(ConfigurationError):
            gen_circle(graph, 6, 2, max_weight=3)
        self.assertEqual(graph.get_nodes(), set())

    def test_weight_range_ignored_on_unweighted(self):
        graph = gen_circle(DirectedGraph(), 6, 2, min_weight=1, max_weight=1)
        self.assertEqual(len(graph.get_edges()), 12)

    def test_persistent_input_untouched(self):
        original = PersistentUndirectedGraph()
        graph = gen_circle(original, 7, 2)
        self.assertEqual(len(original), 0)
        self.assertEqual(len(graph), 7)


if __name__ == '__main__':
    unittest.main()
