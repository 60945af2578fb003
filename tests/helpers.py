"""
Test doubles shared across the randgraph test suite.
"""
from randgraph.graph import Graph


class RecordingGraph(Graph):
    """
    Graph double that keeps every edge tuple it is handed, duplicates
    included, so tests can count candidate edges before any dedup.
    """

    def __init__(self, directed=False, weighted=False):
        self.directed = directed
        self.weighted = weighted
        self.nodes = set()
        self.edge_calls = []

    def add_nodes(self, nodes):
        self.nodes.update(nodes)
        return self

    def add_edges(self, edges):
        self.edge_calls.append(list(edges))
        return self

    @property
    def edges(self):
        return [edge for call in self.edge_calls for edge in call]

    def get_nodes(self):
        return set(self.nodes)

    def get_successors(self, node_id):
        return {edge[1] for edge in self.edges if edge[0] == node_id}

    def get_weight(self, source, target):
        return None
