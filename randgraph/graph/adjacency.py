"""
Mutable graph implementations for the randgraph library.

This module contains adjacency-map graphs that are updated in place. Each
of the four variants fixes directedness and weightedness at class level.
"""
from typing import Any, Dict, Iterable, Optional, Set, Tuple

from randgraph.graph.base import Graph, unpack_edge


class AdjacencyGraph(Graph):
    """A graph stored as a map from node to {successor: weight}."""

    def __init__(self):
        """Initialize an empty graph."""
        self._out_edges: Dict[Any, Dict[Any, Any]] = {}  # node -> {successor: weight}
        self._in_edges: Dict[Any, Set] = {}   # node -> set of predecessors, directed only

    def add_nodes(self, nodes: Iterable[Any]) -> "AdjacencyGraph":
        for node_id in nodes:
            if node_id not in self._out_edges:
                self._out_edges[node_id] = {}
                self._in_edges[node_id] = set()
        return self

    def add_edges(self, edges: Iterable[Tuple]) -> "AdjacencyGraph":
        for edge in edges:
            source, target, weight = unpack_edge(edge, self.weighted)
            if source not in self._out_edges:
                raise ValueError(
                    f"Source node {source} does not exist in the graph")
            if target not in self._out_edges:
                raise ValueError(
                    f"Target node {target} does not exist in the graph")

            self._out_edges[source][target] = weight
            if self.directed:
                self._in_edges[target].add(source)
            else:
                self._out_edges[target][source] = weight
        return self

    def get_nodes(self) -> Set:
        return set(self._out_edges)

    def get_successors(self, node_id: Any) -> Set:
        if node_id not in self._out_edges:
            raise ValueError(f"Node {node_id} does not exist in the graph")

        return set(self._out_edges[node_id])

    def get_predecessors(self, node_id: Any) -> Set:
        """
        Get all predecessor nodes (incoming neighbors) of a node.

        Raises:
            ValueError: If the node doesn't exist
        """
        if node_id not in self._out_edges:
            raise ValueError(f"Node {node_id} does not exist in the graph")

        if self.directed:
            return set(self._in_edges[node_id])
        return self.get_successors(node_id)

    def get_weight(self, source: Any, target: Any) -> Optional[Any]:
        if not self.has_edge(source, target):
            raise ValueError(
                f"Edge ({source}, {target}) does not exist in the graph")
        return self._out_edges[source][target]

    def has_node(self, node_id: Any) -> bool:
        return node_id in self._out_edges

    def has_edge(self, source: Any, target: Any) -> bool:
        return target in self._out_edges.get(source, {})


class UndirectedGraph(AdjacencyGraph):
    """Undirected, unweighted graph."""


class DirectedGraph(AdjacencyGraph):
    """Directed, unweighted graph."""

    directed = True


class WeightedGraph(AdjacencyGraph):
    """Undirected graph with a weight on every edge."""

    weighted = True


class WeightedDirectedGraph(AdjacencyGraph):
    """Directed graph with a weight on every edge."""

    directed = True
    weighted = True
