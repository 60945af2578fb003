"""
Immutable graph implementations backed by pyrsistent.

Every bulk operation returns a new graph and leaves the receiver unchanged,
so a generator applied to a persistent graph never disturbs the caller's
value.
"""
from typing import Any, Iterable, Optional, Set, Tuple

import pyrsistent as pyr

from randgraph.graph.base import Graph, unpack_edge


class PersistentGraph(Graph):
    """A graph stored as a persistent map from node to {successor: weight}."""

    def __init__(self, out_edges: Optional[pyr.PMap] = None,
                 in_edges: Optional[pyr.PMap] = None):
        self._out_edges = out_edges if out_edges is not None else pyr.m()
        self._in_edges = in_edges if in_edges is not None else pyr.m()

    def _evolve(self, out_edges: pyr.PMap, in_edges: pyr.PMap) -> "PersistentGraph":
        return type(self)(out_edges, in_edges)

    def add_nodes(self, nodes: Iterable[Any]) -> "PersistentGraph":
        out_edges = self._out_edges.evolver()
        in_edges = self._in_edges.evolver()
        for node_id in nodes:
            if node_id not in self._out_edges:
                out_edges[node_id] = pyr.m()
                in_edges[node_id] = pyr.s()
        return self._evolve(out_edges.persistent(), in_edges.persistent())

    def add_edges(self, edges: Iterable[Tuple]) -> "PersistentGraph":
        out_edges = self._out_edges.evolver()
        in_edges = self._in_edges.evolver()
        for edge in edges:
            source, target, weight = unpack_edge(edge, self.weighted)
            if source not in self._out_edges:
                raise ValueError(
                    f"Source node {source} does not exist in the graph")
            if target not in self._out_edges:
                raise ValueError(
                    f"Target node {target} does not exist in the graph")

            out_edges[source] = out_edges[source].set(target, weight)
            if self.directed:
                in_edges[target] = in_edges[target].add(source)
            else:
                out_edges[target] = out_edges[target].set(source, weight)
        return self._evolve(out_edges.persistent(), in_edges.persistent())

    def get_nodes(self) -> Set:
        return set(self._out_edges)

    def get_successors(self, node_id: Any) -> Set:
        if node_id not in self._out_edges:
            raise ValueError(f"Node {node_id} does not exist in the graph")

        return set(self._out_edges[node_id])

    def get_predecessors(self, node_id: Any) -> Set:
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
        return target in self._out_edges.get(source, pyr.m())

    def __eq__(self, other: Any) -> bool:
        return (type(self) is type(other)
                and self._out_edges == other._out_edges
                and self._in_edges == other._in_edges)

    def __hash__(self) -> int:
        return hash((type(self), self._out_edges))


class PersistentUndirectedGraph(PersistentGraph):
    """Persistent undirected, unweighted graph."""


class PersistentDirectedGraph(PersistentGraph):
    """Persistent directed, unweighted graph."""

    directed = True


class PersistentWeightedGraph(PersistentGraph):
    """Persistent undirected graph with a weight on every edge."""

    weighted = True


class PersistentWeightedDirectedGraph(PersistentGraph):
    """Persistent directed graph with a weight on every edge."""

    directed = True
    weighted = True
