"""
Base graph classes for the randgraph library.

This module contains the capability interface shared by every graph variant
in the randgraph library. The generators only rely on ``is_directed``,
``is_weighted``, ``add_nodes``, ``add_edges``, ``get_nodes`` and
``get_successors``; the rest of the surface is for callers and tests.
"""
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Set, Tuple

import networkx as nx

DEFAULT_WEIGHT = 1


class Graph(ABC):
    """
    Base class for all graph implementations.

    Concrete variants fix ``directed`` and ``weighted`` at class level, so the
    options a caller may pass (weights in particular) are known from the type.
    Bulk operations return the resulting graph: mutable variants return
    ``self``, persistent variants return a new graph.
    """

    directed: bool = False
    weighted: bool = False

    def is_directed(self) -> bool:
        """Return True if edges have a direction."""
        return self.directed

    def is_weighted(self) -> bool:
        """Return True if edges carry a weight."""
        return self.weighted

    @abstractmethod
    def add_nodes(self, nodes: Iterable[Any]) -> "Graph":
        """
        Add nodes to the graph. Nodes already present are left alone.

        Args:
            nodes: Node identifiers to add

        Returns:
            Graph: The graph holding the new nodes
        """

    @abstractmethod
    def add_edges(self, edges: Iterable[Tuple]) -> "Graph":
        """
        Add edges to the graph.

        Args:
            edges: ``(source, target)`` tuples, or ``(source, target, weight)``
                   tuples for weighted graphs

        Returns:
            Graph: The graph holding the new edges

        Raises:
            ValueError: If an endpoint is missing or a tuple has the wrong arity
        """

    @abstractmethod
    def get_nodes(self) -> Set:
        """Return the set of node identifiers."""

    @abstractmethod
    def get_successors(self, node_id: Any) -> Set:
        """
        Get all successor nodes of a node. For undirected graphs these are
        all neighbours.

        Raises:
            ValueError: If the node doesn't exist
        """

    @abstractmethod
    def get_weight(self, source: Any, target: Any) -> Optional[Any]:
        """Return the weight of an edge, or None for unweighted graphs."""

    def add_node(self, node_id: Any) -> "Graph":
        return self.add_nodes([node_id])

    def add_edge(self, source: Any, target: Any, weight: Any = None) -> "Graph":
        if weight is None:
            return self.add_edges([(source, target)])
        return self.add_edges([(source, target, weight)])

    def has_node(self, node_id: Any) -> bool:
        return node_id in self.get_nodes()

    def has_edge(self, source: Any, target: Any) -> bool:
        return self.has_node(source) and target in self.get_successors(source)

    def get_edges(self) -> List[Tuple]:
        """
        Get all edges in the graph.

        Undirected graphs report each edge in both orientations. Weighted
        graphs report ``(source, target, weight)`` tuples.

        Returns:
            List[Tuple]: A list of edge tuples
        """
        edges = []
        for source in self.get_nodes():
            for target in self.get_successors(source):
                if self.weighted:
                    edges.append((source, target, self.get_weight(source, target)))
                else:
                    edges.append((source, target))
        return edges

    def degree(self, node_id: Any) -> int:
        """Number of successors of a node (out-degree for directed graphs)."""
        return len(self.get_successors(node_id))

    def to_networkx(self) -> nx.Graph:
        """
        Convert to a networkx graph so generated samples can be fed to
        networkx algorithms.

        Returns:
            nx.Graph: ``nx.DiGraph`` for directed variants, ``nx.Graph``
                      otherwise, with a ``weight`` edge attribute when weighted
        """
        nx_graph = nx.DiGraph() if self.directed else nx.Graph()
        nx_graph.add_nodes_from(self.get_nodes())
        if self.weighted:
            nx_graph.add_weighted_edges_from(self.get_edges())
        else:
            nx_graph.add_edges_from(self.get_edges())
        return nx_graph

    def __len__(self) -> int:
        return len(self.get_nodes())

    def __str__(self) -> str:
        return (f"{type(self).__name__}(nodes={len(self)}, "
                f"edges={len(self.get_edges())})")


def unpack_edge(edge: Tuple, weighted: bool) -> Tuple[Any, Any, Any]:
    """
    Split an edge tuple into source, target and weight.

    Args:
        edge: A 2-tuple or, for weighted graphs, a 3-tuple
        weighted: Whether the receiving graph is weighted

    Returns:
        Tuple: ``(source, target, weight)``; weight is None for unweighted
               graphs and DEFAULT_WEIGHT for 2-tuples on weighted graphs

    Raises:
        ValueError: If the tuple arity does not fit the graph
    """
    if len(edge) == 2:
        source, target = edge
        return source, target, DEFAULT_WEIGHT if weighted else None
    if len(edge) == 3:
        if not weighted:
            raise ValueError(
                f"Edge {tuple(edge)} carries a weight but the graph is unweighted")
        return edge[0], edge[1], edge[2]
    raise ValueError(f"Edge must be a 2- or 3-tuple, got {tuple(edge)}")


def ordered_nodes(nodes: Iterable[Any]) -> List[Any]:
    """Sort node identifiers, falling back to their repr for mixed types."""
    try:
        return sorted(nodes)
    except TypeError:
        return sorted(nodes, key=repr)
