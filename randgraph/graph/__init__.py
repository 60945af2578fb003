"""
Graph module for the randgraph library.

This module provides the graph capability interface and its mutable and
persistent implementations.
"""

from randgraph.graph.base import Graph, DEFAULT_WEIGHT
from randgraph.graph.adjacency import (
    AdjacencyGraph,
    UndirectedGraph,
    DirectedGraph,
    WeightedGraph,
    WeightedDirectedGraph,
)
from randgraph.graph.persistent import (
    PersistentGraph,
    PersistentUndirectedGraph,
    PersistentDirectedGraph,
    PersistentWeightedGraph,
    PersistentWeightedDirectedGraph,
)

__all__ = [
    'Graph',
    'DEFAULT_WEIGHT',
    'AdjacencyGraph',
    'UndirectedGraph',
    'DirectedGraph',
    'WeightedGraph',
    'WeightedDirectedGraph',
    'PersistentGraph',
    'PersistentUndirectedGraph',
    'PersistentDirectedGraph',
    'PersistentWeightedGraph',
    'PersistentWeightedDirectedGraph',
]
