"""
Random graph generators for the randgraph library.

This module provides the two Erdős–Rényi style generators: one places a fixed
number of edges between random endpoints, the other includes each possible
edge independently with probability p.
"""
import logging
from typing import Iterator, Optional, Tuple

from randgraph.graph import Graph
from randgraph.generators.rng import RandomStream
from randgraph.generators.validation import (
    INF,
    validate_parameters,
    validate_weight_range,
)

logger = logging.getLogger(__name__)


def gen_rand(
    graph: Graph,
    num_nodes: int,
    num_edges: int,
    min_weight: int = 1,
    max_weight: int = 1,
    loops: bool = False,
    seed: Optional[int] = None
) -> Graph:
    """
    Add num_nodes nodes and up to num_edges random edges to a graph.

    Each of the num_edges trials draws both endpoints uniformly from
    [0, num_nodes). A trial that lands on a self-loop while loops are
    disallowed is dropped, not retried, so fewer edges than requested may be
    produced. The same pair may be drawn more than once; what happens to the
    duplicate is up to the graph.

    Args:
        graph: Graph to add nodes and edges to
        num_nodes: Number of nodes, identified 0..num_nodes-1
        num_edges: Number of edge trials
        min_weight: Smallest edge weight, inclusive (weighted graphs only)
        max_weight: Largest edge weight, exclusive (weighted graphs only)
        loops: Whether self-loops are allowed
        seed: Random seed for reproducibility (default: None)

    Returns:
        The graph with the new nodes and edges

    Raises:
        ConfigurationError: If parameters are invalid
    """
    validate_parameters({
        'num_nodes': (num_nodes, (1, INF)),
        'num_edges': (num_edges, (0, INF)),
    })
    validate_weight_range(graph, min_weight, max_weight)

    rnd = RandomStream(seed)
    weighted = graph.is_weighted()
    logger.debug(f"gen_rand: {num_nodes} nodes, {num_edges} trials, seed={rnd.seed}")

    def edges() -> Iterator[Tuple]:
        for _ in range(num_edges):
            n1 = rnd.next_int(num_nodes)
            n2 = rnd.next_int(num_nodes)
            if not loops and n1 == n2:
                continue
            if weighted:
                yield n1, n2, rnd.next_weight(min_weight, max_weight)
            else:
                yield n1, n2

    graph = graph.add_nodes(range(num_nodes))
    return graph.add_edges(edges())


def gen_rand_p(
    graph: Graph,
    num_nodes: int,
    p: float,
    min_weight: int = 1,
    max_weight: int = 1,
    loops: bool = False,
    seed: Optional[int] = None
) -> Graph:
    """
    Add num_nodes nodes to a graph with probability p of an edge between
    each pair of nodes (the G(n, p) model).

    Pairs are visited in row-major order and one uniform draw is spent per
    pair considered. Directed graphs consider every ordered pair; undirected
    graphs only consider pairs with n1 > n2, so no pair is tested twice.
    Self-pairs are considered only when loops are allowed.

    Args:
        graph: Graph to add nodes and edges to
        num_nodes: Number of nodes, identified 0..num_nodes-1
        p: Probability of including each considered pair
        min_weight: Smallest edge weight, inclusive (weighted graphs only)
        max_weight: Largest edge weight, exclusive (weighted graphs only)
        loops: Whether self-loops are allowed
        seed: Random seed for reproducibility (default: None)

    Returns:
        The graph with the new nodes and edges

    Raises:
        ConfigurationError: If parameters are invalid
    """
    validate_parameters({
        'num_nodes': (num_nodes, (0, INF)),
        'p': (p, (0.0, 1.0)),
    })
    validate_weight_range(graph, min_weight, max_weight)

    rnd = RandomStream(seed)
    directed = graph.is_directed()
    weighted = graph.is_weighted()
    logger.debug(f"gen_rand_p: {num_nodes} nodes, p={p}, seed={rnd.seed}")

    def considered(n1: int, n2: int) -> bool:
        if n1 == n2:
            return loops
        return directed or n1 > n2

    def edges() -> Iterator[Tuple]:
        for n1 in range(num_nodes):
            for n2 in range(num_nodes):
                if not considered(n1, n2) or rnd.next_double() >= p:
                    continue
                if weighted:
                    yield n1, n2, rnd.next_weight(min_weight, max_weight)
                else:
                    yield n1, n2

    graph = graph.add_nodes(range(num_nodes))
    return graph.add_edges(edges())
