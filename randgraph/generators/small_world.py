"""
Small-world graph generator (Newman and Watts, 1999).

A small-world graph is a ring lattice with a few random long-range
shortcuts layered on top.
"""
import logging
from typing import Optional

from randgraph.graph import Graph
from randgraph.graph.base import ordered_nodes
from randgraph.generators.circulant import gen_circle
from randgraph.generators.rng import RandomStream
from randgraph.generators.validation import validate_parameters

logger = logging.getLogger(__name__)


def add_shortcuts(graph: Graph, phi: float, seed: Optional[int] = None) -> Graph:
    """
    Add random shortcut edges to a graph as described in Newman and Watts (1999).

    Every node gets at most one shortcut: with probability phi an edge is
    added from it to a node drawn uniformly from all nodes of the graph,
    itself included.

    Args:
        graph: Graph to add shortcuts to
        phi: Probability that a node gets a shortcut
        seed: Random seed for reproducibility (default: None)

    Returns:
        The graph with the shortcuts added

    Raises:
        ConfigurationError: If phi is outside [0, 1]
    """
    validate_parameters({'phi': (phi, (0.0, 1.0))})

    rnd = RandomStream(seed)
    nodes = ordered_nodes(graph.get_nodes())
    shortcuts = []
    for node in nodes:
        if rnd.next_double() < phi:
            shortcuts.append((node, nodes[rnd.next_int(len(nodes))]))

    logger.debug(f"add_shortcuts: {len(shortcuts)} shortcuts over {len(nodes)} nodes, "
                 f"seed={rnd.seed}")
    return graph.add_edges(shortcuts)


def gen_newman_watts(
    graph: Graph,
    num_nodes: int,
    out_degree: int,
    phi: float,
    seed: Optional[int] = None
) -> Graph:
    """
    Generate a graph with small-world properties as described in Newman and
    Watts (1999): a circulant base plus random shortcuts.

    Args:
        graph: Graph to add nodes and edges to
        num_nodes: Number of nodes, identified 0..num_nodes-1
        out_degree: Number of forward ring neighbours per node
        phi: Probability that a node gets a shortcut
        seed: Random seed for reproducibility (default: None)

    Returns:
        The small-world graph

    Raises:
        ConfigurationError: If parameters are invalid
    """
    # checked before gen_circle so a bad phi leaves the graph untouched
    validate_parameters({'phi': (phi, (0.0, 1.0))})
    graph = gen_circle(graph, num_nodes, out_degree)
    return add_shortcuts(graph, phi, seed)
