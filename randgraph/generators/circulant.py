"""
Circulant (ring lattice) graph generator.
"""
import logging
from typing import Optional

from randgraph.graph import Graph
from randgraph.generators.errors import ConfigurationError
from randgraph.generators.validation import INF, validate_parameters, validate_weight_range

logger = logging.getLogger(__name__)


def gen_circle(
    graph: Graph,
    num_nodes: int,
    out_degree: int,
    min_weight: Optional[int] = None,
    max_weight: Optional[int] = None
) -> Graph:
    """
    Add num_nodes nodes to a graph and connect each one to the out_degree
    nodes following it on a ring.

    Node n gets the edges (n, (n + d) % num_nodes) for d in 1..out_degree.
    No randomness is involved. Edges carry the graph's default weight; the
    weight options are only checked, so callers can hand every generator the
    same parameter record.

    Args:
        graph: Graph to add nodes and edges to
        num_nodes: Number of nodes, identified 0..num_nodes-1
        out_degree: Number of forward neighbours per node
        min_weight: Optional weight range lower bound, checked on weighted graphs
        max_weight: Optional weight range upper bound, checked on weighted graphs;
                    giving either bound requires a valid range

    Returns:
        The graph with the ring lattice added

    Raises:
        ConfigurationError: If num_nodes <= 2 * out_degree or the weight range
                            is unusable
    """
    validate_parameters({
        'num_nodes': (num_nodes, (1, INF)),
        'out_degree': (out_degree, (0, INF)),
    })
    if num_nodes <= 2 * out_degree:
        raise ConfigurationError(
            f"Circulant graph needs num_nodes > 2 * out_degree, got {num_nodes} nodes "
            f"with out_degree {out_degree}")
    if min_weight is not None or max_weight is not None:
        validate_weight_range(graph, min_weight, max_weight)

    edges = ((n, (n + d) % num_nodes)
             for n in range(num_nodes)
             for d in range(1, out_degree + 1))

    graph = graph.add_nodes(range(num_nodes))
    graph = graph.add_edges(edges)
    logger.debug(f"gen_circle: {num_nodes} nodes, out_degree={out_degree}")
    return graph
