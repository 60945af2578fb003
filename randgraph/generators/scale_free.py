"""
Scale-free network generators for the randgraph library.

This module provides the Barabási-Albert preferential attachment model:
starting from a seed set, nodes are added one at a time and each new node
attaches to existing nodes with probability proportional to their degree,
which leads to a power-law degree distribution.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from randgraph.graph import Graph
from randgraph.graph.base import ordered_nodes
from randgraph.generators.errors import ConfigurationError, GenerationError
from randgraph.generators.rng import RandomStream
from randgraph.generators.validation import INF, validate_parameters

logger = logging.getLogger(__name__)


def initial_clique_edges(nodes: Iterable[Any]) -> List[Tuple[Any, Any]]:
    """Edges joining every pair of the given nodes once."""
    nodes = list(nodes)
    return [(nodes[i], nodes[j])
            for i in range(len(nodes))
            for j in range(i + 1, len(nodes))]


def initial_attachment(seed_nodes: List[Any], num_edges: int, rnd: RandomStream) -> List[Any]:
    """
    Pick partners for the first node added to the seed set.

    No degree signal is available yet, so num_edges distinct partners are
    drawn uniformly from the seed nodes.

    Args:
        seed_nodes: Nodes of the seed set
        num_edges: Number of distinct partners to draw
        rnd: Random stream to draw from

    Returns:
        Partners in the order they were drawn
    """
    partners = []
    while len(partners) < num_edges:
        candidate = seed_nodes[rnd.next_int(len(seed_nodes))]
        if candidate not in partners:
            partners.append(candidate)
    return partners


def node_degrees(graph: Graph) -> Dict[Any, int]:
    """
    Degree of every node in a graph.

    Undirected graphs count incident edges; directed graphs count in-degree
    plus out-degree.
    """
    degrees = {node: 0 for node in ordered_nodes(graph.get_nodes())}
    directed = graph.is_directed()
    for node in degrees:
        successors = graph.get_successors(node)
        degrees[node] += len(successors)
        if directed:
            for target in successors:
                degrees[target] += 1
    return degrees


def preferential_attachment(
    degrees: Dict[Any, int],
    num_edges: int,
    rnd: RandomStream,
    step: Optional[int] = None,
    new_node: Any = None
) -> List[Any]:
    """
    Select num_edges distinct nodes with probability proportional to degree.

    Nodes are drawn one at a time without replacement; after each draw the
    chosen node leaves the pool and the remaining degrees are renormalised.
    Draws are integers over the cumulative degree, so no rounding can skip a
    node.

    Args:
        degrees: Current degree of every candidate node
        num_edges: Number of partners to select
        rnd: Random stream to draw from
        step: Growth step, reported on failure
        new_node: Node being attached, reported on failure

    Returns:
        The selected partners in draw order

    Raises:
        GenerationError: If fewer than num_edges candidates have a positive degree
    """
    pool = {node: degree for node, degree in degrees.items() if degree > 0}
    if len(pool) < num_edges:
        raise GenerationError(
            f"Preferential attachment needs {num_edges} partners with positive degree, "
            f"found {len(pool)}", step=step, node=new_node)

    targets = []
    total_degree = sum(pool.values())
    while len(targets) < num_edges:
        r = rnd.next_int(total_degree)
        cumulative = 0
        for node, degree in pool.items():
            cumulative += degree
            if r < cumulative:
                targets.append(node)
                total_degree -= degree
                del pool[node]
                break
    return targets


def gen_barabasi_albert(
    graph: Graph,
    num_initial: int,
    num_nodes: int,
    num_edges: int,
    seed: Optional[int] = None,
    connect_initial: bool = False
) -> Graph:
    """
    Generate a preferential attachment graph as described in Barabási and
    Albert (1999).

    Nodes 0..num_initial-1 form the seed set. Nodes num_initial..num_nodes-1
    are then introduced one at a time, each bringing num_edges edges to
    distinct existing nodes. The first new node picks its partners uniformly
    among the seed nodes; every later node picks them with probability
    proportional to degree. Existing content of the graph keeps its degrees
    and takes part in the attachment.

    All edges are worked out before the graph is touched, so a failure
    leaves the graph as it was.

    Args:
        graph: Graph to grow
        num_initial: Size of the seed set
        num_nodes: Number of nodes after growth
        num_edges: Edges brought by each new node
        seed: Random seed for reproducibility (default: None)
        connect_initial: Join the seed set into a clique before growth

    Returns:
        The grown graph

    Raises:
        ConfigurationError: If parameters are invalid
        GenerationError: If a new node cannot find num_edges distinct partners
    """
    validate_parameters({
        'num_initial': (num_initial, (1, INF)),
        'num_edges': (num_edges, (0, INF)),
        'num_nodes': (num_nodes, (0, INF)),
    })
    if num_edges > num_initial:
        raise ConfigurationError(
            f"num_edges ({num_edges}) cannot exceed num_initial ({num_initial})")
    if num_nodes < num_initial:
        raise ConfigurationError(
            f"num_nodes ({num_nodes}) must be at least num_initial ({num_initial})")
    existing = graph.get_nodes()
    taken = [n for n in range(num_initial, num_nodes) if n in existing]
    if taken:
        raise ConfigurationError(
            f"Growth nodes already present in the graph: {taken}")

    rnd = RandomStream(seed)
    seed_nodes = list(range(num_initial))

    # degrees are tracked locally so the graph is written once at the end
    degrees = node_degrees(graph)
    for node in seed_nodes:
        degrees.setdefault(node, 0)
    edges = initial_clique_edges(seed_nodes) if connect_initial else []
    for source, target in edges:
        degrees[source] += 1
        degrees[target] += 1

    for step, new_node in enumerate(range(num_initial, num_nodes)):
        if step == 0:
            partners = initial_attachment(seed_nodes, num_edges, rnd)
        else:
            partners = preferential_attachment(
                degrees, num_edges, rnd, step=step, new_node=new_node)

        degrees[new_node] = num_edges
        for partner in partners:
            degrees[partner] += 1
            edges.append((new_node, partner))

    graph = graph.add_nodes(range(num_nodes))
    graph = graph.add_edges(edges)
    logger.debug(f"gen_barabasi_albert: grew {num_initial} -> {num_nodes} nodes, "
                 f"{len(edges)} edges, seed={rnd.seed}")
    return graph
