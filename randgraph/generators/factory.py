"""
Graph generator factory for the randgraph library.

This module routes a model name, or a whole GenerationRequest, to the
matching generator and builds empty target graphs by type name.
"""
import logging
from typing import Any, Dict, Optional, Tuple

from randgraph.config import GenerationRequest
from randgraph.graph import (
    Graph,
    UndirectedGraph,
    DirectedGraph,
    WeightedGraph,
    WeightedDirectedGraph,
    PersistentUndirectedGraph,
    PersistentDirectedGraph,
    PersistentWeightedGraph,
    PersistentWeightedDirectedGraph,
)
from randgraph.generators.errors import ConfigurationError
from randgraph.generators.validation import validate_weight_range
from randgraph.generators.random_graphs import gen_rand, gen_rand_p
from randgraph.generators.circulant import gen_circle
from randgraph.generators.small_world import gen_newman_watts
from randgraph.generators.scale_free import gen_barabasi_albert

logger = logging.getLogger(__name__)


class GraphFactory:
    """
    A factory class for generating different types of graph structures.

    Supported models:
    - 'random': fixed number of random edges (gen_rand)
    - 'random_p': each edge with probability p (gen_rand_p)
    - 'circle': circulant ring lattice (gen_circle)
    - 'newman_watts': small-world graph (gen_newman_watts)
    - 'barabasi_albert': preferential attachment (gen_barabasi_albert)
    """

    GRAPH_TYPES = {
        ('graph', False): UndirectedGraph,
        ('digraph', False): DirectedGraph,
        ('weighted_graph', False): WeightedGraph,
        ('weighted_digraph', False): WeightedDirectedGraph,
        ('graph', True): PersistentUndirectedGraph,
        ('digraph', True): PersistentDirectedGraph,
        ('weighted_graph', True): PersistentWeightedGraph,
        ('weighted_digraph', True): PersistentWeightedDirectedGraph,
    }

    # (required, optional) request fields forwarded to each model
    MODEL_PARAMETERS: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
        'random': (('num_nodes', 'num_edges'),
                   ('min_weight', 'max_weight', 'loops', 'seed')),
        'random_p': (('num_nodes', 'p'),
                     ('min_weight', 'max_weight', 'loops', 'seed')),
        'circle': (('num_nodes', 'out_degree'), ()),
        'newman_watts': (('num_nodes', 'out_degree', 'phi'), ('seed',)),
        'barabasi_albert': (('num_initial', 'num_nodes', 'num_edges'),
                            ('seed', 'connect_initial')),
    }

    @classmethod
    def empty_graph(cls, graph_type: str = 'graph', persistent: bool = False) -> Graph:
        """
        Create an empty graph of the named type.

        Args:
            graph_type: One of 'graph', 'digraph', 'weighted_graph', 'weighted_digraph'
            persistent: Whether to use the immutable pyrsistent-backed variant

        Returns:
            An empty graph

        Raises:
            ConfigurationError: If graph_type is unknown
        """
        key = (graph_type.lower(), bool(persistent))
        if key not in cls.GRAPH_TYPES:
            raise ConfigurationError(f"Unknown graph type: {graph_type}")
        return cls.GRAPH_TYPES[key]()

    @classmethod
    def create_graph(cls,
                     model: str,
                     graph: Optional[Graph] = None,
                     **kwargs) -> Graph:
        """
        Factory method to create a graph based on the specified model and parameters.

        Args:
            model: Name of the generator model (see class docstring)
            graph: Target graph; an empty UndirectedGraph when omitted
            **kwargs: Parameters of the generator

        Returns:
            The generated graph

        Raises:
            ConfigurationError: If the model is unknown or parameters are invalid
        """
        if graph is None:
            graph = UndirectedGraph()

        model = model.lower()
        if model == 'random':
            return gen_rand(graph, **kwargs)
        elif model == 'random_p':
            return gen_rand_p(graph, **kwargs)
        elif model == 'circle':
            return gen_circle(graph, **kwargs)
        elif model == 'newman_watts':
            return gen_newman_watts(graph, **kwargs)
        elif model == 'barabasi_albert':
            return gen_barabasi_albert(graph, **kwargs)
        else:
            raise ConfigurationError(f"Unknown graph model: {model}")

    @classmethod
    def from_request(cls,
                     request: GenerationRequest,
                     graph: Optional[Graph] = None) -> Graph:
        """
        Run the model described by a request.

        Args:
            request: The generation request
            graph: Target graph; built from request.graph_type when omitted

        Returns:
            The generated graph

        Raises:
            ConfigurationError: If the model is unknown or a required field is missing,
                                or the weight range is unusable for a weighted target
        """
        model = request.model.lower()
        if model not in cls.MODEL_PARAMETERS:
            raise ConfigurationError(f"Unknown graph model: {request.model}")
        if graph is None:
            graph = cls.empty_graph(request.graph_type, request.persistent)
        # the weight range binds every model on a weighted target
        validate_weight_range(graph, request.min_weight, request.max_weight)

        required, optional = cls.MODEL_PARAMETERS[model]
        params: Dict[str, Any] = {}
        for name in required:
            value = getattr(request, name)
            if value is None:
                raise ConfigurationError(
                    f"Model '{model}' requires parameter '{name}'")
            params[name] = value
        for name in optional:
            params[name] = getattr(request, name)

        logger.info(f"Generating '{model}' graph on {type(graph).__name__} with {params}")
        return cls.create_graph(model, graph, **params)
