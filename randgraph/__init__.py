"""
randgraph: reproducible random graph generation.

Generators take a graph and a flat set of parameters and return the graph
with the generated nodes and edges added.
"""

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
from randgraph.generators import (
    GraphGenerationError,
    ConfigurationError,
    GenerationError,
    RandomStream,
    gen_rand,
    gen_rand_p,
    gen_circle,
    add_shortcuts,
    gen_newman_watts,
    gen_barabasi_albert,
    GraphFactory,
)
from randgraph.config import GenerationRequest, load_request, request_from_dict

__version__ = "0.1.0"

__all__ = [
    'Graph',
    'UndirectedGraph',
    'DirectedGraph',
    'WeightedGraph',
    'WeightedDirectedGraph',
    'PersistentUndirectedGraph',
    'PersistentDirectedGraph',
    'PersistentWeightedGraph',
    'PersistentWeightedDirectedGraph',
    'GraphGenerationError',
    'ConfigurationError',
    'GenerationError',
    'RandomStream',
    'gen_rand',
    'gen_rand_p',
    'gen_circle',
    'add_shortcuts',
    'gen_newman_watts',
    'gen_barabasi_albert',
    'GraphFactory',
    'GenerationRequest',
    'load_request',
    'request_from_dict',
]
