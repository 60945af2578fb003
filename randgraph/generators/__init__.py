"""
Graph generators module for the randgraph library.

This module provides generators for classical random graph models:
Erdős–Rényi sampling, circulant lattices, Newman–Watts small worlds and
Barabási–Albert preferential attachment.
"""

from randgraph.generators.errors import (
    GraphGenerationError,
    ConfigurationError,
    GenerationError,
)
from randgraph.generators.rng import RandomStream
from randgraph.generators.random_graphs import gen_rand, gen_rand_p
from randgraph.generators.circulant import gen_circle
from randgraph.generators.small_world import add_shortcuts, gen_newman_watts
from randgraph.generators.scale_free import gen_barabasi_albert
from randgraph.generators.factory import GraphFactory

__all__ = [
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
]
