"""
Parameter checks shared by the graph generators.

All checks raise ConfigurationError and run before any random draw, so a
rejected call never touches the target graph.
"""
import numbers
from typing import Any, Dict, Optional

from randgraph.graph import Graph
from randgraph.generators.errors import ConfigurationError

INF = float('inf')


def validate_parameters(params_dict: Dict[str, Any]) -> None:
    """
    Validate the parameters for graph generation.

    Args:
        params_dict: Dictionary of parameter names mapped to
                     ``(value, (min, max))`` with an inclusive range

    Raises:
        ConfigurationError: If any parameter is invalid
    """
    for param_name, (param_value, (min_val, max_val)) in params_dict.items():
        if isinstance(param_value, bool) or not isinstance(param_value, numbers.Real):
            raise ConfigurationError(
                f"Parameter '{param_name}' must be a number, got {param_value!r}")
        # integer lower bound means an integer parameter
        if isinstance(min_val, int) and not isinstance(param_value, numbers.Integral):
            raise ConfigurationError(
                f"Parameter '{param_name}' must be an integer, got {param_value!r}")
        if not (min_val <= param_value <= max_val):
            raise ConfigurationError(
                f"Parameter '{param_name}' value {param_value} is outside valid range [{min_val}, {max_val}]")


def validate_weight_range(graph: Graph,
                          min_weight: Optional[int],
                          max_weight: Optional[int]) -> None:
    """
    Check that a weighted graph gets a usable weight range.

    Unweighted graphs ignore the range. A weighted graph needs integer bounds
    with ``min_weight < max_weight``; a single possible weight is rejected
    rather than coerced.

    Raises:
        ConfigurationError: If the range is unusable for a weighted graph
    """
    if not graph.is_weighted():
        return
    for name, value in (('min_weight', min_weight), ('max_weight', max_weight)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ConfigurationError(
                f"Parameter '{name}' must be an integer for weighted graphs, got {value!r}")
    if min_weight >= max_weight:
        raise ConfigurationError(
            f"Weighted graphs require min_weight < max_weight, got [{min_weight}, {max_weight})")
