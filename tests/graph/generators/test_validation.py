import pytest

from randgraph.graph import UndirectedGraph, WeightedGraph
from randgraph.generators import ConfigurationError
from randgraph.generators.validation import INF, validate_parameters, validate_weight_range


def test_values_inside_range():
    validate_parameters({
        'num_nodes': (0, (0, INF)),
        'p': (1.0, (0.0, 1.0)),
        'phi': (0, (0.0, 1.0)),
    })


@pytest.mark.parametrize("value, valid_range", [
    (-1, (0, INF)),
    (1.5, (0.0, 1.0)),
    (2.0, (0, INF)),
    (True, (0, INF)),
    ("3", (0, INF)),
])
def test_values_rejected(value, valid_range):
    with pytest.raises(ConfigurationError) as excinfo:
        validate_parameters({'x': (value, valid_range)})
    assert "'x'" in str(excinfo.value)


def test_weight_range_only_binds_weighted_graphs():
    validate_weight_range(UndirectedGraph(), 1, 1)
    validate_weight_range(UndirectedGraph(), None, None)
    validate_weight_range(WeightedGraph(), 1, 2)


@pytest.mark.parametrize("min_weight, max_weight", [(1, 1), (3, 2), (None, 3), (1.0, 3)])
def test_weight_range_rejected_on_weighted_graph(min_weight, max_weight):
    with pytest.raises(ConfigurationError):
        validate_weight_range(WeightedGraph(), min_weight, max_weight)
