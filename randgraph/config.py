"""
Configuration utilities for the randgraph library.

This module describes one generation call as a GenerationRequest and loads,
saves and merges requests through OmegaConf.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from randgraph.generators.errors import ConfigurationError


@dataclass
class GenerationRequest:
    """
    Parameters of a single generator call.

    Only the fields a model uses are read; the others may stay None.
    ``min_weight`` and ``max_weight`` matter only for weighted graph types,
    where ``min_weight < max_weight`` must hold.
    """

    model: str = "random"
    graph_type: str = "graph"
    persistent: bool = False
    num_nodes: int = 10
    num_edges: Optional[int] = None
    p: Optional[float] = None
    out_degree: Optional[int] = None
    phi: Optional[float] = None
    num_initial: Optional[int] = None
    connect_initial: bool = False
    min_weight: int = 1
    max_weight: int = 1
    loops: bool = False
    seed: Optional[int] = None


def default_request() -> DictConfig:
    """
    Get the default configuration.

    Returns:
        DictConfig: Structured config over GenerationRequest
    """
    return OmegaConf.structured(GenerationRequest)


def request_from_dict(values: Union[Dict[str, Any], DictConfig]) -> GenerationRequest:
    """
    Build a request from a mapping, filling the rest from the defaults.

    Args:
        values: Field values to override

    Returns:
        GenerationRequest: The validated request

    Raises:
        ConfigurationError: If a key is unknown or a value has the wrong type
    """
    try:
        merged = OmegaConf.merge(default_request(), values)
        return OmegaConf.to_object(merged)
    except OmegaConfBaseException as e:
        raise ConfigurationError(f"Invalid generation request: {e}") from e


def load_request(path: str) -> GenerationRequest:
    """
    Load a request from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        GenerationRequest: The validated request

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the file content is not a valid request
    """
    return request_from_dict(OmegaConf.load(path))


def save_request(request: GenerationRequest, path: str) -> None:
    """
    Save a request as YAML.

    Args:
        request: Request to save
        path: Destination file
    """
    with open(path, 'w') as f:
        f.write(OmegaConf.to_yaml(OmegaConf.structured(request)))


def merge_requests(base: GenerationRequest,
                   override: Union[Dict[str, Any], DictConfig]) -> GenerationRequest:
    """
    Merge two configurations, with the override taking precedence.

    Args:
        base: Base request
        override: Values that override the base

    Returns:
        GenerationRequest: Merged request
    """
    try:
        merged = OmegaConf.merge(OmegaConf.structured(base), override)
        return OmegaConf.to_object(merged)
    except OmegaConfBaseException as e:
        raise ConfigurationError(f"Invalid generation request: {e}") from e
