"""
Error classes for graph generation.

This module defines exception classes used across the graph generators module.
"""
from typing import Any, Optional


class GraphGenerationError(Exception):
    """Exception raised for errors during graph generation."""
    pass


class ConfigurationError(GraphGenerationError):
    """
    Raised when generator parameters violate a precondition.

    Always raised before any random draw and before the target graph is
    touched, so the graph is left as it was.
    """
    pass


class GenerationError(GraphGenerationError):
    """
    Raised when an invariant fails while a graph is being generated.

    Attributes:
        step: Index of the growth step that failed
        node: Node that was being processed when the failure occurred
    """

    def __init__(self, message: str, step: Optional[int] = None, node: Any = None):
        self.step = step
        self.node = node
        if step is not None or node is not None:
            message = f"{message} (step={step}, node={node})"
        super().__init__(message)
