"""
Shared fixtures for the randgraph test suite.
"""
import pytest

from tests.helpers import RecordingGraph


@pytest.fixture
def recording_graph():
    """Factory for RecordingGraph instances."""
    return RecordingGraph
