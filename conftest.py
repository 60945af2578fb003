"""
Pytest configuration for randgraph tests.

This file makes the randgraph package importable from a source checkout
without installing it.
"""

import sys
from pathlib import Path

# Get the project root directory
project_root = Path(__file__).parent

# Add the project root to Python path if not already present
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
