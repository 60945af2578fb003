"""
Seeded random stream used by the graph generators.

Every generator call owns one RandomStream; nothing in this package touches
the global ``random`` or ``numpy.random`` state.
"""
from typing import Optional

import numpy as np


def fresh_seed() -> int:
    """Draw a high-entropy seed from the operating system."""
    return int(np.random.SeedSequence().entropy)


class RandomStream:
    """
    Deterministic stream of uniform draws.

    Two streams built from the same seed yield the same sequence of draws.
    When no seed is given a fresh one is drawn and kept on ``seed`` so the
    run can be replayed.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = fresh_seed() if seed is None else int(seed)
        self._rng = np.random.default_rng(self.seed)

    def next_int(self, bound: int) -> int:
        """
        Draw an integer uniformly from [0, bound).

        Raises:
            ValueError: If bound is not positive
        """
        if bound <= 0:
            raise ValueError(f"Bound must be positive, got {bound}")
        return int(self._rng.integers(bound))

    def next_double(self) -> float:
        """Draw a float uniformly from [0, 1)."""
        return float(self._rng.random())

    def next_weight(self, min_weight: int, max_weight: int) -> int:
        """Draw an integer weight uniformly from [min_weight, max_weight)."""
        return min_weight + self.next_int(max_weight - min_weight)

    def __repr__(self) -> str:
        return f"RandomStream(seed={self.seed})"
