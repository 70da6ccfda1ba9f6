"""
Random state management for centroid seeding.

Anything exposing ``uniform(low, high) -> float`` can act as a random
source; ``numpy.random.Generator`` does. Use get_rng() for the shared,
seeded generator.
"""

import numpy as np
from typing import Iterable, Optional

_global_seed: int = 42
_global_rng: Optional[np.random.Generator] = None


def set_seed(seed: int = 42):
    """Set the global random seed for reproducibility."""
    global _global_seed, _global_rng
    _global_seed = seed
    _global_rng = np.random.default_rng(seed)


def get_rng() -> np.random.Generator:
    """Get the global random number generator."""
    global _global_rng
    if _global_rng is None:
        set_seed(_global_seed)
    return _global_rng


def get_seed() -> int:
    """Get the current global seed."""
    return _global_seed


class SequenceSource:
    """
    Deterministic random source replaying a fixed list of values.

    The bounds passed to uniform() are ignored; values cycle once the
    sequence is exhausted.
    """

    def __init__(self, values: Iterable[float]):
        self.values = [float(v) for v in values]
        if not self.values:
            raise ValueError("SequenceSource needs at least one value")
        self.calls = 0

    def uniform(self, low: float = 0.0, high: float = 1.0) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


# Initialize with default seed
set_seed(42)
