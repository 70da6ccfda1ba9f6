"""Core types and random state."""

from .types import Entry, ClusteringResult, UNASSIGNED
from .random import set_seed, get_rng, get_seed, SequenceSource
