"""
corrcluster: k-means clustering of sparse rating profiles

Provides a row-oriented sparse matrix, Pearson correlation over shared
columns, and a k-means model that clusters rows by correlation distance.
"""

__version__ = "0.1.0"

from .core.types import Entry, ClusteringResult, UNASSIGNED
from .core.random import set_seed, get_rng, SequenceSource
from .sparse import SparseRowStore, Row, MutableRow
from .similarity import pearson, pearson_distance
from .clustering import BaseClusterer, KMeansModel
from .config import KMeansConfig, load_config, validate_config
from .runner import run_clustering

from . import data
from . import metrics
