"""Evaluation metrics for correlation clustering."""

from .clustering import (
    cluster_sizes,
    compute_clustering_metrics,
    compute_agreement_metrics,
    centroid_mean_deviation,
)
from .sanity import run_sanity_checks
