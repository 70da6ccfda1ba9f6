"""Clustering metrics: model summaries, ARI agreement, centroid-mean checks."""

import math
from typing import Dict, List, Optional, Sequence
from collections import defaultdict
import numpy as np

from ..clustering import KMeansModel
from ..sparse import SparseRowStore


def _comb2(n: int) -> float:
    """Compute n choose 2 as a float."""
    if n < 2:
        return 0.0
    return float(n * (n - 1) / 2)


def _adjusted_rand_index(true_arr: List[int], pred_arr: List[int]) -> float:
    """
    Compute Adjusted Rand Index (ARI) for two labelings.

    Args:
        true_arr: Reference cluster labels aligned to rows.
        pred_arr: Predicted cluster labels aligned to rows.

    Returns:
        ARI score in [-1, 1].
    """
    true_labels = np.asarray(true_arr, dtype=int)
    pred_labels = np.asarray(pred_arr, dtype=int)

    if true_labels.size < 2:
        return 0.0

    _, t_idx = np.unique(true_labels, return_inverse=True)
    _, p_idx = np.unique(pred_labels, return_inverse=True)

    n_true = int(t_idx.max()) + 1
    n_pred = int(p_idx.max()) + 1

    contingency = np.zeros((n_true, n_pred), dtype=int)
    np.add.at(contingency, (t_idx, p_idx), 1)

    sum_comb = float(np.sum([_comb2(int(x)) for x in contingency.ravel()]))
    sum_true = float(np.sum([_comb2(int(x)) for x in contingency.sum(axis=1)]))
    sum_pred = float(np.sum([_comb2(int(x)) for x in contingency.sum(axis=0)]))

    n = int(contingency.sum())
    total = _comb2(n)
    if total == 0.0:
        return 0.0

    expected = (sum_true * sum_pred) / total
    max_index = 0.5 * (sum_true + sum_pred)
    denom = max_index - expected
    if denom == 0.0:
        return 0.0

    return float((sum_comb - expected) / denom)


def cluster_sizes(assignments: Sequence[Optional[int]], cluster_count: int) -> List[int]:
    """Number of rows assigned to each cluster."""
    sizes = [0] * cluster_count
    for cluster_index in assignments:
        if cluster_index is not None:
            sizes[cluster_index] += 1
    return sizes


def compute_clustering_metrics(model: KMeansModel) -> Dict[str, object]:
    """
    Summarize the current state of a model.
    
    Args:
        model: A model that has been stepped zero or more times.
        
    Returns:
        Dict with assignment counts, cluster sizes, dead centroids and error.
    """
    assignments = model.assignments
    sizes = cluster_sizes(assignments, model.cluster_count)
    n_assigned = sum(sizes)
    dead = model.dead_centroids()
    
    return {
        "n_rows": model.row_count,
        "n_assigned": n_assigned,
        "n_unassigned": model.row_count - n_assigned,
        "cluster_sizes": sizes,
        "n_empty_clusters": sum(1 for s in sizes if s == 0),
        "n_dead_centroids": len(dead),
        "dead_centroids": dead,
        "mean_squared_error": model.last_error,
        "steps": model.steps_taken,
    }


def compute_agreement_metrics(
    true_labels: Sequence[Optional[int]],
    assignments: Sequence[Optional[int]]
) -> Dict[str, float]:
    """
    Compare an assignment table against reference labels.
    
    Rows unassigned on either side are ignored.
    """
    common = [
        i for i, (t, p) in enumerate(zip(true_labels, assignments))
        if t is not None and p is not None
    ]
    
    if len(common) < 2:
        return {"ari": 0.0, "n_common_rows": len(common)}
    
    true_arr = [true_labels[i] for i in common]
    pred_arr = [assignments[i] for i in common]
    
    return {
        "ari": _adjusted_rand_index(true_arr, pred_arr),
        "n_common_rows": len(common),
        "n_true_clusters": len(set(true_arr)),
        "n_pred_clusters": len(set(pred_arr)),
    }


def centroid_mean_deviation(model: KMeansModel, matrix: SparseRowStore) -> float:
    """
    Largest gap between a centroid cell and the mean of its members' values.
    
    Only cells with at least one contributing row are compared. After a
    step this should be zero up to rounding.
    """
    members = defaultdict(list)
    for row_index, cluster_index in enumerate(model.assignments):
        if cluster_index is not None:
            for column, value in matrix.row(row_index):
                members[(cluster_index, column)].append(value)
    
    worst = 0.0
    for (cluster_index, column), values in members.items():
        centroid_value = model.get_centroid(cluster_index).get(column)
        deviation = abs(centroid_value - float(np.mean(values)))
        if math.isnan(deviation):
            return math.nan
        worst = max(worst, deviation)
    return worst
