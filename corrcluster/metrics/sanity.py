"""Sanity checks for matrices and fitted models."""

from typing import Dict

from ..clustering import KMeansModel
from ..sparse import SparseRowStore


def run_sanity_checks(
    matrix: SparseRowStore = None,
    model: KMeansModel = None,
) -> Dict[str, bool]:
    """
    Run sanity checks on clustering inputs and state.
    
    Catches common issues like:
    - Rows whose columns are not strictly increasing
    - Model and matrix disagreeing on row count
    - Centroids poisoned with NaN
    - No row with enough entries to be assigned
    
    Args:
        matrix: Data rows.
        model: Clustering model.
        
    Returns:
        Dict of check names to pass/fail booleans.
    """
    checks = {}
    
    if matrix is not None:
        checks["matrix_not_empty"] = matrix.row_count > 0
        checks["rows_sorted"] = all(
            all(row[i].column < row[i + 1].column for i in range(len(row) - 1))
            for row in matrix
        )
    
    if model is not None:
        checks["centroid_count_matches"] = model.centroids.row_count == model.cluster_count
        checks["no_dead_centroids"] = len(model.dead_centroids()) == 0
        if model.steps_taken > 0:
            checks["some_rows_assigned"] = any(c is not None for c in model.assignments)
    
    if matrix is not None and model is not None:
        checks["row_count_matches"] = matrix.row_count == model.row_count
        checks["columns_within_model"] = matrix.column_count <= model.column_count
        checks["rows_with_enough_entries"] = any(
            len(row) >= model.min_row_entries for row in matrix
        )
    
    checks["all_passed"] = all(checks.values())
    
    return checks
