"""Drive a clustering model to convergence."""

import time
from datetime import datetime
from typing import Any, Dict, Optional, Union

from loguru import logger

from ..clustering import KMeansModel
from ..config.schema import KMeansConfig, config_from_dict
from ..core.random import set_seed, get_rng
from ..core.types import ClusteringResult
from ..sparse import SparseRowStore


def run_clustering(
    matrix: SparseRowStore,
    config: Union[KMeansConfig, Dict[str, Any]],
    column_count: Optional[int] = None,
    random_source=None,
) -> ClusteringResult:
    """
    Cluster the rows of a matrix.
    
    Steps the model until a step changes no assignment or max_steps is
    reached.
    
    Args:
        matrix: Data rows.
        config: KMeansConfig or an equivalent dict.
        column_count: Column space size; defaults to the matrix's.
        random_source: Centroid seeding source; defaults to the global
            generator reseeded with config.seed.
        
    Returns:
        ClusteringResult with final assignments and centroids.
    """
    if isinstance(config, dict):
        config = config_from_dict(config)
    
    if random_source is None:
        set_seed(config.seed)
        random_source = get_rng()
    
    n_cols = matrix.column_count if column_count is None else column_count
    start_time = time.time()
    
    logger.info(
        f"Clustering {matrix.row_count} rows x {n_cols} columns "
        f"into {config.cluster_count} clusters"
    )
    
    model = KMeansModel(
        matrix.row_count,
        n_cols,
        config.cluster_count,
        random_source=random_source,
        low=config.init_low,
        high=config.init_high,
        min_row_entries=config.min_row_entries,
        reseed_dead=config.reseed_dead,
    )
    
    changed_history = []
    error_history = []
    converged = False
    
    for _ in range(config.max_steps):
        changed = model.step(matrix)
        changed_history.append(changed)
        error_history.append(model.last_error)
        if changed == 0:
            converged = True
            break
    
    elapsed = time.time() - start_time
    
    if converged:
        logger.info(f"Converged after {model.steps_taken} steps ({elapsed:.2f}s)")
    elif changed_history:
        logger.warning(
            f"No fixed point after {config.max_steps} steps, "
            f"last step changed {changed_history[-1]} rows"
        )
    
    dead = model.dead_centroids()
    if dead:
        logger.warning(f"Centroids {dead} hold NaN cells and cannot attract rows sharing them")
    
    return ClusteringResult(
        assignments=model.assignments,
        centroids=model.centroid_array(),
        steps=model.steps_taken,
        converged=converged,
        changed_history=changed_history,
        error_history=error_history,
        metadata={
            "config": config.to_dict(),
            "column_count": n_cols,
            "dead_centroids": dead,
            "elapsed_seconds": elapsed,
            "timestamp": datetime.now().isoformat(),
        },
    )
