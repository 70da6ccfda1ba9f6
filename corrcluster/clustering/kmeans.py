"""K-means refinement using Pearson correlation distance."""

import math
from typing import List, Optional, Tuple

import numpy as np
from loguru import logger

from .base import BaseClusterer
from ..core.random import get_rng
from ..core.types import UNASSIGNED
from ..similarity import pearson
from ..sparse import Row, SparseRowStore


class KMeansModel(BaseClusterer):
    """
    K-means over sparse rows with distance 1 - pearson(row, centroid).

    Centroids are dense rows seeded uniformly from [low, high). Each step
    assigns every row with at least min_row_entries entries to its nearest
    centroid and then moves each centroid to the per-column mean of its
    members. Rows with fewer entries keep whatever assignment they had.

    A centroid cell with no contributing row becomes NaN, and a centroid
    holding NaN is never picked as nearest for rows sharing that column.
    Pass reseed_dead=True to redraw such cells from the random source.
    """
    
    def __init__(
        self,
        row_count: int,
        column_count: int,
        cluster_count: int,
        random_source=None,
        low: float = 0.0,
        high: float = 100.0,
        min_row_entries: int = 3,
        reseed_dead: bool = False,
        **kwargs
    ):
        """
        Initialize the model with random centroids.
        
        Args:
            row_count: Number of data rows the model will assign.
            column_count: Number of columns in the data space.
            cluster_count: Number of centroids.
            random_source: Object with uniform(low, high); defaults to the global generator.
            low: Lower bound for seeded centroid values.
            high: Upper bound (exclusive) for seeded centroid values.
            min_row_entries: Rows with fewer entries are skipped during assignment.
            reseed_dead: Redraw centroid cells that receive no contribution.
        """
        super().__init__("kmeans", **kwargs)
        self.row_count = row_count
        self.column_count = column_count
        self.cluster_count = cluster_count
        self.random_source = random_source if random_source is not None else get_rng()
        self.low = low
        self.high = high
        self.min_row_entries = min_row_entries
        self.reseed_dead = reseed_dead
        self.last_error = math.nan
        self.steps_taken = 0
        
        self.centroids = SparseRowStore(column_count_hint=column_count)
        for _ in range(cluster_count):
            self.centroids.begin_row()
            for column in range(column_count):
                self.centroids.append(column, self._draw())
        self.centroids.finalize()
        
        self.row_clusters: List[Optional[int]] = [UNASSIGNED] * row_count
    
    def _draw(self) -> float:
        return float(self.random_source.uniform(self.low, self.high))
    
    def get_cluster(self, row_index: int) -> Optional[int]:
        """Cluster index of a data row, or None when unassigned."""
        return self.row_clusters[row_index]
    
    @property
    def assignments(self) -> List[Optional[int]]:
        return list(self.row_clusters)
    
    def get_centroid(self, index: int) -> Row:
        return self.centroids.row(index)
    
    def centroid_array(self) -> np.ndarray:
        """Dense (cluster_count, column_count) copy of the centroids."""
        return self.centroids.to_dense(column_count=self.column_count)
    
    def dead_centroids(self) -> List[int]:
        """Indices of centroids with at least one non-finite cell."""
        return [
            i for i in range(self.cluster_count)
            if not all(math.isfinite(e.value) for e in self.centroids.row(i))
        ]
    
    def nearest_centroid(self, row: Row) -> Tuple[int, float]:
        """
        Find the centroid closest to a row.
        
        Ties go to the lowest index. NaN distances never win, so when every
        distance is NaN the result is (0, inf).
        """
        min_distance = math.inf
        cluster_index = 0
        
        for i in range(self.cluster_count):
            distance = 1.0 - pearson(row, self.centroids.row(i))
            if distance < min_distance:
                min_distance = distance
                cluster_index = i
        
        return cluster_index, min_distance
    
    def step(self, matrix: SparseRowStore) -> int:
        """
        Assign rows to centroids, then recompute centroids as cluster means.
        
        Args:
            matrix: Data rows; must have row_count rows and columns below column_count.
            
        Returns:
            Number of rows whose assignment changed in this step.
        """
        changed = 0
        assigned = 0
        error_sum = 0.0
        
        for row_index in range(self.row_count):
            row = matrix.row(row_index)
            if len(row) < self.min_row_entries:
                continue
            cluster_index, distance = self.nearest_centroid(row)
            if self.row_clusters[row_index] != cluster_index:
                changed += 1
            self.row_clusters[row_index] = cluster_index
            assigned += 1
            error_sum += distance * distance
        
        for cluster_index in range(self.cluster_count):
            self.centroids.mutable_row(cluster_index).fill(0.0)
        
        sums = np.zeros((self.cluster_count, self.column_count), dtype=np.float64)
        value_count = np.zeros((self.cluster_count, self.column_count), dtype=np.int64)
        for row_index in range(self.row_count):
            cluster_index = self.row_clusters[row_index]
            if cluster_index is None:
                continue
            for column, value in matrix.row(row_index):
                value_count[cluster_index, column] += 1
                sums[cluster_index, column] += value
        
        with np.errstate(divide="ignore", invalid="ignore"):
            means = sums / value_count
        
        starved = 0
        for cluster_index in range(self.cluster_count):
            centroid = self.centroids.mutable_row(cluster_index)
            for position, entry in enumerate(centroid):
                if value_count[cluster_index, entry.column] == 0:
                    starved += 1
                    if self.reseed_dead:
                        centroid[position] = self._draw()
                        continue
                centroid[position] = means[cluster_index, entry.column]
        
        self.last_error = error_sum / assigned if assigned else math.nan
        self.steps_taken += 1
        
        logger.debug(
            f"Step {self.steps_taken}: assigned={assigned} changed={changed} "
            f"error={self.last_error:.6f} starved_cells={starved}"
        )
        if starved and not self.reseed_dead:
            logger.debug(f"{starved} centroid cells received no rows and are now NaN")
        
        return changed
