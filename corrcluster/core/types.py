"""Core data types for sparse profiles and clustering results."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional

import numpy as np


UNASSIGNED = None


class Entry(NamedTuple):
    """One observed cell: a column index and its value."""

    column: int
    value: float


@dataclass
class ClusteringResult:
    """
    Outcome of a driven clustering run.

    Attributes:
        assignments: Cluster index per data row, or None when unassigned.
        centroids: Dense centroid matrix of shape (cluster_count, column_count).
        steps: Number of refinement steps applied.
        converged: True when the last step changed no assignment.
        changed_history: Changed-assignment count returned by each step.
        error_history: Mean squared assignment distance after each step.
        metadata: Free-form run information.
    """

    assignments: List[Optional[int]]
    centroids: np.ndarray
    steps: int = 0
    converged: bool = False
    changed_history: List[int] = field(default_factory=list)
    error_history: List[float] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def cluster_count(self) -> int:
        return int(self.centroids.shape[0])

    def members(self, cluster_index: int) -> List[int]:
        """Row indices currently assigned to a cluster."""
        return [i for i, c in enumerate(self.assignments) if c == cluster_index]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "assignments": list(self.assignments),
            "centroids": self.centroids.tolist(),
            "steps": self.steps,
            "converged": self.converged,
            "changed_history": list(self.changed_history),
            "error_history": [float(e) for e in self.error_history],
            "metadata": self.metadata,
        }
