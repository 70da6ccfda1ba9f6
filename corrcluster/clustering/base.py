"""Base clusterer interface."""

from abc import ABC, abstractmethod

from ..sparse import SparseRowStore


class BaseClusterer(ABC):
    """
    Abstract base class for iterative clustering of sparse rows.

    A clusterer is refined in place by repeated step() calls; the caller
    decides when to stop.
    """
    
    def __init__(self, name: str, **kwargs):
        self.name = name
        self.params = kwargs
    
    @abstractmethod
    def step(self, matrix: SparseRowStore) -> int:
        """
        Apply one refinement step.
        
        Args:
            matrix: Data rows, indexed like the clusterer's assignment table.
            
        Returns:
            Number of rows whose assignment changed. 0 means a fixed point.
        """
        raise NotImplementedError
