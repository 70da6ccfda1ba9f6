"""Clustering algorithms for sparse profiles."""

from .base import BaseClusterer
from .kmeans import KMeansModel
