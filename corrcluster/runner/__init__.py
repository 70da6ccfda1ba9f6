"""Clustering run drivers."""

from .run_one import run_clustering
