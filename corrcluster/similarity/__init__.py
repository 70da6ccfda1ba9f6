"""Similarity functions over sparse rows."""

from .correlation import pearson, pearson_distance, DENOMINATOR_EPSILON
