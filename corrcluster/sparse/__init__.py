"""Sparse row storage."""

from .csr import SparseRowStore, Row, MutableRow
