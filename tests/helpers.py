"""Helpers shared by the test modules."""

from corrcluster.sparse import SparseRowStore


def build_store(rows, column_count_hint=None):
    """Store with one row per list of (column, value) cells."""
    store = SparseRowStore(column_count_hint=column_count_hint)
    for cells in rows:
        store.begin_row()
        for column, value in cells:
            store.append(column, value)
    store.finalize()
    return store
