"""Build sparse matrices from rating tables."""

from typing import Any, Dict, Hashable, List, Tuple

import pandas as pd

from ..sparse import SparseRowStore


def from_ratings_frame(
    frame: pd.DataFrame,
    row_field: str,
    column_field: str,
    value_field: str,
) -> Tuple[SparseRowStore, List[Any], List[Any]]:
    """
    Build a SparseRowStore from long-format ratings.
    
    Each distinct row_field value becomes a row and each distinct
    column_field value a column, both in order of first appearance.
    Missing (NaN) ratings are dropped, never stored.
    
    Args:
        frame: One rating per record.
        row_field: Column naming the rater.
        column_field: Column naming the rated item.
        value_field: Column holding the rating.
        
    Returns:
        Tuple of (store, row_labels, column_labels).
    """
    for name in (row_field, column_field, value_field):
        if name not in frame.columns:
            raise KeyError(f"Field '{name}' not in frame. Available: {list(frame.columns)}")
    
    row_labels = list(pd.unique(frame[row_field]))
    column_labels = list(pd.unique(frame[column_field]))
    column_index = {label: i for i, label in enumerate(column_labels)}
    
    present = frame.dropna(subset=[value_field])
    grouped = {key: group for key, group in present.groupby(row_field, sort=False)}
    
    store = SparseRowStore(column_count_hint=len(column_labels))
    for label in row_labels:
        store.begin_row()
        if label not in grouped:
            continue
        group = grouped[label]
        cells = {}
        for item, value in zip(group[column_field], group[value_field]):
            # Later duplicates overwrite earlier ones.
            cells[column_index[item]] = float(value)
        for column in sorted(cells):
            store.append(column, cells[column])
    store.finalize(keep_empty=True)
    
    return store, row_labels, column_labels


def from_mapping(
    ratings: Dict[Hashable, Dict[Hashable, float]]
) -> Tuple[SparseRowStore, List[Any], List[Any]]:
    """Same as from_ratings_frame for nested {row: {column: value}} dicts."""
    column_labels = []
    column_index = {}
    for cells in ratings.values():
        for item in cells:
            if item not in column_index:
                column_index[item] = len(column_labels)
                column_labels.append(item)
    
    store = SparseRowStore(column_count_hint=len(column_labels))
    for cells in ratings.values():
        store.begin_row()
        present = {
            column_index[item]: float(value)
            for item, value in cells.items()
            if not pd.isna(value)
        }
        for column in sorted(present):
            store.append(column, present[column])
    store.finalize(keep_empty=True)
    
    return store, list(ratings.keys()), column_labels
