"""Tests for the sparse row store."""

import math

import numpy as np
import pytest

from corrcluster.core.types import Entry
from corrcluster.sparse import SparseRowStore


def test_rows_keep_entries_in_order(critics):
    assert critics.row_count == 8
    assert len(critics) == 8
    assert critics.column_count == 6
    assert critics.nnz == 6 + 6 + 4 + 5 + 6 + 5 + 3 + 1
    
    toby = critics.row(6)
    assert len(toby) == 3
    assert list(toby) == [Entry(1, 4.5), Entry(3, 4.0), Entry(4, 1.0)]
    assert toby[0] == Entry(1, 4.5)
    assert toby[-1].column == 4
    assert toby.columns.tolist() == [1, 3, 4]
    assert toby.values.tolist() == [4.5, 4.0, 1.0]
    assert toby.get(3) == 4.0
    assert toby.get(2) is None
    assert toby.get(2, 0.0) == 0.0
    assert toby.to_dict() == {1: 4.5, 3: 4.0, 4: 1.0}


def test_out_of_range_row_raises(critics):
    with pytest.raises(IndexError):
        critics.row(8)
    with pytest.raises(IndexError):
        critics.mutable_row(100)
    with pytest.raises(IndexError):
        critics.row(-1)
    with pytest.raises(IndexError):
        critics.row(0)[6]


def test_trailing_begin_row_matches_finalize():
    explicit = SparseRowStore()
    explicit.begin_row()
    explicit.append(0, 1.0)
    explicit.begin_row()
    explicit.append(2, 3.0)
    explicit.finalize()
    
    idiom = SparseRowStore()
    idiom.begin_row()
    idiom.append(0, 1.0)
    idiom.begin_row()
    idiom.append(2, 3.0)
    idiom.begin_row()
    
    assert explicit.row_count == idiom.row_count == 2
    assert idiom.row(1).to_dict() == {2: 3.0}


def test_view_of_open_row_sees_later_appends():
    store = SparseRowStore()
    store.begin_row()
    store.append(0, 1.0)
    view = store.row(0)
    store.append(2, 3.0)
    assert len(view) == 2
    assert view.to_dict() == {0: 1.0, 2: 3.0}
    
    store.begin_row()
    store.append(1, 5.0)
    assert len(view) == 2
    assert store.row(1).to_dict() == {1: 5.0}


def test_empty_rows_in_the_middle_are_kept():
    store = SparseRowStore()
    store.begin_row()
    store.append(1, 1.0)
    store.begin_row()
    store.begin_row()
    store.append(0, 2.0)
    store.finalize()
    
    assert store.row_count == 3
    assert len(store.row(1)) == 0
    assert store.row(2).to_dict() == {0: 2.0}
    
    kept = SparseRowStore()
    kept.begin_row()
    kept.finalize(keep_empty=True)
    assert kept.row_count == 1


def test_append_requires_open_row():
    store = SparseRowStore()
    with pytest.raises(RuntimeError):
        store.append(0, 1.0)


def test_non_finite_values_are_stored():
    store = SparseRowStore()
    store.begin_row()
    store.append(0, float("nan"))
    store.append(1, float("inf"))
    store.finalize()
    
    row = store.row(0)
    assert math.isnan(row[0].value)
    assert row[1].value == math.inf


def test_mutable_row_updates_values_only(critics):
    row = critics.mutable_row(2)
    row.set_value(0, 1.0)
    row[1] = 2.0
    assert critics.row(2).to_dict() == {0: 1.0, 1: 2.0, 3: 3.5, 5: 4.0}
    
    row.fill(0.0)
    assert critics.row(2).columns.tolist() == [0, 1, 3, 5]
    assert critics.row(2).values.tolist() == [0.0, 0.0, 0.0, 0.0]
    assert critics.row(3).to_dict()[1] == 3.5


def test_dense_conversion_treats_nan_as_missing():
    dense = np.array([
        [1.0, np.nan, 3.0],
        [np.nan, np.nan, np.nan],
        [4.0, 5.0, np.nan],
    ])
    store = SparseRowStore.from_dense(dense)
    
    assert store.row_count == 3
    assert store.row(0).to_dict() == {0: 1.0, 2: 3.0}
    assert len(store.row(1)) == 0
    assert store.column_count == 3
    np.testing.assert_array_equal(store.to_dense(), dense)
    
    filled = store.to_dense(fill=0.0)
    assert filled[1].tolist() == [0.0, 0.0, 0.0]
