"""
Row-oriented sparse matrix.

Rows are built one at a time: begin_row() opens a row and append() adds
entries to it in increasing column order. Completed rows are randomly
accessible by index; values may be rewritten in place but the column set
of a row never changes once written.
"""

from bisect import bisect_left
from typing import Dict, Iterator, List, Optional

import numpy as np

from ..core.types import Entry


class Row:
    """Read-only view of one row of a SparseRowStore."""

    def __init__(self, store: "SparseRowStore", index: int):
        self._store = store
        self._index = index
        self._start = store._indptr[index]

    @property
    def _end(self) -> int:
        # Rows still open keep growing until the next begin_row().
        return self._store._row_end(self._index)

    def __len__(self) -> int:
        return self._end - self._start

    def __iter__(self) -> Iterator[Entry]:
        columns = self._store._columns
        values = self._store._values
        for i in range(self._start, self._end):
            yield Entry(columns[i], values[i])

    def __getitem__(self, position: int) -> Entry:
        i = self._offset(position)
        return Entry(self._store._columns[i], self._store._values[i])

    def __repr__(self) -> str:
        cells = ", ".join(f"{e.column}: {e.value}" for e in self)
        return f"{type(self).__name__}({{{cells}}})"

    def _offset(self, position: int) -> int:
        if position < 0:
            position += len(self)
        if not 0 <= position < len(self):
            raise IndexError(f"position {position} out of range for row of length {len(self)}")
        return self._start + position

    @property
    def columns(self) -> np.ndarray:
        return np.asarray(self._store._columns[self._start:self._end], dtype=np.int64)

    @property
    def values(self) -> np.ndarray:
        return np.asarray(self._store._values[self._start:self._end], dtype=np.float64)

    def get(self, column: int, default: Optional[float] = None) -> Optional[float]:
        """Value stored at a column, or default when the column is absent."""
        columns = self._store._columns
        i = bisect_left(columns, column, self._start, self._end)
        if i < self._end and columns[i] == column:
            return self._store._values[i]
        return default

    def to_dict(self) -> Dict[int, float]:
        return {e.column: e.value for e in self}


class MutableRow(Row):
    """Row view that allows value updates but no structural edits."""

    def set_value(self, position: int, value: float):
        self._store._values[self._offset(position)] = float(value)

    def __setitem__(self, position: int, value: float):
        self.set_value(position, value)

    def fill(self, value: float):
        values = self._store._values
        for i in range(self._start, self._end):
            values[i] = float(value)


class SparseRowStore:
    """
    Compressed sparse row storage built incrementally.

    Usage:
        store = SparseRowStore()
        store.begin_row()
        store.append(0, 2.5)
        store.append(3, 4.0)
        store.begin_row()
        store.append(1, 1.0)
        store.finalize()
        store.row(0).to_dict()  # {0: 2.5, 3: 4.0}

    Columns must be appended in increasing order within a row; this is
    not checked. An open row that never received an entry is not counted
    when it is the last one, so closing with either finalize() or a
    trailing begin_row() yields the same row count.
    """

    def __init__(self, column_count_hint: Optional[int] = None):
        self.column_count_hint = column_count_hint
        self._columns: List[int] = []
        self._values: List[float] = []
        self._indptr: List[int] = [0]
        self._open = False
        self._max_column = -1

    def begin_row(self):
        """Close the current row, if any, and open a new empty one."""
        if self._open:
            self._indptr.append(len(self._values))
        self._open = True

    def append(self, column: int, value: float):
        """Add an entry to the open row."""
        if not self._open:
            raise RuntimeError("append() called before begin_row()")
        column = int(column)
        self._columns.append(column)
        self._values.append(float(value))
        if column > self._max_column:
            self._max_column = column

    def finalize(self, keep_empty: bool = False):
        """Close the open row. A trailing row without entries is dropped unless keep_empty."""
        if self._open and (keep_empty or len(self._values) > self._indptr[-1]):
            self._indptr.append(len(self._values))
        self._open = False

    def _open_has_entries(self) -> bool:
        return self._open and len(self._values) > self._indptr[-1]

    @property
    def row_count(self) -> int:
        return len(self._indptr) - 1 + int(self._open_has_entries())

    def __len__(self) -> int:
        return self.row_count

    @property
    def column_count(self) -> int:
        if self.column_count_hint is not None:
            return max(self.column_count_hint, self._max_column + 1)
        return self._max_column + 1

    @property
    def nnz(self) -> int:
        return len(self._values)

    def _check(self, index: int):
        if index < 0 or index >= self.row_count:
            raise IndexError(f"row {index} out of range for store with {self.row_count} rows")

    def _row_end(self, index: int) -> int:
        if index + 1 < len(self._indptr):
            return self._indptr[index + 1]
        return len(self._values)

    def row(self, index: int) -> Row:
        self._check(index)
        return Row(self, index)

    def mutable_row(self, index: int) -> MutableRow:
        self._check(index)
        return MutableRow(self, index)

    def __iter__(self) -> Iterator[Row]:
        for i in range(self.row_count):
            yield self.row(i)

    def to_dense(self, fill: float = np.nan, column_count: Optional[int] = None) -> np.ndarray:
        """Dense copy with absent cells set to fill."""
        n_cols = self.column_count if column_count is None else column_count
        dense = np.full((self.row_count, n_cols), fill, dtype=np.float64)
        for i, row in enumerate(self):
            for column, value in row:
                dense[i, column] = value
        return dense

    @classmethod
    def from_dense(cls, array, skip_nan: bool = True) -> "SparseRowStore":
        """
        Build a store from a 2-D array.

        NaN cells are treated as missing and left out of the row unless
        skip_nan is False.
        """
        array = np.asarray(array, dtype=np.float64)
        store = cls(column_count_hint=array.shape[1])
        for dense_row in array:
            store.begin_row()
            for column, value in enumerate(dense_row):
                if skip_nan and np.isnan(value):
                    continue
                store.append(column, value)
        store.finalize(keep_empty=True)
        return store
