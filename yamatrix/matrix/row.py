"""
MatrixRow: live, bounds-checked view of one matrix row.

Indexing a matrix with a single row index returns a MatrixRow. The row
reads and writes through to the owning matrix, so ``m[i][j] = v`` updates
``m``. Column indices are checked against ``[0, cols)``; negative indices
are rejected rather than wrapped.

The view resolves the owner's storage on every access, so it never
outlives a whole-instance assignment or a transfer: after ``m.assign(...)``
it sees the new contents, after ``m.transfer()`` it raises MovedFromError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

import numpy as np
from numpy.typing import NDArray

from yamatrix.core.validation import check_element_value, check_index

if TYPE_CHECKING:
    from yamatrix.matrix.matrix import Matrix


class MatrixRow:
    """Mutable view of row ``index`` of ``owner``."""

    __slots__ = ('_owner', '_index')

    def __init__(self, owner: Matrix, index: int):
        self._owner = owner
        self._index = index

    def _storage(self) -> NDArray[Any]:
        data = self._owner._live()
        # owner may have been reassigned to a shape without this row
        check_index(self._index, data.shape[0], 'row')
        return data[self._index]

    @property
    def index(self) -> int:
        """Row index within the owning matrix."""
        return self._index

    def __len__(self) -> int:
        return self._storage().shape[0]

    def __getitem__(self, col: Any) -> np.number:
        row = self._storage()
        j = check_index(col, row.shape[0], 'column')
        return row[j]

    def __setitem__(self, col: Any, value: Any) -> None:
        row = self._storage()
        j = check_index(col, row.shape[0], 'column')
        check_element_value(value, row.dtype, 'value')
        row[j] = value

    def __iter__(self) -> Iterator[np.number]:
        return iter(self._storage().copy())

    def values(self) -> NDArray[Any]:
        """Read-only ndarray view of the row."""
        view = self._storage().view()
        view.flags.writeable = False
        return view

    def to_list(self) -> list:
        return self._storage().tolist()

    def __repr__(self) -> str:
        return f"MatrixRow(index={self._index}, values={self.to_list()})"
