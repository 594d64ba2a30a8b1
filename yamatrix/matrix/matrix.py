"""
Matrix: dense row-major 2-D container over a numeric element type.

Storage is a single numpy array of shape (rows, cols) whose dtype is the
element type. Only integer and floating-point dtypes are accepted.

Operations:
    add / +           element-wise sum of two equally shaped matrices
    transpose / T     new cols x rows matrix
    equals / ==       exact element-wise equality of equally shaped matrices
    m[i], m[i][j]     bounds-checked row view and element access
    m[i, j]           bounds-checked element access
    assign            whole-instance deep-copy assignment
    copy / transfer   deep copy, and ownership transfer that invalidates the source
    render / str      space-separated text, one line per row

Caller-contract violations raise (see yamatrix.core.exceptions) before
anything is computed or mutated.
"""

from __future__ import annotations

import sys
import warnings
from typing import Any, Generic, Iterator, TextIO, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from yamatrix.core.dtypes import (
    DEFAULT_DTYPE,
    as_element_dtype,
    common_dtype,
    infer_dtype,
)
from yamatrix.core.exceptions import MovedFromError, ValidationError
from yamatrix.core.validation import (
    check_array,
    check_dimension,
    check_element_value,
    check_index,
    check_same_shape,
)
from yamatrix.matrix._render import render_rows, write_rows
from yamatrix.matrix.row import MatrixRow

N = TypeVar('N', np.integer, np.floating)  # Element type


class Matrix(Generic[N]):
    """
    Dense rows x cols matrix of integral or floating-point elements.

    Construction:
        Matrix(rows, cols)              every element zero, dtype float64
        Matrix(rows, cols, init_val)    every element init_val, dtype inferred
        Matrix(rows, cols, dtype=...)   explicit element type
        Matrix.from_rows([[1, 2], [3, 4]])

    The shape is fixed for the lifetime of the instance; only ``assign``
    replaces it, together with all elements.

    Examples:
        >>> a = Matrix(2, 2, 4)
        >>> b = Matrix(2, 2, 8)
        >>> (a + b).render()
        '12 12 \\n12 12 \\n'
    """

    __slots__ = ('_data', '__weakref__')

    def __init__(
        self,
        rows: int,
        cols: int,
        init_val: int | float | N | None = None,
        *,
        dtype: Any = None,
    ):
        n_rows = check_dimension(rows, 'rows')
        n_cols = check_dimension(cols, 'cols')

        if dtype is not None:
            element_dtype = as_element_dtype(dtype)
        elif init_val is not None:
            element_dtype = infer_dtype(init_val)
        else:
            element_dtype = DEFAULT_DTYPE

        if init_val is None:
            self._data = np.zeros((n_rows, n_cols), dtype=element_dtype)
        else:
            check_element_value(init_val, element_dtype, 'init_val')
            self._data = np.full((n_rows, n_cols), init_val, dtype=element_dtype)

    @classmethod
    def _wrap(cls, data: NDArray[Any]) -> Matrix:
        """Adopt ``data`` as storage without copying or validating."""
        m = cls.__new__(cls)
        m._data = data
        return m

    @classmethod
    def from_rows(cls, values: ArrayLike, *, dtype: Any = None) -> Matrix:
        """
        Build a matrix from nested row data.

        Parameters
        ----------
        values : array-like
            Nested sequence of equal-length rows, or any 2-D array-like.
            The data is copied.
        dtype : dtype-like, optional
            Element type. Must be reachable from the data's own dtype by a
            safe cast. Defaults to the data's dtype.
        """
        return cls._wrap(check_array(values, 'values', dtype))

    def _live(self) -> NDArray[Any]:
        data = self._data
        if data is None:
            raise MovedFromError(
                "matrix storage was transferred away; the source must not be used"
            )
        return data

    # ── Dimensions ───────────────────────────────────────────────────

    def rows(self) -> int:
        """Number of rows."""
        return self._live().shape[0]

    def cols(self) -> int:
        """Number of columns."""
        return self._live().shape[1]

    def columns(self) -> int:
        """Number of columns (same as ``cols()``)."""
        return self.cols()

    @property
    def shape(self) -> tuple[int, int]:
        return self._live().shape

    @property
    def dtype(self) -> np.dtype:
        return self._live().dtype

    def __len__(self) -> int:
        return self.rows()

    # ── Copy and ownership ───────────────────────────────────────────

    def copy(self) -> Matrix:
        """Independent deep copy."""
        return self._wrap(self._live().copy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        result = self.copy()
        memo[id(self)] = result
        return result

    def transfer(self) -> Matrix:
        """
        Move this matrix's storage into a new instance.

        No elements are copied. Afterwards this instance is invalid: every
        operation on it raises MovedFromError until it is given new
        contents with ``assign``.
        """
        data = self._live()
        self._data = None
        return self._wrap(data)

    def assign(self, other: Matrix) -> Matrix:
        """
        Replace shape, element type and every element with a deep copy of
        ``other``. Assigning a matrix to itself leaves it unchanged.

        Returns:
            self
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"other: expected Matrix, got {type(other).__name__}"
            )
        if other is self:
            return self
        self._data = other._live().copy()
        return self

    # ── Transpose ────────────────────────────────────────────────────

    def transpose(self) -> Matrix:
        """New cols x rows matrix with ``t[j][i] == self[i][j]``."""
        return self._wrap(self._live().T.copy())

    @property
    def T(self) -> Matrix:
        """Same as ``transpose()``."""
        return self.transpose()

    # ── Addition ─────────────────────────────────────────────────────

    def add(self, other: Matrix) -> Matrix:
        """
        Element-wise sum of two matrices of identical shape.

        Args:
            other: Right-hand operand

        Returns:
            New matrix with ``result[i][j] == self[i][j] + other[i][j]``.
            The element type is the lossless common type of both operands
            (see ``yamatrix.core.dtypes.common_dtype``).

        Raises:
            ValidationError: If other is not a Matrix
            DimensionError: If the shapes differ
            ElementTypeError: If the element types mix integer and floating,
                or only share a type that would round values

        Integer results wrap on overflow the way numpy integer arithmetic
        does; a RuntimeWarning reports how many elements overflowed.
        """
        return self._add(other, stacklevel=3)

    def _add(self, other: Matrix, stacklevel: int) -> Matrix:
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"other: expected Matrix, got {type(other).__name__}"
            )
        left = self._live()
        right = other._live()
        check_same_shape(left.shape, right.shape, 'add')

        result_dtype = common_dtype(left.dtype, right.dtype, 'add')
        x = left.astype(result_dtype, copy=False)
        y = right.astype(result_dtype, copy=False)
        result = np.add(x, y, dtype=result_dtype)

        if result_dtype.kind in 'iu':
            n_overflow = _count_integer_overflow(x, y, result)
            if n_overflow:
                warnings.warn(
                    f"Integer overflow in add: {n_overflow} element(s) wrapped "
                    f"around in {result_dtype}.",
                    RuntimeWarning,
                    stacklevel=stacklevel,
                )

        return self._wrap(result)

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._add(other, stacklevel=3)

    # ── Equality ─────────────────────────────────────────────────────

    def equals(self, other: Matrix) -> bool:
        """
        True iff every pair of corresponding elements compares equal.

        Comparison is exact (no floating-point tolerance), so NaN never
        equals NaN. Operands must share a lossless common element type, as
        for ``add``; an int64 matrix is never compared with a float64 one.

        Raises:
            ValidationError: If other is not a Matrix
            DimensionError: If the shapes differ
            ElementTypeError: If the element types have no lossless common type
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"other: expected Matrix, got {type(other).__name__}"
            )
        left = self._live()
        right = other._live()
        check_same_shape(left.shape, right.shape, 'equals')
        common_dtype(left.dtype, right.dtype, 'equals')
        return bool(np.array_equal(left, right))

    def not_equals(self, other: Matrix) -> bool:
        """Negation of ``equals``."""
        return not self.equals(other)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.not_equals(other)

    __hash__ = None  # mutable

    # ── Indexing ─────────────────────────────────────────────────────

    def __getitem__(self, key: Any) -> MatrixRow | N:
        data = self._live()
        if isinstance(key, tuple):
            i, j = self._element_index(key, data)
            return data[i, j]
        i = check_index(key, data.shape[0], 'row')
        return MatrixRow(self, i)

    def __setitem__(self, key: Any, value: Any) -> None:
        data = self._live()
        if not isinstance(key, tuple):
            raise ValidationError(
                "rows cannot be replaced; assign elements with m[i][j] = v or m[i, j] = v"
            )
        i, j = self._element_index(key, data)
        check_element_value(value, data.dtype, 'value')
        data[i, j] = value

    @staticmethod
    def _element_index(key: tuple, data: NDArray[Any]) -> tuple[int, int]:
        if len(key) != 2:
            raise ValidationError(
                f"element index must be (row, column), got {len(key)} indices"
            )
        i = check_index(key[0], data.shape[0], 'row')
        j = check_index(key[1], data.shape[1], 'column')
        return i, j

    def __iter__(self) -> Iterator[MatrixRow]:
        for i in range(self.rows()):
            yield MatrixRow(self, i)

    def row_values(self, index: int) -> NDArray[Any]:
        """Read-only ndarray view of row ``index``."""
        data = self._live()
        i = check_index(index, data.shape[0], 'row')
        view = data[i].view()
        view.flags.writeable = False
        return view

    # ── Conversion and rendering ─────────────────────────────────────

    def to_numpy(self) -> NDArray[Any]:
        """Independent ndarray copy of the elements."""
        return self._live().copy()

    def to_list(self) -> list[list]:
        return self._live().tolist()

    def render(self) -> str:
        """One line per row, each element followed by a single space."""
        return render_rows(self._live())

    def write_to(self, stream: TextIO | None = None) -> TextIO:
        """Write ``render()`` to ``stream`` (default: stdout)."""
        return write_rows(self._live(), sys.stdout if stream is None else stream)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if self._data is None:
            return "Matrix(<moved-from>)"
        n_rows, n_cols = self._data.shape
        return f"Matrix(rows={n_rows}, cols={n_cols}, dtype={self._data.dtype})"


def _count_integer_overflow(
    x: NDArray[np.integer[Any]],
    y: NDArray[np.integer[Any]],
    result: NDArray[np.integer[Any]],
) -> int:
    """Number of positions where ``x + y`` wrapped around in result's dtype."""
    if result.dtype.kind == 'u':
        return int(np.count_nonzero(result < x))
    # signed: both operands share a sign that the result does not have
    return int(np.count_nonzero(((x ^ result) & (y ^ result)) < 0))
