"""
Input validation utilities for yamatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Design principles:
    - No silent type coercion: a value that does not fit the element type
      exactly is rejected, never truncated or wrapped
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from yamatrix.core.dtypes import as_element_dtype
from yamatrix.core.exceptions import (
    DimensionError,
    ElementTypeError,
    IndexOutOfRangeError,
    ValidationError,
)


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected an integer, got bool {value!r}")
    try:
        return operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        ) from e


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a matrix dimension (row or column count).

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        ValidationError: If value is not an integer
        DimensionError: If value is negative
    """
    n = _as_int(value, name)
    if n < 0:
        raise DimensionError(f"{name}: must be non-negative, got {n}")
    return n


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Validate a zero-based index against ``[0, bound)``.

    Negative indices are rejected rather than wrapped.

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index is outside the range
    """
    i = _as_int(index, f"{axis} index")
    if not 0 <= i < bound:
        raise IndexOutOfRangeError(
            f"{axis} index {i} out of range [0, {bound})",
            index=i,
            bound=bound,
            axis=axis,
        )
    return i


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands of an element-wise operation have equal shapes.

    Raises:
        DimensionError: If the shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: shape mismatch, {left[0]}x{left[1]} vs {right[0]}x{right[1]}",
            expected=left,
            actual=right,
        )


def check_element_value(value: Any, dtype: np.dtype, name: str = "value") -> None:
    """
    Verify a scalar can be stored in ``dtype`` without loss.

    Integers must lie inside the dtype's range, so 300 fits int16 but not
    int8 and -1 never fits an unsigned type. Floats only fit floating
    dtypes wide enough for their magnitude, so 4.0 never fits an integer
    type.

    Raises:
        ElementTypeError: If value is not numeric or does not fit dtype
    """
    if isinstance(value, (bool, np.bool_)):
        raise ElementTypeError(f"{name}: bool is not a numeric element", dtype=dtype)
    if not isinstance(value, (int, float, np.integer, np.floating)):
        raise ElementTypeError(
            f"{name}: {type(value).__name__} is not an integral or floating-point value",
            dtype=dtype,
        )

    if isinstance(value, (int, np.integer)):
        if dtype.kind in 'iu':
            info = np.iinfo(dtype)
            fits = int(info.min) <= int(value) <= int(info.max)
        else:
            fits = abs(int(value)) <= float(np.finfo(dtype).max)
    else:
        fits = dtype.kind == 'f' and np.can_cast(np.min_scalar_type(value), dtype)

    if not fits:
        raise ElementTypeError(
            f"{name}: {value!r} cannot be represented as {dtype}",
            dtype=dtype,
        )


def _values_fit(data: NDArray[Any], target: np.dtype) -> bool:
    """True if every element of ``data`` can be stored in ``target`` without loss."""
    if data.dtype.kind in 'iu':
        if data.size == 0:
            return True
        lo, hi = int(data.min()), int(data.max())
        if target.kind in 'iu':
            info = np.iinfo(target)
            return int(info.min) <= lo and hi <= int(info.max)
        limit = float(np.finfo(target).max)
        return -limit <= lo and hi <= limit

    # floating data never fits an integer type
    if target.kind != 'f':
        return False
    if np.can_cast(data.dtype, target):
        return True
    finite = data[np.isfinite(data)]
    if finite.size == 0:
        return True
    return bool(np.abs(finite).max() <= np.finfo(target).max)


def check_array(
    values: ArrayLike,
    name: str,
    dtype: Any = None,
) -> NDArray[Any]:
    """
    Validate and convert nested row data to a 2-D numeric array.

    Rejects ragged input, non-numeric data, and data holding values an
    explicitly requested dtype cannot represent. The check is per value,
    as in ``check_element_value``: int64 data of small integers fits int8,
    float data never fits an integer type. The returned array never
    aliases ``values``.

    Args:
        values: Nested sequence or 2-D array-like
        name: Parameter name for error messages
        dtype: Optional element type to convert to

    Returns:
        A fresh 2-D numpy array with a permitted element dtype

    Raises:
        DimensionError: If input is ragged or not 2-D
        ElementTypeError: If input is non-numeric or does not fit dtype
    """
    try:
        result = np.array(values)
    except ValueError as e:
        raise DimensionError(f"{name}: rows have inconsistent lengths: {e}") from e

    if result.dtype == object:
        raise ElementTypeError(
            f"{name}: converted to object dtype, indicating ragged rows, "
            f"mixed types or non-numeric data",
            dtype=result.dtype,
        )

    if result.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D data, got {result.ndim}D with shape {result.shape}",
            actual=result.shape,
        )

    as_element_dtype(result.dtype, name)
    if dtype is None:
        return result

    target = as_element_dtype(dtype, "dtype")
    if not _values_fit(result, target):
        raise ElementTypeError(
            f"{name}: {result.dtype} data cannot be represented as {target} without loss",
            dtype=target,
        )
    return result.astype(target)
