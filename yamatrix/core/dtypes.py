"""
Element-type constraint for matrices.

A matrix element type is a numpy dtype of integer (signed or unsigned) or
floating-point kind. Everything else (bool, complex, str, object,
datetime) is rejected at the construction boundary.
"""

from typing import Any, Final

import numpy as np

from yamatrix.core.exceptions import ElementTypeError


# dtype used when neither dtype nor an initial value is given
DEFAULT_DTYPE: Final[np.dtype] = np.dtype(np.float64)

# numpy dtype kinds accepted as element types: signed, unsigned, floating
PERMITTED_KINDS: Final[frozenset[str]] = frozenset({'i', 'u', 'f'})


def is_element_dtype(dtype: Any) -> bool:
    """True if ``dtype`` is a permitted matrix element type."""
    try:
        resolved = np.dtype(dtype)
    except TypeError:
        return False
    return resolved.kind in PERMITTED_KINDS


def as_element_dtype(dtype: Any, name: str = "dtype") -> np.dtype:
    """
    Resolve ``dtype`` to a numpy dtype and verify it is permitted.

    Args:
        dtype: Anything ``np.dtype`` accepts (int, float, 'int32', np.float32, ...)
        name: Parameter name for error messages

    Returns:
        The resolved numpy dtype

    Raises:
        ElementTypeError: If the dtype is unknown or not integral/floating
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ElementTypeError(f"{name}: not a dtype: {dtype!r}", dtype=dtype) from e

    if resolved.kind not in PERMITTED_KINDS:
        raise ElementTypeError(
            f"{name}: {resolved} is not an integral or floating-point type",
            dtype=resolved,
        )
    return resolved


def infer_dtype(value: Any) -> np.dtype:
    """
    Natural element type of a scalar.

    Python int -> int64, Python float -> float64, numpy scalars keep their
    own dtype. Raises ElementTypeError for bools and non-numeric values.
    """
    if isinstance(value, (bool, np.bool_)):
        raise ElementTypeError(f"bool is not a numeric element type: {value!r}")
    if isinstance(value, np.generic):
        return as_element_dtype(value.dtype, "init_val")
    if isinstance(value, int):
        return np.dtype(np.int64)
    if isinstance(value, float):
        return np.dtype(np.float64)
    raise ElementTypeError(
        f"init_val: {type(value).__name__} is not an integral or floating-point value"
    )


def common_dtype(left: np.dtype, right: np.dtype, operation: str) -> np.dtype:
    """
    Element type shared by two operands of an element-wise operation.

    Only value-preserving promotions are allowed: integer with integer when
    numpy promotes to an integer type (int8 + uint8 -> int16), and floating
    with floating (float32 + float64 -> float64). Integer mixed with
    floating, and int64 with uint64 (which numpy promotes to float64), are
    rejected since large integers would be rounded.

    Raises:
        ElementTypeError: If no value-preserving common type exists
    """
    result = np.result_type(left, right)
    integral = left.kind in 'iu' and right.kind in 'iu' and result.kind in 'iu'
    floating = left.kind == 'f' and right.kind == 'f'
    if not (integral or floating):
        raise ElementTypeError(
            f"{operation}: no lossless common element type for {left} and {right}",
            dtype=result,
        )
    return result
