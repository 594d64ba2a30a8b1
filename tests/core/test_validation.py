"""
Tests for input validation utilities and the element-type constraint.

Validates every function in core/validation.py and core/dtypes.py:
    - check_dimension: integer, non-negative
    - check_index: zero-based range, no negative wrap-around
    - check_same_shape: shape mismatch reporting
    - check_element_value: lossless fit into the element type
    - check_array: ragged / non-numeric / non-2D rejection, per-value fit
    - common_dtype: lossless promotion between operands
    - as_element_dtype / infer_dtype / is_element_dtype
"""

import numpy as np
import pytest

from yamatrix.core.dtypes import (
    DEFAULT_DTYPE,
    as_element_dtype,
    common_dtype,
    infer_dtype,
    is_element_dtype,
)
from yamatrix.core.exceptions import (
    DimensionError,
    ElementTypeError,
    IndexOutOfRangeError,
    ValidationError,
)
from yamatrix.core.validation import (
    check_array,
    check_dimension,
    check_element_value,
    check_index,
    check_same_shape,
)


# ═══════════════════════════════════════════════════════════════════════
# check_dimension
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimension:

    def test_accepts_zero(self):
        assert check_dimension(0, "rows") == 0

    def test_accepts_numpy_integer(self):
        result = check_dimension(np.int32(3), "rows")
        assert result == 3
        assert type(result) is int

    def test_rejects_negative(self):
        with pytest.raises(DimensionError, match="rows: must be non-negative"):
            check_dimension(-1, "rows")

    def test_rejects_float(self):
        with pytest.raises(ValidationError, match="cols: expected an integer"):
            check_dimension(2.0, "cols")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="bool"):
            check_dimension(True, "rows")


# ═══════════════════════════════════════════════════════════════════════
# check_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_in_range(self):
        assert check_index(1, 2, 'row') == 1

    def test_upper_bound_exclusive(self):
        with pytest.raises(IndexOutOfRangeError, match=r"row index 2 out of range \[0, 2\)"):
            check_index(2, 2, 'row')

    def test_negative_not_wrapped(self):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            check_index(-1, 3, 'column')
        assert exc_info.value.index == -1
        assert exc_info.value.bound == 3
        assert exc_info.value.axis == 'column'

    def test_empty_axis(self):
        with pytest.raises(IndexOutOfRangeError):
            check_index(0, 0, 'row')

    def test_rejects_slice(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_index(slice(0, 1), 2, 'row')


# ═══════════════════════════════════════════════════════════════════════
# check_same_shape
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSameShape:

    def test_equal_shapes_pass(self):
        check_same_shape((2, 3), (2, 3), 'add')

    def test_mismatch(self):
        with pytest.raises(DimensionError, match="add: shape mismatch, 2x2 vs 3x2") as exc_info:
            check_same_shape((2, 2), (3, 2), 'add')
        assert exc_info.value.expected == (2, 2)
        assert exc_info.value.actual == (3, 2)

    def test_transposed_shapes_differ(self):
        with pytest.raises(DimensionError):
            check_same_shape((2, 3), (3, 2), 'equals')


# ═══════════════════════════════════════════════════════════════════════
# check_element_value
# ═══════════════════════════════════════════════════════════════════════


class TestCheckElementValue:

    @pytest.mark.parametrize("value, dtype", [
        (4, np.int64),
        (300, np.int16),
        (4, np.float64),
        (1.5, np.float32),
        (np.uint8(250), np.uint8),
        (-7, np.int8),
    ])
    def test_fits(self, value, dtype):
        check_element_value(value, np.dtype(dtype))

    @pytest.mark.parametrize("value, dtype", [
        (4.0, np.int64),
        (300, np.int8),
        (-1, np.uint32),
        (2 ** 70, np.int64),
    ])
    def test_does_not_fit(self, value, dtype):
        with pytest.raises(ElementTypeError, match="cannot be represented"):
            check_element_value(value, np.dtype(dtype))

    def test_rejects_bool(self):
        with pytest.raises(ElementTypeError, match="bool"):
            check_element_value(True, np.dtype(np.int64))

    def test_rejects_string(self):
        with pytest.raises(ElementTypeError, match="str"):
            check_element_value("4", np.dtype(np.int64))

    def test_rejects_complex(self):
        with pytest.raises(ElementTypeError):
            check_element_value(1 + 2j, np.dtype(np.float64))


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_int_data_keeps_integer_dtype(self):
        result = check_array([[1, 2], [3, 4]], "values")
        assert np.issubdtype(result.dtype, np.integer)
        np.testing.assert_array_equal(result, [[1, 2], [3, 4]])

    def test_copies_input(self):
        src = np.ones((2, 2))
        result = check_array(src, "values")
        result[0, 0] = 5.0
        assert src[0, 0] == 1.0

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError, match="values"):
            check_array([[1, 2], [3]], "values")

    def test_1d_rejected(self):
        with pytest.raises(DimensionError, match="expected 2D data, got 1D"):
            check_array([1, 2, 3], "values")

    def test_strings_rejected(self):
        with pytest.raises(ElementTypeError):
            check_array([["a", "b"]], "values")

    def test_bools_rejected(self):
        with pytest.raises(ElementTypeError, match="bool"):
            check_array([[True, False]], "values")

    def test_complex_rejected(self):
        with pytest.raises(ElementTypeError):
            check_array([[1 + 1j]], "values")

    def test_safe_cast_to_requested_dtype(self):
        result = check_array([[1, 2]], "values", dtype=np.float64)
        assert result.dtype == np.float64

    def test_float_data_into_int_rejected(self):
        with pytest.raises(ElementTypeError, match="float64 data cannot be represented as int64"):
            check_array([[1.5, 2.0]], "values", dtype=np.int64)

    def test_int_data_into_int8_when_values_fit(self):
        result = check_array([[1, -2], [127, -128]], "values", dtype=np.int8)
        assert result.dtype == np.int8
        np.testing.assert_array_equal(result, [[1, -2], [127, -128]])

    def test_int_data_into_int8_when_values_do_not_fit(self):
        with pytest.raises(ElementTypeError, match="int8"):
            check_array([[1, 128]], "values", dtype=np.int8)

    def test_negative_int_data_into_unsigned_rejected(self):
        with pytest.raises(ElementTypeError):
            check_array([[0, -1]], "values", dtype=np.uint16)

    def test_int_data_into_float32(self):
        result = check_array([[1, 2], [3, 4]], "values", dtype=np.float32)
        assert result.dtype == np.float32

    def test_float64_data_into_float32_range(self):
        assert check_array([[0.5, np.inf]], "values", dtype=np.float32).dtype == np.float32
        with pytest.raises(ElementTypeError):
            check_array([[1e300]], "values", dtype=np.float32)

    def test_empty_int_data_fits_any_int(self):
        assert check_array(np.zeros((0, 2), dtype=np.int64), "values", dtype=np.uint8).shape == (0, 2)

    def test_explicit_dtype_still_rejects_bools(self):
        with pytest.raises(ElementTypeError, match="bool"):
            check_array([[True]], "values", dtype=np.int64)


# ═══════════════════════════════════════════════════════════════════════
# dtypes
# ═══════════════════════════════════════════════════════════════════════


class TestElementDtype:

    def test_default_is_float64(self):
        assert DEFAULT_DTYPE == np.float64

    @pytest.mark.parametrize("dtype", [int, float, 'int8', np.uint16, np.float32, 'float64'])
    def test_permitted(self, dtype):
        assert is_element_dtype(dtype)
        assert as_element_dtype(dtype) == np.dtype(dtype)

    @pytest.mark.parametrize("dtype", [bool, complex, str, object, 'datetime64[s]'])
    def test_rejected(self, dtype):
        assert not is_element_dtype(dtype)
        with pytest.raises(ElementTypeError, match="not an integral or floating-point type"):
            as_element_dtype(dtype)

    def test_unknown_dtype(self):
        with pytest.raises(ElementTypeError, match="not a dtype"):
            as_element_dtype("no-such-type")

    def test_infer_python_scalars(self):
        assert infer_dtype(4) == np.int64
        assert infer_dtype(4.5) == np.float64

    def test_infer_numpy_scalar_keeps_dtype(self):
        assert infer_dtype(np.float32(1.0)) == np.float32
        assert infer_dtype(np.uint8(3)) == np.uint8

    def test_infer_rejects_bool(self):
        with pytest.raises(ElementTypeError):
            infer_dtype(True)


class TestCommonDtype:

    @pytest.mark.parametrize("left, right, expected", [
        (np.int64, np.int64, np.int64),
        (np.int8, np.uint8, np.int16),
        (np.int16, np.int32, np.int32),
        (np.float32, np.float64, np.float64),
    ])
    def test_lossless_promotion(self, left, right, expected):
        assert common_dtype(np.dtype(left), np.dtype(right), 'add') == expected

    @pytest.mark.parametrize("left, right", [
        (np.int64, np.float64),
        (np.float32, np.int8),
        (np.uint64, np.int64),
    ])
    def test_lossy_promotion_rejected(self, left, right):
        with pytest.raises(ElementTypeError, match="add: no lossless common element type"):
            common_dtype(np.dtype(left), np.dtype(right), 'add')
