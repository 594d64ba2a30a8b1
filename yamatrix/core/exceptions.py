"""
Exception hierarchy for yamatrix.

All exceptions inherit from YamatrixError to allow catching any
library-specific error. Caller-contract violations (bad shapes, bad
indices, bad element types) are raised before any state is touched.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Index and type errors also subclass the matching builtin, so
      ``except IndexError`` and ``except TypeError`` keep working
"""


class YamatrixError(Exception):
    """Base exception for all yamatrix errors."""
    pass


class ValidationError(YamatrixError):
    """
    Input validation failed.

    Raised when caller-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when two operands of an element-wise operation have different
    shapes, when a dimension is negative, or when nested input is ragged.

    Attributes:
        expected: Expected (rows, cols) shape, if applicable
        actual: Actual (rows, cols) shape, if applicable
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | None = None,
        actual: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Row or column index outside ``[0, bound)``.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound for the axis
        axis: 'row' or 'column'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class ElementTypeError(ValidationError, TypeError):
    """
    Element type is not integral or floating point, or a value cannot be
    represented in the matrix element type.

    Attributes:
        dtype: The dtype involved, if known
    """

    def __init__(self, message: str, dtype=None):
        super().__init__(message)
        self.dtype = dtype


class MovedFromError(YamatrixError):
    """
    Matrix was used after its storage was transferred away.

    ``Matrix.transfer()`` hands the storage to a new instance; the source
    must not be referenced afterwards.
    """
    pass
