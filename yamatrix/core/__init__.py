"""
Core infrastructure for yamatrix.

Key components:
    exceptions: Exception hierarchy
    dtypes: Element-type constraint and defaults
    validation: Input validators
"""

from yamatrix.core.dtypes import DEFAULT_DTYPE, PERMITTED_KINDS, is_element_dtype
from yamatrix.core.exceptions import (
    YamatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    ElementTypeError,
    MovedFromError,
)

__all__ = [
    # Configuration
    "DEFAULT_DTYPE",
    "PERMITTED_KINDS",
    "is_element_dtype",
    # Exceptions
    "YamatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "ElementTypeError",
    "MovedFromError",
]
