"""
yamatrix: Yet Another Matrix Library.

A small generic two-dimensional matrix container for Python, parameterized
over an integral or floating-point numpy element type.

Submodules:
    core: Exceptions, element-type constraint, validators
    matrix: The Matrix container
    demo: Command-line demonstration (``python -m yamatrix``)
"""

__version__ = "1.0.0"
__author__ = "Francisco Viramontes"

from yamatrix.core.exceptions import (
    YamatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    ElementTypeError,
    MovedFromError,
)
from yamatrix.matrix import Matrix, MatrixRow

__all__ = [
    "__version__",
    "Matrix",
    "MatrixRow",
    "YamatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "ElementTypeError",
    "MovedFromError",
]
