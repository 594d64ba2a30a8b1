"""
Matrix container module.

Public API:
    Matrix     - dense 2-D container over an integral or floating element type
    MatrixRow  - bounds-checked live view of one row, returned by ``m[i]``
"""

from yamatrix.matrix.matrix import Matrix
from yamatrix.matrix.row import MatrixRow

__all__ = [
    "Matrix",
    "MatrixRow",
]
