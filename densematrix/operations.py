"""Transpose, determinant, cofactor matrix and inverse of dense matrices."""

from __future__ import annotations

from densematrix.matrix import CalculationError, IncorrectMatrixError, Matrix


def _require_matrix(matrix: object) -> Matrix:
    if not isinstance(matrix, Matrix):
        raise IncorrectMatrixError("operand is not a matrix")
    return matrix


def _require_square(matrix: Matrix) -> None:
    if matrix.rows != matrix.columns:
        raise CalculationError(f"matrix of shape {matrix.shape} is not square")


def transpose(matrix: Matrix) -> Matrix:
    """Return the transposed matrix."""
    matrix = _require_matrix(matrix)
    return Matrix.from_rows(zip(*matrix))


def determinant(matrix: Matrix) -> float:
    """Return the determinant, expanding along the first row."""
    matrix = _require_matrix(matrix)
    _require_square(matrix)
    size = matrix.rows
    if size == 1:
        return matrix[0, 0]
    if size == 2:
        return matrix[0, 0] * matrix[1, 1] - matrix[1, 0] * matrix[0, 1]
    total = 0.0
    for column, value in enumerate(matrix[0]):
        sign = -1.0 if column % 2 else 1.0
        total += determinant(matrix.minor(0, column)) * (value * sign)
    return total


def calc_complements(matrix: Matrix) -> Matrix:
    """Return the matrix of algebraic complements (cofactors).

    A 1x1 matrix has no minors, so its single complement is 0.
    """
    matrix = _require_matrix(matrix)
    _require_square(matrix)
    size = matrix.rows
    if size == 1:
        return Matrix(1, 1)
    return Matrix.from_rows(
        [
            determinant(matrix.minor(i, j)) * (-1.0 if (i + j) % 2 else 1.0)
            for j in range(size)
        ]
        for i in range(size)
    )


def inverse_matrix(matrix: Matrix) -> Matrix:
    """Return the inverse of a square matrix with a non-zero determinant."""
    matrix = _require_matrix(matrix)
    _require_square(matrix)
    det = determinant(matrix)
    if det == 0.0:
        raise CalculationError("matrix is singular")
    if matrix.rows == 1:
        return Matrix.from_rows([[1 / det]])
    return transpose(calc_complements(matrix)).mult_number(1 / det)