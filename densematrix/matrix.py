"""Dense matrices of floats with element-wise and matrix arithmetic."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from numbers import Real

EPSILON = 1e-7


class MatrixError(Exception):
    """Base class for matrix errors."""


class IncorrectMatrixError(MatrixError):
    """Raised when a matrix or operand is missing or malformed."""


class CalculationError(MatrixError):
    """Raised when an operation cannot be carried out on valid matrices."""


class Matrix:
    """A rectangular matrix of floats with at least one row and one column."""

    __slots__ = ("_data",)

    def __init__(self, rows: int, columns: int) -> None:
        if rows <= 0 or columns <= 0:
            raise IncorrectMatrixError(
                f"matrix dimensions must be positive, got {rows}x{columns}"
            )
        self._data: list[list[float]] = [[0.0] * columns for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        data = [[float(value) for value in row] for row in rows]
        if not data or not data[0]:
            raise IncorrectMatrixError("matrix must have at least one row and column")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise IncorrectMatrixError("all rows must have the same length")
        matrix = cls(len(data), width)
        matrix._data = data
        return matrix

    @property
    def rows(self) -> int:
        return len(self._data)

    @property
    def columns(self) -> int:
        return len(self._data[0])

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.columns

    def __getitem__(self, index: int | tuple[int, int]) -> float | tuple[float, ...]:
        if isinstance(index, tuple):
            row, column = index
            return self._data[row][column]
        return tuple(self._data[index])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, column = index
        self._data[row][column] = float(value)

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return (tuple(row) for row in self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}.from_rows({self.to_lists()!r})"

    def to_lists(self) -> list[list[float]]:
        """Return a copy of the elements as a list of row lists."""
        return [list(row) for row in self._data]

    def equals(self, other: object) -> bool:
        """Compare shapes and elements, allowing a difference of up to 1e-7."""
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        return all(
            abs(a - b) <= EPSILON
            for row_a, row_b in zip(self._data, other._data)
            for a, b in zip(row_a, row_b)
        )

    def _all_finite(self) -> bool:
        return all(math.isfinite(value) for row in self._data for value in row)

    def _check_operand(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            raise IncorrectMatrixError("operand is not a matrix")
        if not (self._all_finite() and other._all_finite()):
            raise CalculationError("matrices contain non-finite values")
        return other

    def _elementwise(self, other: object, op) -> Matrix:
        other = self._check_operand(other)
        if self.shape != other.shape:
            raise CalculationError(
                f"shapes {self.shape} and {other.shape} do not match"
            )
        return Matrix.from_rows(
            [op(a, b) for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._data, other._data)
        )

    def add(self, other: Matrix) -> Matrix:
        """Return the element-wise sum."""
        return self._elementwise(other, lambda a, b: a + b)

    def sub(self, other: Matrix) -> Matrix:
        """Return the element-wise difference."""
        return self._elementwise(other, lambda a, b: a - b)

    def mult_number(self, number: float) -> Matrix:
        """Return the matrix scaled by a finite number."""
        if not math.isfinite(number):
            raise CalculationError("multiplier must be finite")
        if not self._all_finite():
            raise CalculationError("matrix contains non-finite values")
        return Matrix.from_rows([value * number for value in row] for row in self._data)

    def mult_matrix(self, other: Matrix) -> Matrix:
        """Return the matrix product self × other."""
        other = self._check_operand(other)
        if self.columns != other.rows:
            raise CalculationError(
                f"cannot multiply {self.shape} by {other.shape}"
            )
        other_columns = list(zip(*other._data))
        return Matrix.from_rows(
            [sum(a * b for a, b in zip(row, column)) for column in other_columns]
            for row in self._data
        )

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Real) and not isinstance(other, bool):
            return self.mult_number(float(other))
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix:
        return self.__mul__(other)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.mult_matrix(other)

    def minor(self, row: int, column: int) -> Matrix:
        """Return the matrix with the given row and column removed."""
        if self.rows < 2 or self.columns < 2:
            raise CalculationError("a minor needs at least two rows and columns")
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(f"position ({row}, {column}) is outside the matrix")
        return Matrix.from_rows(
            [value for j, value in enumerate(values) if j != column]
            for i, values in enumerate(self._data)
            if i != row
        )


def _as_sequence(rows: Sequence[Sequence[float]]) -> list[list[float]]:
    return [list(map(float, row)) for row in rows]