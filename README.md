# densematrix

A small, dependency-free library for dense matrices of floating-point
numbers. It provides element-wise arithmetic, scaling, matrix products,
minors, transposition, determinants, matrices of cofactors and inverses.
Invalid input is reported with exceptions.

## Creating matrices

```python
from densematrix.matrix import Matrix

zeros = Matrix(2, 3)  # 2 rows, 3 columns, filled with 0.0
a = Matrix.from_rows([[1, 2], [3, 4]])

a.rows        # 2
a.columns     # 2
a.shape       # (2, 2)
a[0, 1]       # 2.0
a[0]          # (1.0, 2.0), a row as a tuple
a[1, 0] = 5
list(a)       # [(1.0, 2.0), (5.0, 4.0)]
a.to_lists()  # [[1.0, 2.0], [5.0, 4.0]]
```

A matrix must have at least one row and one column. `Matrix(rows, columns)`
with a zero or negative size, and `Matrix.from_rows` with no rows, empty rows
or rows of different lengths, raise `IncorrectMatrixError`. Values are stored
as floats.

## Arithmetic

```python
b = Matrix.from_rows([[0, 1], [1, 2]])

a.add(b)          # same as a + b
a.sub(b)          # same as a - b
a.mult_number(2)  # same as a * 2 or 2 * a
a.mult_matrix(b)  # same as a @ b
```

Each operation returns a new matrix and leaves its operands unchanged.

- `add` and `sub` need operands of the same shape.
- `mult_matrix` needs the left operand's column count to equal the right
  operand's row count.
- A shape mismatch, or a NaN or infinity in an operand or in the number passed
  to `mult_number`, raises `CalculationError`.
- Passing something other than a `Matrix` to `add`, `sub` or `mult_matrix`
  raises `IncorrectMatrixError`. The operators `+`, `-`, `*` and `@` return
  `NotImplemented` for unsupported operand types, so Python raises
  `TypeError`; `*` accepts real numbers (not booleans).

## Comparison

`a.equals(b)` is true when `b` is a matrix of the same shape whose elements
each differ from `a`'s by at most `1e-7`; for anything that is not a matrix it
returns `False`. `a == b` does the same for two matrices. Matrices are mutable
and not hashable.

## Minors

`a.minor(row, column)` returns a new matrix with the given row and column
removed. It raises `CalculationError` when the matrix has fewer than two rows
or columns, and `IndexError` when the position lies outside the matrix.

## Operations

```python
from densematrix.matrix import Matrix
from densematrix.operations import (
    calc_complements,
    determinant,
    inverse_matrix,
    transpose,
)

m = Matrix.from_rows([[2, 5, 7], [6, 3, 4], [5, -2, -3]])

transpose(m)
determinant(m)       # -1.0
calc_complements(m)  # matrix of cofactors
inverse_matrix(m)    # [[1, -1, 1], [-38, 41, -34], [27, -29, 24]]
```

- `transpose` works on any matrix.
- `determinant`, `calc_complements` and `inverse_matrix` need a square
  matrix; otherwise they raise `CalculationError`.
- Determinants are computed by cofactor expansion along the first row, so
  they suit small matrices.
- The cofactor matrix of a 1x1 matrix is a 1x1 zero matrix.
- `inverse_matrix` raises `CalculationError` when the determinant is exactly
  zero. For larger matrices it is the transposed cofactor matrix divided by
  the determinant.
- Passing something other than a `Matrix` raises `IncorrectMatrixError`.

## Errors

Every error the library raises on its own account is a `MatrixError`:

- `IncorrectMatrixError`: a matrix is malformed or an operand is not a
  matrix.
- `CalculationError`: the matrices are valid but the operation cannot be
  carried out, for example because the shapes do not match, a value is not
  finite, or the matrix is singular.

```python
from densematrix.matrix import CalculationError, Matrix

try:
    Matrix(2, 2) + Matrix(2, 3)
except CalculationError:
    ...
```

## Benchmark

The package installs a command that adds two square zero matrices and prints
the time the sum took:

```
densematrix-bench 500
```

The optional argument is the number of rows and columns; it defaults to
20000, which needs a great deal of memory with plain Python lists, so pass a
smaller size on most machines. The same measurement is available in code as
`densematrix.bench.timed_sum(size)`, which returns the elapsed seconds.

## What it does not do

There is no function for printing a matrix in a grid layout (use `to_lists()`
or `repr()`), and no decomposition-based solvers: determinants and inverses
rely on cofactor expansion only.