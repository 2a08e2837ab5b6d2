"""Matrix addition, multiplication and transposition on lists of rows."""

from __future__ import annotations

Matrix = list[list[int]]


class ShapeError(ValueError):
    """Raised when matrix dimensions do not fit the operation."""


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ShapeError("rows have different lengths")
    return rows, cols


def add_matrices(a: Matrix, b: Matrix) -> Matrix:
    """Return the element-wise sum of two matrices of equal shape."""
    if _shape(a) != _shape(b):
        raise ShapeError("matrices must have the same shape")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def multiply_matrices(a: Matrix, b: Matrix) -> Matrix:
    """Return the matrix product ``a`` times ``b``."""
    _, cols_a = _shape(a)
    rows_b, _ = _shape(b)
    if cols_a != rows_b:
        raise ShapeError("Cannot multiply")
    columns = transpose(b)
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in a
    ]


def transpose(matrix: Matrix) -> Matrix:
    """Return a new matrix with rows and columns exchanged."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def transpose_in_place(matrix: Matrix) -> None:
    """Transpose a square matrix in place."""
    rows, cols = _shape(matrix)
    if rows != cols:
        raise ShapeError("matrix must be square")
    for i in range(rows):
        for j in range(i + 1, rows):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]


def format_matrix(matrix: Matrix) -> str:
    """Render each row as space-terminated values followed by a newline."""
    return "".join(
        "".join(f"{value} " for value in row) + "\n" for row in matrix
    )