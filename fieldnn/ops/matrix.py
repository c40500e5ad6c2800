"""Vector-matrix and matrix-matrix products over the field."""

from dataclasses import dataclass
from typing import List, Sequence

from fieldnn.ops.shapes import ShapeError, as_vector, check_length
from fieldnn.primitives.field import FF, FieldLike


@dataclass(frozen=True, eq=False)
class Matrix:
    """Row-major matrix with explicit dimensions.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        data: Flat row-major FF array of length rows * cols. Stored as a
            read-only copy of the input.
    """
    rows: int
    cols: int
    data: FF

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ShapeError(f"Matrix dimensions must be non-negative, got {self.rows}x{self.cols}")
        data = as_vector(self.data, "Matrix data")
        check_length(data, self.rows * self.cols, f"Matrix {self.rows}x{self.cols} data")
        # Read-only private copy
        data = data.copy()
        data.setflags(write=False)
        object.__setattr__(self, "data", data)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Matrix":
        """Build from nested rows; all rows must have the same length."""
        n_rows = len(rows)
        n_cols = len(rows[0]) if n_rows else 0
        for i, row in enumerate(rows):
            if len(row) != n_cols:
                raise ShapeError(f"Matrix row {i}: expected length {n_cols}, got {len(row)}")
        return cls(n_rows, n_cols, [v for row in rows for v in row])

    def row(self, i: int) -> FF:
        return self.data[i * self.cols:(i + 1) * self.cols].copy()

    def to_rows(self) -> List[List[int]]:
        return [[int(v) for v in self.row(i)] for i in range(self.rows)]

    def transpose(self) -> "Matrix":
        out = FF.Zeros(self.rows * self.cols)
        for i in range(self.rows):
            for j in range(self.cols):
                out[j * self.rows + i] = self.data[i * self.cols + j]
        return Matrix(self.cols, self.rows, out)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.cols == other.cols
            and [int(v) for v in self.data] == [int(v) for v in other.data]
        )


def mat_vec_mul(m: FieldLike, v: FieldLike, rows: int) -> FF:
    """Multiply a flattened rows x len(v) matrix by v.

    Args:
        m: Row-major matrix data, length rows * len(v)
        v: Vector of length M (the column count)
        rows: Number of matrix rows N

    Returns:
        Length-N FF array with out[i] = sum_j m[i*M + j] * v[j]
    """
    v = as_vector(v, "mat_vec_mul v")
    m = as_vector(m, "mat_vec_mul m")
    n_cols = len(v)
    check_length(m, rows * n_cols, f"mat_vec_mul m ({rows}x{n_cols})")

    out = FF.Zeros(rows)
    for i in range(rows):
        acc = FF(0)
        for j in range(n_cols):
            acc = acc + m[i * n_cols + j] * v[j]
        out[i] = acc
    return out


def mat_mul(x: Matrix, y: Matrix) -> Matrix:
    """Matrix product x @ y.

    Raises:
        ShapeError: If x.cols != y.rows
    """
    if x.cols != y.rows:
        raise ShapeError(f"mat_mul: x is {x.rows}x{x.cols} but y is {y.rows}x{y.cols}")

    out = FF.Zeros(x.rows * y.cols)
    for i in range(x.rows):
        for j in range(y.cols):
            acc = FF(0)
            for k in range(x.cols):
                acc = acc + x.data[i * x.cols + k] * y.data[k * y.cols + j]
            out[i * y.cols + j] = acc
    return Matrix(x.rows, y.cols, out)
