"""
Augmented linear systems over GF(2^8) and their Gaussian elimination
"""

import logging
from typing import List, Optional, Sequence

from .errors import InvalidArgumentError, SingularMatrixError
from .finite_field import GF256, default_field
from .polynomial import Point

logger = logging.getLogger(__name__)


class GF256Matrix:
    """
    N x (N+1) augmented matrix over GF(2^8).

    The left N columns hold the coefficient matrix and the last column the
    right-hand side. Every stage of the solver returns a new matrix; the
    receiver is never modified.
    """

    def __init__(self, rows: Sequence[Sequence[int]], field: Optional[GF256] = None):
        """
        Initialize matrix from raw rows.

        Args:
            rows: N rows of N+1 field elements each
            field: GF(2^8) implementation
        """
        if not rows or any(len(row) != len(rows) + 1 for row in rows):
            raise InvalidArgumentError("matrix should be NxN+1 (N > 0)")

        self.field = field or default_field()
        self._data = [list(row) for row in rows]

    @classmethod
    def from_points(cls, points: Sequence[Point], field: Optional[GF256] = None) -> 'GF256Matrix':
        """
        Build the system whose solution is the polynomial through points.

        Row i is [x_i^(N-1), ..., x_i, 1 | y_i].
        """
        if not points:
            raise InvalidArgumentError("points should not be empty")

        field = field or default_field()
        size = len(points)
        rows = []
        for x, y in points:
            row = [0] * (size + 1)
            row[size] = y
            row[size - 1] = 1
            for j in range(size - 2, -1, -1):
                row[j] = field.mul(row[j + 1], x)
            rows.append(row)

        return cls(rows, field)

    @property
    def row_count(self) -> int:
        return len(self._data)

    @property
    def column_count(self) -> int:
        return len(self._data[0])

    @property
    def rows(self) -> List[List[int]]:
        return [list(row) for row in self._data]

    def row(self, index: int) -> List[int]:
        if not 0 <= index < self.row_count:
            raise IndexError(f"row index {index} out of range")
        return list(self._data[index])

    def column(self, index: int) -> List[int]:
        if not 0 <= index < self.column_count:
            raise IndexError(f"column index {index} out of range")
        return [row[index] for row in self._data]

    def last_column(self) -> List[int]:
        return self.column(self.column_count - 1)

    def solve(self) -> 'GF256Matrix':
        """
        Gaussian elimination.

        Returns:
            Matrix whose left part is the identity and whose last column is
            the solution vector

        Raises:
            SingularMatrixError: no unique solution exists
        """
        solved = self.eliminate_forward().substitute_backward().normalize()
        logger.debug("Solved %dx%d system", self.row_count, self.column_count)
        return solved

    def eliminate_forward(self) -> 'GF256Matrix':
        """Reduce to upper-triangular form"""
        field = self.field
        size = self.row_count
        mat = self.rows

        for i in range(size - 1):
            if mat[i][i] == 0:
                for j in range(i + 1, size):
                    if mat[j][i] != 0:
                        mat[i], mat[j] = mat[j], mat[i]
                        break
                else:
                    raise SingularMatrixError(
                        f"No nonzero pivot in column {i}",
                        details={"column": i, "rows": size}
                    )

            for j in range(i + 1, size):
                if mat[j][i] == 0:
                    continue
                divider = field.div(mat[i][i], mat[j][i])
                mat[j] = [
                    field.sub(value, field.div(pivot_value, divider))
                    for value, pivot_value in zip(mat[j], mat[i])
                ]

        if mat[size - 1][size - 1] == 0:
            raise SingularMatrixError(
                f"No nonzero pivot in column {size - 1}",
                details={"column": size - 1, "rows": size}
            )

        return GF256Matrix(mat, field)

    def substitute_backward(self) -> 'GF256Matrix':
        """
        Clear entries above the diagonal of an upper-triangular matrix.

        Rows are processed bottom-up, so when row i is used every entry of it
        between the diagonal and the last column is already zero and only
        the last column needs updating.
        """
        field = self.field
        size = self.row_count
        last = self.column_count - 1
        mat = self.rows

        for i in range(size - 1, 0, -1):
            if mat[i][i] == 0:
                raise SingularMatrixError(
                    f"Zero diagonal entry in row {i}",
                    details={"column": i, "rows": size}
                )
            for j in range(i - 1, -1, -1):
                if mat[j][i] == 0:
                    continue
                divider = field.div(mat[i][i], mat[j][i])
                mat[j][i] = 0
                mat[j][last] = field.sub(mat[j][last], field.div(mat[i][last], divider))

        return GF256Matrix(mat, field)

    def normalize(self) -> 'GF256Matrix':
        """Divide every row by its diagonal entry"""
        field = self.field
        mat = self.rows

        for i, row in enumerate(mat):
            divider = row[i]
            if divider == 0:
                raise SingularMatrixError(
                    f"Zero diagonal entry in row {i}",
                    details={"column": i, "rows": self.row_count}
                )
            mat[i] = [field.div(value, divider) for value in row]

        return GF256Matrix(mat, field)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GF256Matrix):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        body = "\n".join(" ".join(str(v) for v in row) for row in self._data)
        return f"GF256Matrix(\n{body}\n)"
